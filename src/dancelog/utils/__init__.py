"""Utility functions for dancelog."""

from dancelog.utils.date_parser import parse_date, parse_month_key
from dancelog.utils.amount_parser import parse_amount
from dancelog.utils.id_generator import generate_record_id

__all__ = ["parse_date", "parse_month_key", "parse_amount", "generate_record_id"]
