"""Tests for CLI commands."""

import re
import pytest

from dancelog.cli.main import cli
from dancelog.database.repository import STORAGE_KEY, RecordRepository


def _invoke(cli_runner, temp_db, *args, **kwargs):
    return cli_runner.invoke(cli, ["--db-path", temp_db.database_path, *args], **kwargs)


def _added_id(output):
    match = re.search(r"ID: (\S+)", output)
    assert match is not None
    return match.group(1)


def _stored(temp_db):
    return RecordRepository(temp_db).load()


def test_add_with_all_options(cli_runner, temp_db):
    """Test adding a record non-interactively."""
    result = _invoke(
        cli_runner, temp_db, "add", "--date", "2024-05-01", "--institution", "dilebeibei", "--amount", "100"
    )

    assert result.exit_code == 0
    assert "Logged session" in result.output
    assert "迪乐贝贝" in result.output
    assert "¥100.00" in result.output
    records = _stored(temp_db)
    assert len(records) == 1
    assert records[0].date == "2024-05-01"


def test_add_other_institution(cli_runner, temp_db):
    """Test adding a record for a custom institution."""
    result = _invoke(
        cli_runner,
        temp_db,
        "add",
        "--date",
        "2024-05-15",
        "--institution",
        "其他",
        "--custom-institution",
        "私教课",
        "--amount",
        "50",
    )

    assert result.exit_code == 0
    assert _stored(temp_db)[0].custom_institution == "私教课"


def test_add_prompts_for_missing_fields(cli_runner, temp_db):
    """Test the interactive add flow."""
    result = _invoke(cli_runner, temp_db, "add", input="2024-05-15\nother\n私教课\n80\n")

    assert result.exit_code == 0
    assert "Institution name" in result.output
    record = _stored(temp_db)[0]
    assert record.date == "2024-05-15"
    assert record.custom_institution == "私教课"
    assert str(record.amount) == "80"


def test_add_custom_name_ignored_for_named_institution(cli_runner, temp_db):
    """Test that a stray custom name is dropped."""
    result = _invoke(
        cli_runner,
        temp_db,
        "add",
        "--date",
        "2024-05-01",
        "--institution",
        "bank",
        "--custom-institution",
        "stale",
        "--amount",
        "10",
    )

    assert result.exit_code == 0
    assert _stored(temp_db)[0].custom_institution is None


@pytest.mark.parametrize(
    "args,message",
    [
        (["--institution", "dilebeibei", "--amount", "abc"], "Invalid amount"),
        (["--institution", "dilebeibei", "--amount=-3"], "Invalid amount"),
        (["--institution", "nowhere", "--amount", "10"], "Unknown institution"),
        (["--institution", "other", "--custom-institution", "  ", "--amount", "10"], "Custom institution name is required"),
    ],
)
def test_add_rejects_invalid_input(cli_runner, temp_db, args, message):
    """Test that invalid submissions are rejected without storing anything."""
    result = _invoke(cli_runner, temp_db, "add", "--date", "2024-05-01", *args)

    assert result.exit_code == 1
    assert message in result.output
    assert _stored(temp_db) == []


def test_add_rejects_invalid_date(cli_runner, temp_db):
    """Test an unparseable date."""
    result = _invoke(cli_runner, temp_db, "add", "--date", "not a date", "--institution", "bank", "--amount", "1")

    assert result.exit_code == 1
    assert "Invalid date" in result.output


def test_show_record(cli_runner, temp_db):
    """Test showing a record."""
    added = _invoke(cli_runner, temp_db, "add", "--date", "2024-05-01", "--institution", "bank", "--amount", "10")
    record_id = _added_id(added.output)

    result = _invoke(cli_runner, temp_db, "record", "show", record_id)

    assert result.exit_code == 0
    assert "进出口银行" in result.output


def test_show_missing_record(cli_runner, temp_db):
    """Test showing an unknown record."""
    result = _invoke(cli_runner, temp_db, "record", "show", "nope")

    assert result.exit_code == 1
    assert "Record nope not found" in result.output


def test_update_record_amount_only(cli_runner, temp_db):
    """Test that unspecified fields keep their values."""
    added = _invoke(
        cli_runner,
        temp_db,
        "add",
        "--date",
        "2024-05-15",
        "--institution",
        "other",
        "--custom-institution",
        "私教课",
        "--amount",
        "50",
    )
    record_id = _added_id(added.output)

    result = _invoke(cli_runner, temp_db, "record", "update", record_id, "--amount", "75")

    assert result.exit_code == 0
    assert "Updated record" in result.output
    record = _stored(temp_db)[0]
    assert record.id == record_id
    assert record.custom_institution == "私教课"
    assert str(record.amount) == "75"


def test_update_to_named_institution_clears_custom_name(cli_runner, temp_db):
    """Test that switching away from "other" clears the custom name."""
    added = _invoke(
        cli_runner,
        temp_db,
        "add",
        "--date",
        "2024-05-15",
        "--institution",
        "other",
        "--custom-institution",
        "私教课",
        "--amount",
        "50",
    )
    record_id = _added_id(added.output)

    result = _invoke(cli_runner, temp_db, "record", "update", record_id, "--institution", "dilebeibei")

    assert result.exit_code == 0
    assert _stored(temp_db)[0].custom_institution is None


def test_update_missing_record(cli_runner, temp_db):
    """Test updating an unknown record leaves storage untouched."""
    _invoke(cli_runner, temp_db, "add", "--date", "2024-05-01", "--institution", "bank", "--amount", "10")
    before = temp_db.get_item(STORAGE_KEY)

    result = _invoke(cli_runner, temp_db, "record", "update", "nope", "--amount", "5")

    assert result.exit_code == 1
    assert "Record nope not found" in result.output
    assert temp_db.get_item(STORAGE_KEY) == before


def test_delete_record_with_confirmation(cli_runner, temp_db):
    """Test deleting after confirming."""
    added = _invoke(cli_runner, temp_db, "add", "--date", "2024-05-01", "--institution", "bank", "--amount", "10")
    record_id = _added_id(added.output)

    result = _invoke(cli_runner, temp_db, "record", "delete", record_id, input="y\n")

    assert result.exit_code == 0
    assert f"Deleted record {record_id}" in result.output
    assert _stored(temp_db) == []


def test_delete_record_cancelled(cli_runner, temp_db):
    """Test declining the confirmation."""
    added = _invoke(cli_runner, temp_db, "add", "--date", "2024-05-01", "--institution", "bank", "--amount", "10")
    record_id = _added_id(added.output)

    result = _invoke(cli_runner, temp_db, "record", "delete", record_id, input="n\n")

    assert result.exit_code == 0
    assert "Deletion cancelled." in result.output
    assert len(_stored(temp_db)) == 1


def test_delete_missing_record(cli_runner, temp_db):
    """Test deleting an unknown record."""
    result = _invoke(cli_runner, temp_db, "record", "delete", "nope", "--yes")

    assert result.exit_code == 1
    assert "Record nope not found" in result.output


def test_institutions(cli_runner, temp_db):
    """Test listing institutions."""
    result = _invoke(cli_runner, temp_db, "institutions")

    assert result.exit_code == 0
    assert "迪乐贝贝" in result.output
    assert "进出口银行" in result.output
    assert "其他" in result.output


def test_help_does_not_require_store(cli_runner):
    """Test that --help works without touching storage."""
    result = cli_runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "dance teaching session log" in result.output


def test_invalid_log_level(cli_runner, temp_db):
    """Test that an unknown log level is a usage error."""
    result = _invoke(cli_runner, temp_db, "--log-level", "chatty", "institutions")

    assert result.exit_code == 2
