"""Domain layer for dancelog: entities, validation, the record store and monthly aggregation."""
