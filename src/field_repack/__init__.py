"""Propose field-by-field mappings between two record types."""
