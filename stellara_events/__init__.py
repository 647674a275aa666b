"""Stellara Events -- standardized, schema-versioned domain event emission."""

__version__ = "1.0.0"
