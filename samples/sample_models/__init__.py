"""Sample data classes for schema generation."""
