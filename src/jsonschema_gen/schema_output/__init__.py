"""Schema output exports."""

from .schema_sink import DirectorySink, SchemaPersistenceError, SchemaSink

__all__ = ["DirectorySink", "SchemaPersistenceError", "SchemaSink"]
