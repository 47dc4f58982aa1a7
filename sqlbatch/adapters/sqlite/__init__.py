from sqlbatch.adapters.sqlite.transport import SqliteTransport, sqlite_type_coercion_map

__all__ = ("SqliteTransport", "sqlite_type_coercion_map")
