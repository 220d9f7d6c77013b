"""Persistence: SQLAlchemy engine, ORM models, and the file record repository."""
