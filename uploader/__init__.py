"""File ingestion service: validate, store, retrieve, and delete uploaded files."""
