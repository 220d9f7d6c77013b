"""HTTP adapter: thin FastAPI routes over the file use cases."""
