"""Use cases: file upload, download, and deletion."""
