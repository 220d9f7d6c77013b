"""Application layer: DTOs, ports, validation, and file use cases."""
