"""Telemetry: logging configuration."""

from uploader.shared.telemetry.logging import FileContextFilter, setup_logging

__all__ = ["FileContextFilter", "setup_logging"]
