"""External resources: storage backends and upload source adapters."""
