"""Infrastructure: storage backends, upload sources, and record persistence."""
