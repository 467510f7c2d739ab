"""Core infrastructure: configuration, extensions, logging and error handling."""
