"""Core infrastructure: configuration, logging and the exception hierarchy."""
