"""Collaborators used by run loggers (file system, status store, formatting, catalog)."""
