"""Shared helpers: text search, logging and typed errors."""
