"""Adapters – bridges from stream trees to third-party logging backends."""
