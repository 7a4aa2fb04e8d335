"""Shared pytest configuration."""

pytest_plugins = ["labelbus.testing.fixtures"]
