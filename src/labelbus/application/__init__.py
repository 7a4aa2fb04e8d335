"""Application – producer, wiring and reusable pipeline stages built on streams."""
