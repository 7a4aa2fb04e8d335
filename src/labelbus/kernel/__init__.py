"""Kernel – errors, message model and time primitives shared by every layer."""
