"""Testing fixtures – pytest fixtures for stream tests.

Enable in a ``conftest.py``::

    pytest_plugins = ["labelbus.testing.fixtures"]
"""
from labelbus.testing.fixtures.streams import fake_clock, recording_receiver, root_stream

__all__ = ["fake_clock", "recording_receiver", "root_stream"]
