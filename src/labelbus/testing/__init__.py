"""Testing support – fakes and fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["labelbus.testing.fixtures"]
"""

from labelbus.testing.fakes import FakeClock, RecordingReceiver

__all__ = ["FakeClock", "RecordingReceiver"]
