"""SyncWatch - live log viewer and unified monitor for DataSync."""

__version__ = "0.3.0"
