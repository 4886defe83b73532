"""REST API access for SyncWatch controllers."""

from syncwatch.controllers.api.client import DataSyncClient

__all__ = [
    "DataSyncClient",
]
