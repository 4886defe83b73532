"""Controllers for SyncWatch data sources."""

from syncwatch.controllers.api.client import DataSyncClient
from syncwatch.controllers.base.base_controller import BaseController
from syncwatch.controllers.logs.controller import LogsController
from syncwatch.controllers.monitor.controller import MonitorController

__all__ = [
    "BaseController",
    "DataSyncClient",
    "LogsController",
    "MonitorController",
]
