"""Scalar constants for the TUI.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "SyncWatch"
USER_AGENT: Final = "syncwatch/0.3"

# ============================================================================
# Filter values
# ============================================================================

FILTER_ALL: Final = "ALL"
LOG_LEVELS: Final = ("ALL", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Default group keys for records missing the grouping field
UNKNOWN_GROUP: Final = "Unknown"
DEFAULT_LOG_CATEGORY: Final = "SYSTEM"
DEFAULT_LOG_LEVEL: Final = "UNKNOWN"
DEFAULT_SCHEMA: Final = "public"
NOT_AVAILABLE: Final = "N/A"

# ============================================================================
# Tree ordering
# ============================================================================

LOG_LEVEL_PRIORITY: Final = ("ERROR", "WARNING", "INFO", "DEBUG", "TRACE")
DB_ENGINE_PRIORITY: Final = ("PostgreSQL", "MariaDB", "MSSQL", "Oracle", "MongoDB")
ROLE_PRIORITY: Final = ("admin", "user", "viewer", "analytics", "reporting")

# Query performance tiers, best first
PERFORMANCE_TIERS: Final = ("EXCELLENT", "GOOD", "FAIR", "POOR")

# ============================================================================
# Metric channels
# ============================================================================

CHANNEL_CPU: Final = "cpu"
CHANNEL_MEMORY: Final = "memory"
CHANNEL_NETWORK: Final = "network"
CHANNEL_THROUGHPUT: Final = "throughput"
CHANNEL_DB_CONNECTIONS: Final = "db_connections"
CHANNEL_DB_QPS: Final = "db_queries_per_second"
CHANNEL_DB_EFFICIENCY: Final = "db_query_efficiency"

METRIC_CHANNELS: Final = (
    CHANNEL_CPU,
    CHANNEL_MEMORY,
    CHANNEL_NETWORK,
    CHANNEL_THROUGHPUT,
    CHANNEL_DB_CONNECTIONS,
    CHANNEL_DB_QPS,
    CHANNEL_DB_EFFICIENCY,
)

CHANNEL_LABELS: Final = {
    CHANNEL_CPU: "CPU %",
    CHANNEL_MEMORY: "Memory %",
    CHANNEL_NETWORK: "IOPS",
    CHANNEL_THROUGHPUT: "Throughput (rps)",
    CHANNEL_DB_CONNECTIONS: "DB Connections %",
    CHANNEL_DB_QPS: "DB Queries/s",
    CHANNEL_DB_EFFICIENCY: "DB Query Efficiency",
}

__all__ = [
    "APP_TITLE",
    "CHANNEL_CPU",
    "CHANNEL_DB_CONNECTIONS",
    "CHANNEL_DB_EFFICIENCY",
    "CHANNEL_DB_QPS",
    "CHANNEL_LABELS",
    "CHANNEL_MEMORY",
    "CHANNEL_NETWORK",
    "CHANNEL_THROUGHPUT",
    "DB_ENGINE_PRIORITY",
    "DEFAULT_LOG_CATEGORY",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_SCHEMA",
    "FILTER_ALL",
    "LOG_LEVELS",
    "LOG_LEVEL_PRIORITY",
    "METRIC_CHANNELS",
    "NOT_AVAILABLE",
    "PERFORMANCE_TIERS",
    "ROLE_PRIORITY",
    "UNKNOWN_GROUP",
    "USER_AGENT",
]
