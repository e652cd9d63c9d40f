"""
Small infrastructure modules shared by the dashboard.

Modules:
    logs: Logging utilities
    paths: Temp and cache directory helpers
    caches: Disk-based caching with TTL support
"""

from consign_tracker.lib import caches, logs, paths

__all__ = ["caches", "logs", "paths"]
