"""
Service factory for the Consign Tracker dashboard.

This module provides the get_record_service() factory function that returns
the appropriate RecordService implementation based on configuration.

Available Implementations:
- demo: In-memory service with static consignment records
- impl: HTTP service reading the consignment tracker API

The service is cached at the module level, so the same instance is reused
across all requests. Configure via CONSIGN_TRACKER_SERVICE environment variable.
"""

import os
from functools import cache
from typing import Callable, Dict

from consign_tracker.lib import logs
from consign_tracker.services.record_service import RecordService
from consign_tracker.services.record_service_demo import DemoRecordService
from consign_tracker.services.record_service_impl import RecordServiceImpl

LOG = logs.logger(__file__)

_SERVICE_REGISTRY: Dict[str, Callable[[], RecordService]] = {
    "demo": lambda: DemoRecordService(),
    "impl": lambda: RecordServiceImpl(),
}


@cache
def get_record_service(kind: str | None = None) -> RecordService:
    """Return the configured record service implementation."""
    resolved_kind = (kind or os.getenv("CONSIGN_TRACKER_SERVICE", "impl")).lower()
    LOG.info("get_record_service - kind:%s resolved_kind:%s", kind, resolved_kind)
    try:
        factory = _SERVICE_REGISTRY[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown record service kind: {resolved_kind}"
        raise ValueError(msg) from exc
    return factory()


__all__ = [
    "DemoRecordService",
    "RecordService",
    "RecordServiceImpl",
    "get_record_service",
]
