"""
Security audit trail.

Each event is written as one JSON document to the "audit" logger at WARNING,
so log shippers can forward it without parsing free text.
"""

import json
import logging
from datetime import datetime, timezone

from enums.security_event import SecurityEvent

audit_logger = logging.getLogger("audit")


class AuditService:

    @staticmethod
    def utc_timestamp() -> str:
        """ISO-8601 UTC timestamp with millisecond precision, e.g. 2026-10-19T12:00:00.000Z"""
        return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

    @staticmethod
    def log_security_event(event: SecurityEvent, **fields) -> dict:
        """
        Emit a structured security event.

        Args:
            event: Event name
            **fields: Event payload (ids, addresses, ...), must be JSON serializable

        Returns:
            The record as written, including "event" and "timestamp"
        """
        record = {"event": event.value, **fields}
        record.setdefault("timestamp", AuditService.utc_timestamp())
        audit_logger.warning(json.dumps(record, default=str))
        return record
