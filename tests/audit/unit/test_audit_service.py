"""
Unit tests for AuditService structured security events.
"""

import json
import logging
from datetime import datetime

from enums.security_event import SecurityEvent
from services.audit import AuditService


class TestLogSecurityEvent:

    def test_record_is_written_as_json_to_audit_logger(self, caplog):
        caplog.set_level(logging.WARNING, logger="audit")

        AuditService.log_security_event(
            SecurityEvent.UNAUTHORIZED_BASKET_ACCESS_ATTEMPT,
            userId=7, userBasketId=42, attemptedBasketId=99, ip="203.0.113.7"
        )

        assert len(caplog.records) == 1
        record = caplog.records[0]
        assert record.name == "audit"
        assert record.levelno == logging.WARNING
        payload = json.loads(record.getMessage())
        assert payload["event"] == "UNAUTHORIZED_BASKET_ACCESS_ATTEMPT"
        assert payload["attemptedBasketId"] == 99
        assert payload["ip"] == "203.0.113.7"

    def test_returned_record_matches_logged_record(self, caplog):
        caplog.set_level(logging.WARNING, logger="audit")

        record = AuditService.log_security_event(SecurityEvent.UNAUTHORIZED_BASKET_ACCESS_ATTEMPT, userId=1)

        assert json.loads(caplog.records[0].getMessage()) == record

    def test_timestamp_is_iso8601_utc(self):
        record = AuditService.log_security_event(SecurityEvent.UNAUTHORIZED_BASKET_ACCESS_ATTEMPT, userId=1)

        assert record["timestamp"].endswith("Z")
        parsed = datetime.fromisoformat(record["timestamp"].replace("Z", "+00:00"))
        assert parsed.utcoffset().total_seconds() == 0

    def test_missing_address_is_logged_as_null(self, caplog):
        caplog.set_level(logging.WARNING, logger="audit")

        AuditService.log_security_event(SecurityEvent.UNAUTHORIZED_BASKET_ACCESS_ATTEMPT, userId=1, ip=None)

        assert json.loads(caplog.records[0].getMessage())["ip"] is None
