from enum import Enum


class SecurityEvent(str, Enum):
    """
    Audit event names written to the security audit log.

    Values are stable identifiers consumed by log monitoring,
    do not rename them.
    """
    UNAUTHORIZED_BASKET_ACCESS_ATTEMPT = "UNAUTHORIZED_BASKET_ACCESS_ATTEMPT"
