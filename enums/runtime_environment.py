from enum import Enum


class RuntimeEnvironment(str, Enum):
    """
    Deployment mode of the service.

    DEV: Local development (verbose logs, long log retention)
    PROD: Production deployment
    TEST: Automated test runs
    """
    DEV = "DEV"
    PROD = "PROD"
    TEST = "TEST"
