import os

from dotenv import load_dotenv

from enums.runtime_environment import RuntimeEnvironment

# Load .env but don't override existing environment variables
# This allows test scripts to set RUNTIME_ENVIRONMENT=TEST before import
load_dotenv(".env", override=False)

# Parse RUNTIME_ENVIRONMENT with clear error message on misconfiguration
try:
    _runtime_env_str = os.environ.get("RUNTIME_ENVIRONMENT")
    if not _runtime_env_str:
        raise ValueError("RUNTIME_ENVIRONMENT environment variable is not set")
    RUNTIME_ENVIRONMENT = RuntimeEnvironment(_runtime_env_str)
except ValueError as e:
    valid_values = [env.value for env in RuntimeEnvironment]
    import sys
    print(f"\n ERROR: Invalid RUNTIME_ENVIRONMENT configuration\n", file=sys.stderr)
    print(f"Reason: {e}", file=sys.stderr)
    print(f"Valid values: {', '.join(valid_values)}", file=sys.stderr)
    print(f"Current value: {os.environ.get('RUNTIME_ENVIRONMENT', '(not set)')}", file=sys.stderr)
    print(f"\nAdd to .env: RUNTIME_ENVIRONMENT={valid_values[0]}\n", file=sys.stderr)
    sys.exit(1)

# HTTP server
WEBAPP_HOST = os.environ.get("WEBAPP_HOST", "0.0.0.0")

try:
    WEBAPP_PORT = int(os.environ.get("WEBAPP_PORT", "3000"))
except ValueError as e:
    import sys
    print(f"\n ERROR: Invalid WEBAPP_PORT configuration\n", file=sys.stderr)
    print(f"Reason: {e}", file=sys.stderr)
    print(f"Expected: Integer port number (e.g., 3000)", file=sys.stderr)
    print(f"Current value: {os.environ.get('WEBAPP_PORT')}\n", file=sys.stderr)
    sys.exit(1)

# Database (aiosqlite file under data/, ":memory:" for throwaway instances)
DB_NAME = os.environ.get("DB_NAME", "basket.db")

# Session registry (Redis)
REDIS_HOST = os.environ.get("REDIS_HOST", "localhost")
REDIS_PORT = int(os.environ.get("REDIS_PORT", "6379"))
REDIS_PASSWORD = os.environ.get("REDIS_PASSWORD") or None
SESSION_TTL_SECONDS = int(os.environ.get("SESSION_TTL_SECONDS", str(6 * 60 * 60)))  # Default: 6 hours

# Localization
DEFAULT_LANGUAGE = os.environ.get("DEFAULT_LANGUAGE", "en")
SUPPORTED_LANGUAGES = [
    lang.strip() for lang in os.environ.get("SUPPORTED_LANGUAGES", "en,de").split(",") if lang.strip()
]

# Client address resolution
# Only enable behind a reverse proxy that overwrites X-Forwarded-For
TRUST_PROXY_HEADERS = os.environ.get("TRUST_PROXY_HEADERS", "false") == "true"

# Logging Configuration
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR, CRITICAL
LOG_MASK_SECRETS = os.environ.get("LOG_MASK_SECRETS", "true") == "true"  # Mask tokens and PII in logs

# Log Retention: Environment-specific defaults
# Dev: 30 days for debugging
# Prod: 5 days default to save disk space
if RUNTIME_ENVIRONMENT == RuntimeEnvironment.DEV:
    LOG_RETENTION_DAYS = int(os.environ.get("LOG_RETENTION_DAYS", "30"))
else:
    LOG_RETENTION_DAYS = int(os.environ.get("LOG_RETENTION_DAYS", "5"))

# Response hardening headers (disabled by default for API-only deployments)
SECURITY_HEADERS_ENABLED = os.environ.get("SECURITY_HEADERS_ENABLED", "false") == "true"
HSTS_ENABLED = os.environ.get("HSTS_ENABLED", "false") == "true"  # Only for HTTPS deployments
