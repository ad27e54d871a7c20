"""
Configuration Validation Module

Validates critical configuration values at startup to fail-fast
with clear error messages instead of runtime failures.
"""

import sys
from pathlib import Path
from typing import Optional

L10N_DIR = Path(__file__).parent.parent / "l10n"


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


def validate_languages(default_language: str, supported_languages: list[str], l10n_dir: Path = L10N_DIR) -> None:
    """
    Validate language configuration against the shipped catalogs.

    Args:
        default_language: DEFAULT_LANGUAGE value
        supported_languages: SUPPORTED_LANGUAGES value
        l10n_dir: Directory holding <lang>.json catalogs

    Raises:
        ConfigValidationError: If the default is unsupported or a catalog is missing
    """
    if not supported_languages:
        raise ConfigValidationError(
            "SUPPORTED_LANGUAGES must contain at least one language code!\n"
            "Add to .env: SUPPORTED_LANGUAGES=en,de"
        )

    if default_language not in supported_languages:
        raise ConfigValidationError(
            f"DEFAULT_LANGUAGE '{default_language}' is not listed in SUPPORTED_LANGUAGES "
            f"({', '.join(supported_languages)})"
        )

    missing = [lang for lang in supported_languages if not (l10n_dir / f"{lang}.json").is_file()]
    if missing:
        raise ConfigValidationError(
            f"Missing translation catalogs for: {', '.join(missing)}\n"
            f"Expected files in {l10n_dir}: {', '.join(f'{lang}.json' for lang in missing)}"
        )


def validate_port(port: Optional[int], name: str) -> None:
    """
    Validate a TCP port setting.

    Raises:
        ConfigValidationError: If port is missing or out of range
    """
    if port is None or not 0 < port < 65536:
        raise ConfigValidationError(f"{name} must be between 1 and 65535 (got: {port})")


def validate_required_config(value: Optional[str], name: str, example: str = "") -> None:
    """
    Validate that a required config value is set.

    Args:
        value: The config value to check
        name: Name of the config variable
        example: Optional example value to show in error message

    Raises:
        ConfigValidationError: If value is missing
    """
    if not value:
        error_msg = f"{name} is required but not set!"
        if example:
            error_msg += f"\nAdd to .env: {name}={example}"
        raise ConfigValidationError(error_msg)


def validate_startup_config(config_module) -> None:
    """
    Validate all critical configuration at startup.

    Args:
        config_module: The config module to validate

    Raises:
        ConfigValidationError: If any validation fails
    """
    validate_required_config(getattr(config_module, 'DB_NAME', None), 'DB_NAME', 'basket.db')
    validate_required_config(getattr(config_module, 'REDIS_HOST', None), 'REDIS_HOST', 'localhost')
    validate_port(getattr(config_module, 'WEBAPP_PORT', None), 'WEBAPP_PORT')
    validate_port(getattr(config_module, 'REDIS_PORT', None), 'REDIS_PORT')

    if getattr(config_module, 'SESSION_TTL_SECONDS', 0) <= 0:
        raise ConfigValidationError("SESSION_TTL_SECONDS must be a positive number of seconds")

    validate_languages(config_module.DEFAULT_LANGUAGE, config_module.SUPPORTED_LANGUAGES)


def validate_or_exit(config_module) -> None:
    """
    Validate configuration and exit with error code 1 if validation fails.

    This is the main entry point for startup validation.

    Args:
        config_module: The config module to validate
    """
    try:
        validate_startup_config(config_module)
    except ConfigValidationError as e:
        print(f"\n ERROR: Configuration Validation Failed\n", file=sys.stderr)
        print(str(e), file=sys.stderr)
        print("\nService startup aborted. Please fix configuration and try again.\n", file=sys.stderr)
        sys.exit(1)
