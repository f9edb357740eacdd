"""Application configuration.

`AppConfig` is an immutable value built once at process start (normally via
`AppConfig.from_env()`) and handed to whatever needs it. Code that cannot
receive it explicitly goes through the provider functions at the bottom of
this module, which enforce an initialise-once contract.
"""

import os
from dataclasses import dataclass, replace

DEFAULT_NAME = "Storefront API"
DEFAULT_VERSION = "1.0.0"
DEFAULT_ENVIRONMENT = "development"
DEFAULT_PAYMENT_LATENCY_SECONDS = 0.5

# Lookup keys are case-insensitive; every alias resolves to one attribute.
_PROPERTY_ALIASES = {
    "name": "name",
    "application": "name",
    "application.name": "name",
    "version": "version",
    "application.version": "version",
    "environment": "environment",
    "application.environment": "environment",
}


def not_found(key: str) -> str:
    return f"Property not found: {key}"


@dataclass(frozen=True)
class AppConfig:
    name: str = DEFAULT_NAME
    version: str = DEFAULT_VERSION
    environment: str = DEFAULT_ENVIRONMENT
    payment_latency_seconds: float = DEFAULT_PAYMENT_LATENCY_SECONDS

    @classmethod
    def from_env(cls) -> "AppConfig":
        return cls(
            name=os.getenv("APP_NAME", DEFAULT_NAME),
            version=os.getenv("APP_VERSION", DEFAULT_VERSION),
            environment=os.getenv("PROTEAN_ENV", DEFAULT_ENVIRONMENT),
            payment_latency_seconds=float(
                os.getenv("PAYMENT_LATENCY_SECONDS", str(DEFAULT_PAYMENT_LATENCY_SECONDS))
            ),
        )

    def get(self, key: str) -> str:
        """Return a recognised property, or the not-found sentinel string."""
        attribute = _PROPERTY_ALIASES.get(key.lower())
        if attribute is None:
            return not_found(key)
        return getattr(self, attribute)

    def set(self, key: str, value: str) -> "AppConfig":
        """Return a copy with one property replaced.

        Unrecognised keys leave the configuration untouched.
        """
        attribute = _PROPERTY_ALIASES.get(key.lower())
        if attribute is None:
            return self
        return replace(self, **{attribute: value})

    def describe(self) -> str:
        return f"Application: {self.name} | Version: {self.version} | Environment: {self.environment}"


# ---------------------------------------------------------------------------
# Provider
# ---------------------------------------------------------------------------
_current_config: AppConfig | None = None


def init_config(config: AppConfig | None = None) -> AppConfig:
    """Install the process-wide configuration. May only be called once."""
    global _current_config
    if _current_config is not None:
        raise RuntimeError("Configuration already initialized")
    _current_config = config if config is not None else AppConfig.from_env()
    return _current_config


def get_config() -> AppConfig:
    """Return the process-wide configuration, initialising it from the environment on first use."""
    if _current_config is None:
        return init_config()
    return _current_config


def reset_config() -> None:
    """Forget the installed configuration (useful for tests)."""
    global _current_config
    _current_config = None
