"""Site configuration.

SiteConfig is a frozen dataclass — immutable after creation, no string-key
dict lookups. ``SiteConfig.from_env()`` reads ``FRAGSITE_*`` environment
variables for deployments that configure through the process environment.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path

from fragsite.errors import ConfigurationError

ENV_PREFIX = "FRAGSITE_"
_TRUE = {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class SiteConfig:
    """Site configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = SiteConfig(assets_dir="dist", port=3000)
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    workers: int = 0  # 0 = auto-detect from CPU count
    log_level: str = "info"
    log_format: str = "text"

    # Assets
    assets_dir: str | Path = "public"
    cache_control: str = "public, max-age=3600"

    # Page shell
    stylesheet: str = "/brand-tokens.css"
    bootstrap: bool = True

    # Component index
    legacy_manifest: str | None = None  # JSON key listing, legacy static-content manifest
    warm_index: bool = False  # build the index during ASGI lifespan startup

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "SiteConfig":
        """Build a config from ``FRAGSITE_<FIELD>`` environment variables.

        Unset variables keep the field default. Booleans accept
        ``1``/``true``/``yes``/``on`` (case-insensitive); integers must parse.

        Raises:
            ConfigurationError: If an integer variable is not numeric.
        """
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}
        for f in fields(cls):
            raw = env.get(ENV_PREFIX + f.name.upper())
            if raw is None:
                continue
            default = f.default
            if isinstance(default, bool):
                values[f.name] = raw.strip().lower() in _TRUE
            elif isinstance(default, int):
                try:
                    values[f.name] = int(raw)
                except ValueError as exc:
                    msg = f"{ENV_PREFIX}{f.name.upper()} must be an integer, got {raw!r}"
                    raise ConfigurationError(msg) from exc
            else:
                values[f.name] = raw
        return cls(**values)  # type: ignore[arg-type]
