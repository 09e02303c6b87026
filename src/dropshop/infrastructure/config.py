"""Runtime settings read from the environment.

Every value has a default so the shop starts with no configuration at
all.  The admin key default is deliberately weak; ``uses_fallback_key``
lets the server report it at startup.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dropshop.domain.model.stock import DEFAULT_STOCK

DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"
FALLBACK_ADMIN_KEY = "secret"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class ConfigurationError(ValueError):
    """An environment variable holds an unusable value."""


def _int_setting(env, name: str, default: int, minimum: int | None = None) -> int:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None
    if minimum is not None and value < minimum:
        raise ConfigurationError(f"{name} must be at least {minimum}, got {value}")
    return value


@dataclass(frozen=True)
class Settings:
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    admin_key: str = FALLBACK_ADMIN_KEY
    initial_stock: int = DEFAULT_STOCK
    stock_file: Path = _DATA_DIR / "stock.json"

    @property
    def uses_fallback_key(self) -> bool:
        return self.admin_key == FALLBACK_ADMIN_KEY

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> Settings:
        """All settings, as the HTTP server needs them."""
        env = os.environ if environ is None else environ
        local = cls.local_from_env(env)
        return cls(
            port=_int_setting(env, "PORT", DEFAULT_PORT),
            host=env.get("HOST") or DEFAULT_HOST,
            admin_key=env.get("ADMIN_KEY") or FALLBACK_ADMIN_KEY,
            initial_stock=local.initial_stock,
            stock_file=local.stock_file,
        )

    @classmethod
    def local_from_env(cls, environ: dict[str, str] | None = None) -> Settings:
        """Only the settings the local shop reads; server values stay default."""
        env = os.environ if environ is None else environ
        return cls(
            initial_stock=_int_setting(env, "DROPSHOP_INITIAL_STOCK", DEFAULT_STOCK, minimum=0),
            stock_file=Path(env.get("DROPSHOP_STOCK_FILE") or _DATA_DIR / "stock.json"),
        )
