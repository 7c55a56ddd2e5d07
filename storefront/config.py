from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[1]  # .../storefront project root
load_dotenv(dotenv_path=ROOT_DIR / ".env")


def _get_env(*keys: str, default: str | None = None) -> str | None:
    for k in keys:
        v = os.getenv(k)
        if v is not None and str(v).strip() != "":
            return v.strip()
    return default


def _get_int(*keys: str, default: int | None = None) -> int | None:
    v = _get_env(*keys, default=None)
    if v is None:
        return default
    return int(v)


def _get_bool(*keys: str, default: bool = False) -> bool:
    v = _get_env(*keys, default=None)
    if v is None:
        return default
    return v.lower() in ("1", "true", "yes", "on")


def _get_path(*keys: str, default: str) -> str:
    v = _get_env(*keys, default=default)
    return str(v)


@dataclass(frozen=True)
class Settings:
    currency: str
    decimals: int
    export_dir: str
    invoice_export: bool
    log_level: str


settings = Settings(
    currency=_get_env("CURRENCY", default="USD") or "USD",
    decimals=_get_int("DECIMALS", "MONEY_DECIMALS", default=2),
    export_dir=_get_path("EXPORT_DIR", "INVOICE_DIR", default=str(ROOT_DIR / "exports")),
    invoice_export=_get_bool("INVOICE_EXPORT", default=False),
    log_level=(_get_env("LOG_LEVEL", default="INFO") or "INFO").upper(),
)

if settings.decimals is None or settings.decimals < 0:
    raise RuntimeError("DECIMALS must be >= 0. Fix DECIMALS in .env")
if not isinstance(logging.getLevelName(settings.log_level), int):
    raise RuntimeError(f"LOG_LEVEL {settings.log_level!r} is not a logging level")
