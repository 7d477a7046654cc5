"""Storefront settings, read from the environment (and ``.env`` when present)."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[2]
load_dotenv(dotenv_path=ROOT_DIR / ".env")

DEFAULT_CATEGORY_PRIORITY = ("Pães", "Sobremesas", "Temperos", "Chás", "Outros")


def _get_env(*keys: str, default: str | None = None) -> str | None:
    for k in keys:
        v = os.getenv(k)
        if v is not None and str(v).strip() != "":
            return v.strip()
    return default


def _get_list(key: str, default: tuple[str, ...]) -> tuple[str, ...]:
    v = _get_env(key)
    if v is None:
        return default
    return tuple(part.strip() for part in v.split(",") if part.strip())


@dataclass(frozen=True)
class Settings:
    shop_name: str = "Pão da Roça"
    whatsapp_number: str = "5511989764533"
    currency_symbol: str = "R$"
    decimal_separator: str = ","
    category_priority: tuple[str, ...] = field(default=DEFAULT_CATEGORY_PRIORITY)
    blob_store_adapter: str = "memory"
    blob_store_dir: str = str(ROOT_DIR / "data")
    order_sink_adapter: str = "whatsapp"


def load_settings() -> Settings:
    """Build settings from the current environment."""
    defaults = Settings()
    return Settings(
        shop_name=_get_env("SHOP_NAME", default=defaults.shop_name),
        whatsapp_number=_get_env("WHATSAPP_NUMBER", default=defaults.whatsapp_number),
        currency_symbol=_get_env("CURRENCY_SYMBOL", default=defaults.currency_symbol),
        decimal_separator=_get_env("DECIMAL_SEPARATOR", default=defaults.decimal_separator),
        category_priority=_get_list("CATEGORY_PRIORITY", defaults.category_priority),
        blob_store_adapter=_get_env("BLOB_STORE_ADAPTER", default=defaults.blob_store_adapter),
        blob_store_dir=_get_env("BLOB_STORE_DIR", default=defaults.blob_store_dir),
        order_sink_adapter=_get_env("ORDER_SINK_ADAPTER", default=defaults.order_sink_adapter),
    )


settings = load_settings()
