"""Key-based UI translations. Catalogs live beside this module as ``<lang>.json``."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

from loguru import logger

FALLBACK_LANGUAGE = "en_US"
LANGUAGES = ("en_US", "zh_CN")

_CATALOG_DIR = Path(__file__).parent
_active = FALLBACK_LANGUAGE


@lru_cache(maxsize=None)
def _catalog(lang: str) -> dict[str, str]:
    path = _CATALOG_DIR / f"{lang}.json"
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Unreadable translation catalog {path.name}: {e}")
        return {}


def set_language(lang: str) -> None:
    """Switch the active language; unknown codes select the fallback."""
    global _active
    _active = lang if lang in LANGUAGES else FALLBACK_LANGUAGE


def current_language() -> str:
    return _active


def supported_languages() -> tuple[str, ...]:
    return LANGUAGES


def t(key: str, **kwargs: Any) -> str:
    """Look up *key* in the active catalog, then the fallback, then echo the key.

    Keyword arguments fill ``{name}`` placeholders::

        t("stats.sessions", count=4)  # "Play days: 4"
    """
    text = _catalog(_active).get(key) or _catalog(FALLBACK_LANGUAGE).get(key, key)
    if not kwargs:
        return text
    try:
        return text.format(**kwargs)
    except (KeyError, IndexError):
        return text
