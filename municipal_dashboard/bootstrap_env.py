"""
Environment bootstrap, imported first by ``app.py``.

Values from ``st.secrets`` (Streamlit Cloud) are copied into ``os.environ``
as upper-case keys, nested tables becoming ``TABLE_KEY``. A local ``.env``
is loaded afterwards. Neither source overrides variables that are already
set, so the real process environment always wins.
"""

from __future__ import annotations

import os
import re
from typing import Any, Dict, Mapping, MutableMapping, Optional

import streamlit as st
from dotenv import load_dotenv

_INVALID_KEY_CHARS = re.compile(r"[^A-Z0-9_]")


def _sanitize_key(key: str) -> str:
    return _INVALID_KEY_CHARS.sub("_", key.upper())


def _flatten_secrets(prefix: str, value: Any) -> Dict[str, str]:
    if not isinstance(value, Mapping):
        return {_sanitize_key(prefix): str(value)}
    flat: Dict[str, str] = {}
    for key, child in value.items():
        flat.update(_flatten_secrets(f"{prefix}_{key}", child))
    return flat


def _read_secrets() -> Dict[str, Any]:
    try:
        return st.secrets.to_dict()
    except Exception:
        # No secrets.toml outside Streamlit Cloud; .env and the process env still apply
        return {}


def bridge_secrets(secrets: Mapping[str, Any], environ: Optional[MutableMapping[str, str]] = None) -> None:
    environ = os.environ if environ is None else environ
    for key, value in secrets.items():
        for flat_key, flat_value in _flatten_secrets(key, value).items():
            environ.setdefault(flat_key, flat_value)


def ensure_env() -> None:
    """Idempotent; safe inside and outside the Streamlit runtime."""
    bridge_secrets(_read_secrets())
    load_dotenv(override=False)


ensure_env()
