"""
Bootstrap environment for Streamlit Cloud & local runs:
- Copy st.secrets into uppercase os.environ keys (nested -> PREFIX_CHILD)
- If GOOGLE_CREDENTIALS_JSON is in secrets (dict or JSON string), write it to
  a temp file and point GOOGLE_APPLICATION_CREDENTIALS at it
- Finally, load .env (never overriding variables already set)
"""

from __future__ import annotations

import json
import logging
import os
import re
import tempfile
from typing import Any, Iterator, Mapping, Optional, Tuple

import streamlit as st
from dotenv import load_dotenv

log = logging.getLogger(__name__)

CREDENTIALS_FILE_NAME = "promise-tracker-google-credentials.json"


def _env_key(key: str) -> str:
    return re.sub(r"[^A-Za-z0-9_]", "_", key.upper())


def flatten_secrets(prefix: str, value: Any) -> Iterator[Tuple[str, str]]:
    if isinstance(value, Mapping):
        for child_key, child_value in value.items():
            yield from flatten_secrets(f"{prefix}_{child_key}", child_value)
    else:
        yield _env_key(prefix), str(value)


def _secrets_dict() -> Optional[dict]:
    # st.secrets raises when no secrets.toml exists
    try:
        secrets = getattr(st, "secrets", None)
        if not secrets:
            return None
        to_dict = getattr(secrets, "to_dict", None)
        return to_dict() if callable(to_dict) else dict(secrets)
    except Exception as exc:  # StreamlitSecretNotFoundError and friends
        log.debug("Streamlit secrets unavailable: %s", exc)
        return None


def bridge_secrets_to_env(secrets: Optional[Mapping[str, Any]] = None) -> None:
    secrets = _secrets_dict() if secrets is None else secrets
    if not secrets:
        return
    for key, value in secrets.items():
        for env_key, env_value in flatten_secrets(key, value):
            os.environ.setdefault(env_key, env_value)


def materialize_google_credentials(secrets: Optional[Mapping[str, Any]] = None) -> Optional[str]:
    """Write inline service-account JSON to disk and export its path.

    Order:
    1) GOOGLE_APPLICATION_CREDENTIALS already points at a file -> keep it
    2) GOOGLE_CREDENTIALS_JSON in secrets -> write to the temp dir, set env
    3) otherwise nothing (the sheet loader fails clearly if it needs creds)
    """
    existing = os.getenv("GOOGLE_APPLICATION_CREDENTIALS")
    if existing and os.path.exists(existing):
        return existing

    secrets = _secrets_dict() if secrets is None else secrets
    creds = (secrets or {}).get("GOOGLE_CREDENTIALS_JSON")
    if not creds:
        return None
    if isinstance(creds, Mapping):
        json_text = json.dumps(dict(creds))
    else:
        json_text = str(creds)
        try:
            json.loads(json_text)
        except ValueError:
            log.warning("GOOGLE_CREDENTIALS_JSON is not valid JSON; ignoring it")
            return None

    path = os.path.join(tempfile.gettempdir(), CREDENTIALS_FILE_NAME)
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(json_text)
    os.environ["GOOGLE_APPLICATION_CREDENTIALS"] = path
    return path


def ensure_env() -> None:
    """Idempotent: make sure env vars and creds are available.
    Safe to call both inside and outside the Streamlit runtime.
    """
    secrets = _secrets_dict()
    bridge_secrets_to_env(secrets or {})
    materialize_google_credentials(secrets or {})
    load_dotenv(override=False)


# Execute on import for the Streamlit main process; explicit calls are fine too.
ensure_env()
