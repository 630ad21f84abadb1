"""
One-shot asynchronous loading of the promise document.

Sources:
    - ``http://`` / ``https://`` URL   fetched with httpx, cache disabled
    - ``gsheet:<spreadsheet_id>[/<worksheet>]``   a Google Sheet with one
      column per promise field, read through gspread
    - anything else   a local JSON file path

Every failure surfaces as LoadFailure; there is no retry.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
from typing import Any, Dict, Optional, Tuple

import gspread
import httpx
import pandas as pd
from google.auth.exceptions import GoogleAuthError
from google.oauth2.service_account import Credentials

from promise_tracker.config import Settings, get_settings
from promise_tracker.data.records import Dataset, parse_document
from promise_tracker.errors import LoadFailure

log = logging.getLogger(__name__)

SCOPES = [
    "https://www.googleapis.com/auth/spreadsheets.readonly",
    "https://www.googleapis.com/auth/drive.readonly",
]

GSHEET_PREFIX = "gsheet:"
DEFAULT_WORKSHEET = "promises"
NO_CACHE_HEADERS = {"Cache-Control": "no-store", "Pragma": "no-cache"}


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def parse_gsheet_source(source: str) -> Tuple[str, str]:
    """``gsheet:<id>[/<worksheet>]`` -> (spreadsheet_id, worksheet)."""
    locator = source[len(GSHEET_PREFIX):].strip()
    spreadsheet_id, _, worksheet = locator.partition("/")
    if not spreadsheet_id:
        raise LoadFailure("Spreadsheet id missing from source", source)
    return spreadsheet_id, worksheet or DEFAULT_WORKSHEET


def _read_json_file(path: str) -> Any:
    with open(path, "r", encoding="utf-8") as fh:
        return json.load(fh)


async def _load_file(path: str) -> Any:
    try:
        return await asyncio.to_thread(_read_json_file, path)
    except FileNotFoundError as exc:
        raise LoadFailure("Could not load data.json", path) from exc
    except (OSError, ValueError) as exc:
        raise LoadFailure(f"Could not parse data file: {exc}", path) from exc


async def _load_url(url: str, timeout: float, client: Optional[httpx.AsyncClient] = None) -> Any:
    try:
        if client is None:
            async with httpx.AsyncClient(timeout=timeout) as owned:
                response = await owned.get(url, headers=NO_CACHE_HEADERS)
        else:
            response = await client.get(url, headers=NO_CACHE_HEADERS)
    except httpx.HTTPError as exc:
        raise LoadFailure(f"Could not load data.json: {exc}", url) from exc

    if not response.is_success:
        raise LoadFailure(f"Could not load data.json (HTTP {response.status_code})", url)
    try:
        return response.json()
    except ValueError as exc:
        raise LoadFailure(f"Could not parse data document: {exc}", url) from exc


def _read_sheet(spreadsheet_id: str, worksheet: str, credentials_file: str, subject: str) -> Dict[str, Any]:
    credentials = Credentials.from_service_account_file(credentials_file, scopes=SCOPES)
    client = gspread.authorize(credentials)
    ws = client.open_by_key(spreadsheet_id).worksheet(worksheet)
    df = pd.DataFrame(ws.get_all_records())
    return {"subject": subject, "promises": df.to_dict(orient="records") if not df.empty else []}


async def _load_sheet(source: str, settings: Settings) -> Any:
    spreadsheet_id, worksheet = parse_gsheet_source(source)
    if not os.path.exists(settings.credentials_file):
        raise LoadFailure(f"Service account file not found: {settings.credentials_file}", source)
    try:
        return await asyncio.to_thread(
            _read_sheet, spreadsheet_id, worksheet, settings.credentials_file, settings.subject
        )
    except (gspread.exceptions.GSpreadException, GoogleAuthError, ValueError, OSError) as exc:
        raise LoadFailure(f"Could not read Google Sheet: {exc}", source) from exc


async def load_document(
    source: Optional[str] = None,
    settings: Optional[Settings] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> Any:
    """Fetch and decode the raw document from ``source``."""
    settings = settings or get_settings()
    source = source or settings.data_source
    log.info("Loading promise data from %s", source)
    if is_url(source):
        return await _load_url(source, settings.http_timeout, client)
    if source.startswith(GSHEET_PREFIX):
        return await _load_sheet(source, settings)
    return await _load_file(source)


async def load_dataset(
    source: Optional[str] = None,
    settings: Optional[Settings] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> Dataset:
    settings = settings or get_settings()
    source = source or settings.data_source
    try:
        doc = await load_document(source, settings, client)
        dataset = parse_document(doc, source=source, default_subject=settings.subject)
    except LoadFailure:
        log.exception("Failed to load promise data from %s", source)
        raise
    log.info("Loaded %d promises for %s", len(dataset), dataset.subject)
    return dataset
