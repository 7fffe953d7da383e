"""
Loader.

Fetches the dashboard CSV from a local path or an http(s) URL and parses it.
This is the only asynchronous step in the dashboard.
"""

import asyncio
import logging
from pathlib import Path
from typing import List, Optional

import httpx

from src.core.parser import parse_csv
from src.models.review import ReviewRecord
import config.settings as settings

logger = logging.getLogger(__name__)


class DataLoadError(RuntimeError):
    """The CSV resource could not be fetched or read."""


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


async def _fetch_url(url: str, client: Optional[httpx.AsyncClient]) -> str:
    if client is not None:
        response = await client.get(url)
        response.raise_for_status()
        return response.text

    async with httpx.AsyncClient(
        timeout=settings.REQUEST_TIMEOUT_SECONDS,
        follow_redirects=True
    ) as own_client:
        response = await own_client.get(url)
        response.raise_for_status()
        return response.text


async def load_csv_text(
    source: str,
    client: Optional[httpx.AsyncClient] = None
) -> str:
    """
    Read the raw CSV text.

    Args:
        source: Local file path or http(s) URL
        client: Optional shared httpx client (used for URLs only)

    Returns:
        The CSV document as text

    Raises:
        DataLoadError: If the resource is unreachable or unreadable
    """
    source = str(source)
    try:
        if _is_url(source):
            text = await _fetch_url(source, client)
        else:
            text = await asyncio.to_thread(Path(source).read_text, encoding="utf-8")
    except (httpx.HTTPError, OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to load CSV from {source}: {e}")
        raise DataLoadError(f"Failed to load data from {source}: {e}") from e

    logger.info(f"Loaded {len(text)} characters from {source}")
    return text


async def load_reviews(
    source: str,
    client: Optional[httpx.AsyncClient] = None
) -> List[ReviewRecord]:
    """Load and parse the CSV resource into records."""
    text = await load_csv_text(source, client=client)
    return parse_csv(text)
