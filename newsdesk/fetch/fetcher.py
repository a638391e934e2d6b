"""
Collection retrieval from the content API or local JSON files.

Each collection (posts, categories, tags) is fetched independently with
bounded retries and a linear backoff. A collection that cannot be loaded
becomes an empty list plus an error message on the returned SiteData, so
the layout always receives a valid, possibly empty, article list.
"""

from __future__ import annotations

from dataclasses import dataclass
import json
import logging
from pathlib import Path
import time
from typing import Any, Callable

import httpx

from ..config import FetchConfig, get_api_base_url
from ..core.types import SiteData
from ..input.json_parser import parse_articles, parse_categories, parse_tags

logger = logging.getLogger(__name__)


@dataclass
class FetchResult:
    """Result of a JSON fetch operation.

    Either data will be populated (success) or error will be populated (failure).
    status_code may be None for network-level failures.

    Attributes:
        url: The URL that was fetched
        status_code: HTTP status code of the last attempt, or None
        data: The decoded JSON body, or None on error
        error: Error message if every attempt failed, None on success
        attempts: Number of attempts made
    """
    url: str
    status_code: int | None
    data: Any
    error: str | None
    attempts: int = 1

    @property
    def ok(self) -> bool:
        return self.error is None


def fetch_json(
    url: str,
    timeout: float,
    retries: int,
    backoff_seconds: float,
    user_agent: str,
    trust_env: bool,
    client: httpx.Client | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> FetchResult:
    """Fetch and decode a JSON document with retry logic.

    Args:
        url: The URL to fetch
        timeout: Request timeout in seconds
        retries: Number of retry attempts after initial failure
        backoff_seconds: Delay unit; the wait after attempt N (0-based) is (N + 1) * backoff_seconds
        user_agent: User-Agent header string
        trust_env: Whether to respect system proxy settings from environment
        client: Optional preconfigured client (used as-is and not closed)
        sleep: Sleep function, replaceable in tests

    Returns:
        FetchResult with data on success or error message on failure
    """
    headers = {"User-Agent": user_agent, "Accept": "application/json"}
    last_error: str | None = None
    status_code: int | None = None
    attempts = 0

    for attempt in range(retries + 1):
        attempts += 1
        try:
            if client is not None:
                resp = client.get(url, headers=headers, timeout=timeout)
            else:
                with httpx.Client(
                    timeout=timeout,
                    headers=headers,
                    follow_redirects=True,
                    trust_env=trust_env,
                ) as own_client:
                    resp = own_client.get(url)
            status_code = resp.status_code
            resp.raise_for_status()
            return FetchResult(url=url, status_code=status_code, data=resp.json(), error=None, attempts=attempts)
        except Exception as exc:  # noqa: BLE001
            last_error = f"{type(exc).__name__}: {exc}"
            logger.warning(f"Fetch attempt {attempt + 1} failed for {url}: {last_error}")
            if attempt < retries:
                # Linear backoff: 1s, 2s, ...
                sleep(backoff_seconds * (attempt + 1))

    return FetchResult(url=url, status_code=status_code, data=None, error=last_error, attempts=attempts)


def load_site_data(
    cfg: FetchConfig,
    client: httpx.Client | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> SiteData:
    """Load articles, categories and tags from the content API.

    Raises:
        ValueError: If no API base URL is configured
    """
    base_url = get_api_base_url(cfg)
    if not base_url:
        raise ValueError("No API base URL configured (set fetch.api_base_url or NEWSDESK_API_BASE_URL)")
    base_url = base_url.rstrip("/")

    def _fetch(path: str) -> FetchResult:
        return fetch_json(
            f"{base_url}/{path.lstrip('/')}",
            timeout=cfg.timeout_seconds,
            retries=cfg.retries,
            backoff_seconds=cfg.backoff_seconds,
            user_agent=cfg.user_agent,
            trust_env=cfg.trust_env,
            client=client,
            sleep=sleep,
        )

    posts = _fetch(cfg.posts_path)
    categories = _fetch(cfg.categories_path)
    tags = _fetch(cfg.tags_path)

    errors = [
        f"{name}: {result.error}"
        for name, result in (("posts", posts), ("categories", categories), ("tags", tags))
        if not result.ok
    ]
    data = SiteData(
        articles=parse_articles(posts.data) if posts.ok else [],
        categories=parse_categories(categories.data) if categories.ok else [],
        tags=parse_tags(tags.data) if tags.ok else [],
        errors=errors,
    )
    logger.info(
        f"Loaded {len(data.articles)} published articles, {len(data.categories)} categories, "
        f"{len(data.tags)} tags from {base_url}"
    )
    return data


def load_site_data_from_files(
    posts_path: Path,
    categories_path: Path | None = None,
    tags_path: Path | None = None,
) -> SiteData:
    """Load the same collections from local JSON exports.

    Missing optional files yield empty collections. Unreadable or invalid
    files are reported in ``errors`` rather than raised.
    """
    errors: list[str] = []

    def _read(name: str, path: Path | None) -> Any:
        if path is None:
            return []
        try:
            with open(path, encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            errors.append(f"{name}: {type(exc).__name__}: {exc}")
            logger.warning(f"Could not read {name} from {path}: {exc}")
            return []

    return SiteData(
        articles=parse_articles(_read("posts", posts_path)),
        categories=parse_categories(_read("categories", categories_path)),
        tags=parse_tags(_read("tags", tags_path)),
        errors=errors,
    )
