"""HTTP fetcher that presents itself as a desktop browser."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

import httpx

from backend.config import settings
from backend.scraper.errors import DecodeError, FetchError
from backend.scraper.models import FetchResult

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Header profiles
# ---------------------------------------------------------------------------
BROWSER_HEADERS: Mapping[str, str] = MappingProxyType({
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/121.0.0.0 Safari/537.36"
    ),
    "Accept": (
        "text/html,application/xhtml+xml,application/xml;q=0.9,"
        "image/avif,image/webp,*/*;q=0.8"
    ),
    "Accept-Language": "en-US,en;q=0.9",
    "Accept-Encoding": "gzip, deflate",
    "Connection": "keep-alive",
    "Upgrade-Insecure-Requests": "1",
    "Sec-Fetch-Dest": "document",
    "Sec-Fetch-Mode": "navigate",
    "Sec-Fetch-Site": "none",
    "Sec-Fetch-User": "?1",
    "Cache-Control": "max-age=0",
    "sec-ch-ua": '"Not A(Brand";v="99", "Google Chrome";v="121", "Chromium";v="121"',
    "sec-ch-ua-mobile": "?0",
    "sec-ch-ua-platform": '"Windows"',
})

# Publishers that refuse requests without a same-site referer.  Keyed by a
# fragment of the request URL.
PUBLISHER_HEADERS: Mapping[str, Mapping[str, str]] = MappingProxyType({
    "allrecipes.com": MappingProxyType({
        "Referer": "https://www.allrecipes.com/",
        "Origin": "https://www.allrecipes.com",
    }),
    "foodnetwork.com": MappingProxyType({
        "Referer": "https://www.foodnetwork.com/",
        "Origin": "https://www.foodnetwork.com",
    }),
})


def headers_for(url: str) -> dict[str, str]:
    """Return the request headers for *url*: the browser profile plus any
    publisher-specific referer/origin."""
    headers = dict(BROWSER_HEADERS)
    for fragment, extra in PUBLISHER_HEADERS.items():
        if fragment in url:
            headers.update(extra)
    return headers


def fetch_url(url: str) -> FetchResult:
    """Fetch *url* once and return a :class:`FetchResult`.

    Redirects are followed; there is no retry.  The status code is returned
    as-is, classifying it is left to the caller.

    Raises:
        FetchError: If the request cannot be built or the transport fails.
        DecodeError: If the body's declared content encoding cannot be decoded.
    """
    try:
        with httpx.Client(
            headers=headers_for(url),
            timeout=settings.request_timeout,
            follow_redirects=True,
        ) as client:
            response = client.get(url)
            body = response.content
    except httpx.DecodingError as exc:
        logger.warning("Error decoding body of %s: %s", url, exc)
        raise DecodeError(str(exc)) from exc
    except (httpx.InvalidURL, httpx.HTTPError) as exc:
        logger.warning("Error fetching URL %s: %s", url, exc)
        raise FetchError(str(exc)) from exc

    encoding = response.headers.get("Content-Encoding")
    logger.debug(
        "Fetched %s: HTTP %d, %d bytes (encoding=%s)",
        url, response.status_code, len(body), encoding,
    )
    return FetchResult(
        url=url,
        status_code=response.status_code,
        body=body,
        content_encoding=encoding,
        charset=response.charset_encoding,
    )
