"""
Live URL verification.

Checks that a referenced URL is addressable, answers a HEAD request with
200 OK and, optionally, serves one of the accepted Internet media types.
Only used when ``OgptConfig.verify_urls`` is enabled.
"""
import time
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, Iterable, Optional

import requests

from ogpt.constants import URL_CHECK_TIMEOUT, USER_AGENT

logger = logging.getLogger(__name__)


class UrlStatus(Enum):
    """URL check result status."""
    OK = "ok"
    HTTP_ERROR = "http_error"  # anything but 200
    MEDIA_TYPE_MISMATCH = "media_type_mismatch"
    TIMEOUT = "timeout"
    CONNECTION_ERROR = "connection_error"
    INVALID = "invalid"  # not an http(s) URL
    UNKNOWN = "unknown"


@dataclass
class UrlCheckResult:
    """Result of a live check for a single URL."""
    url: str
    status: UrlStatus
    status_code: Optional[int] = None
    content_type: Optional[str] = None
    response_time_ms: Optional[float] = None
    error_message: Optional[str] = None
    checked_at: datetime = None

    def __post_init__(self):
        if self.checked_at is None:
            self.checked_at = datetime.now(timezone.utc)

    @property
    def is_valid(self) -> bool:
        """Whether the URL passed the check."""
        return self.status == UrlStatus.OK

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return {
            'url': self.url,
            'status': self.status.value,
            'status_code': self.status_code,
            'content_type': self.content_type,
            'response_time_ms': self.response_time_ms,
            'error_message': self.error_message,
            'checked_at': self.checked_at.isoformat() if self.checked_at else None,
            'is_valid': self.is_valid
        }


def media_type_matches(content_type: str, accepted: Iterable[str]) -> bool:
    """Whether ``content_type`` matches one of ``accepted`` ('image/*' style wildcards allowed)."""
    for mime in accepted:
        if mime.endswith("/*"):
            if content_type.startswith(mime[:-1]):
                return True
        elif content_type == mime:
            return True
    return False


def check_url(
    url: str,
    accepted_mimes: Iterable[str] = (),
    timeout: float = URL_CHECK_TIMEOUT,
    user_agent: str = USER_AGENT,
    session: Optional[requests.Session] = None
) -> UrlCheckResult:
    """Check a single URL with one HEAD request (no retry).

    Args:
        url: URL to check
        accepted_mimes: Internet media types the URL must serve; empty accepts any
        timeout: Request timeout in seconds
        user_agent: User-Agent header value
        session: Optional requests session to reuse

    Returns:
        UrlCheckResult with check details
    """
    accepted = [mime for mime in accepted_mimes if mime]
    if not isinstance(url, str) or not url.lower().startswith(("http://", "https://")):
        return UrlCheckResult(
            url=str(url),
            status=UrlStatus.INVALID,
            error_message="Not an http(s) URL"
        )

    headers = {'User-Agent': user_agent}
    if accepted:
        headers['Accept'] = ','.join(accepted)

    http = session or requests
    start_time = time.time()

    try:
        response = http.head(url, headers=headers, timeout=timeout, allow_redirects=True)
    except requests.Timeout:
        logger.debug(f"URL check timed out: {url}")
        return UrlCheckResult(
            url=url,
            status=UrlStatus.TIMEOUT,
            error_message="Request timed out"
        )
    except requests.ConnectionError as e:
        logger.debug(f"URL check could not connect: {url}: {e}")
        return UrlCheckResult(
            url=url,
            status=UrlStatus.CONNECTION_ERROR,
            error_message=str(e)
        )
    except requests.RequestException as e:
        logger.debug(f"URL check failed: {url}: {e}")
        return UrlCheckResult(
            url=url,
            status=UrlStatus.UNKNOWN,
            error_message=str(e)
        )

    elapsed_ms = (time.time() - start_time) * 1000
    content_type = response.headers.get('Content-Type', '').split(';')[0].strip()

    if response.status_code != 200:
        status = UrlStatus.HTTP_ERROR
    elif accepted and not media_type_matches(content_type, accepted):
        status = UrlStatus.MEDIA_TYPE_MISMATCH
    else:
        status = UrlStatus.OK

    if status != UrlStatus.OK:
        logger.debug(f"URL check rejected {url}: {status.value} ({response.status_code}, {content_type!r})")

    return UrlCheckResult(
        url=url,
        status=status,
        status_code=response.status_code,
        content_type=content_type or None,
        response_time_ms=elapsed_ms
    )
