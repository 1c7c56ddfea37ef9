"""
Field validators for Open Graph Protocol values.

Every validator returns the normalized value, or None when the input is
rejected. Object setters keep their previous value on None, so invalid
input never raises.
"""
import re
import logging
from datetime import date, datetime, timezone
from typing import Iterable, Optional, Sequence
from urllib.parse import urlsplit

import requests

from ogpt.config import OgptConfig
from ogpt.constants import (
    ALLOWED_URL_SCHEMES,
    FLASH_MEDIA_TYPE,
    MAX_ADDRESS_PART_LENGTH,
    MAX_EMAIL_LENGTH,
    MAX_PHONE_DIGITS,
    MAX_POSTAL_CODE_LENGTH,
    MIN_POSTAL_CODE_LENGTH,
    PAGE_MEDIA_TYPES,
)
from ogpt.url_checker import check_url
from ogpt.vocabulary import is_supported_country

logger = logging.getLogger(__name__)


# =================
# TEXT
# =================

def clean_text(value, max_length: int, allow_empty: bool = True) -> Optional[str]:
    """
    Trim a string and truncate it to ``max_length`` characters.

    Args:
        value: Candidate value
        max_length: Hard cap on the stored length
        allow_empty: Accept a string that is empty after trimming

    Returns:
        Cleaned string, or None if rejected
    """
    if not isinstance(value, str):
        return None
    value = value.strip()
    if not value and not allow_empty:
        return None
    return value[:max_length]


def non_empty_string(value) -> Optional[str]:
    """Accept any non-empty string unchanged."""
    if isinstance(value, str) and value:
        return value
    return None


def one_of(value, allowed: Iterable[str]) -> Optional[str]:
    """Accept ``value`` only if it is a string in ``allowed``."""
    if isinstance(value, str) and value in allowed:
        return value
    return None


# =================
# URLS
# =================

def canonicalize_url(url) -> Optional[str]:
    """
    Rebuild a URL from its scheme, host, path, query and fragment.

    User info and port are dropped, and an empty path becomes '/'.
    Only http and https URLs are accepted.

    Examples:
        >>> canonicalize_url("HTTP://user:pw@Example.com:8080?q=1")
        'http://example.com/?q=1'
    """
    if not isinstance(url, str) or not url.strip():
        return None
    try:
        parts = urlsplit(url.strip())
        host = parts.hostname
    except ValueError:
        return None
    scheme = parts.scheme.lower()
    if scheme not in ALLOWED_URL_SCHEMES or not host:
        return None
    if ':' in host:
        host = f"[{host}]"

    canonical = f"{scheme}://{host}{parts.path or '/'}"
    if parts.query:
        canonical += f"?{parts.query}"
    if parts.fragment:
        canonical += f"#{parts.fragment}"
    return canonical


def validate_url(
    url,
    accepted_mimes: Sequence[str] = PAGE_MEDIA_TYPES,
    config: Optional[OgptConfig] = None,
    require_https: bool = False,
    session: Optional[requests.Session] = None
) -> Optional[str]:
    """
    Validate a URL-valued property.

    Without live verification the trimmed URL is accepted as-is. With
    ``config.verify_urls`` set, the URL is canonicalized and must answer a
    HEAD request with 200 OK and one of ``accepted_mimes``.

    Args:
        url: Candidate URL
        accepted_mimes: Media types the URL must serve when verified
        config: Configuration carrying the verification switch
        require_https: Reject non-https URLs when verifying
        session: Optional requests session for the live check

    Returns:
        URL to store, or None if rejected
    """
    if not isinstance(url, str):
        return None
    url = url.strip()
    if not url:
        return None

    config = config or OgptConfig()
    if not config.verify_urls:
        return url

    canonical = canonicalize_url(url)
    if canonical is None:
        logger.debug(f"Rejected malformed URL: {url!r}")
        return None
    if require_https and not canonical.startswith("https://"):
        logger.debug(f"Rejected non-https secure URL: {url!r}")
        return None

    result = check_url(
        canonical,
        accepted_mimes=accepted_mimes,
        timeout=config.timeout,
        user_agent=config.user_agent,
        session=session,
    )
    return canonical if result.is_valid else None


# =================
# NUMBERS AND DATES
# =================

def positive_int(value) -> Optional[int]:
    """Accept integers greater than zero (booleans are not integers here)."""
    if isinstance(value, int) and not isinstance(value, bool) and value > 0:
        return value
    return None


def to_iso8601(value) -> Optional[str]:
    """
    Normalize a date or time value to an ISO 8601 string.

    datetime values are converted to UTC (naive values are assumed to be UTC).
    date values become YYYY-MM-DD. Strings of at least 10 characters are
    kept verbatim.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).isoformat(timespec="seconds")
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, str) and len(value) >= 10:  # at least YYYY-MM-DD
        return value
    return None


# =================
# ISBN
# =================

def _isbn10_is_valid(isbn: str) -> bool:
    if not re.fullmatch(r"\d{9}[\dXx]", isbn, re.ASCII):
        return False
    total = sum(int(digit) * (10 - i) for i, digit in enumerate(isbn[:9]))
    check = (11 - total % 11) % 11
    last = isbn[9].upper()
    if last == "X":
        return check == 10
    return int(last) == check


def _isbn13_is_valid(isbn: str) -> bool:
    if not re.fullmatch(r"\d{13}", isbn, re.ASCII):
        return False
    total = sum(int(digit) * (1 if i % 2 == 0 else 3) for i, digit in enumerate(isbn[:12]))
    return (10 - total % 10) % 10 == int(isbn[12])


def normalize_isbn(value) -> Optional[str]:
    """
    Validate an ISBN-10 or ISBN-13 code by its check digit.

    Examples:
        >>> normalize_isbn("0-306-40615-2")
        '0306406152'
        >>> normalize_isbn("0-306-40615-3") is None
        True
    """
    if not isinstance(value, str):
        return None
    isbn = re.sub(r"[\s-]", "", value)
    if len(isbn) == 10 and _isbn10_is_valid(isbn):
        return isbn[:9] + isbn[9].upper()
    if len(isbn) == 13 and _isbn13_is_valid(isbn):
        return isbn
    return None


# =================
# MEDIA TYPES
# =================

EXTENSION_MEDIA_TYPES = {
    "image": {
        "jpeg": "image/jpeg",
        "jpg": "image/jpeg",
        "png": "image/png",
        "gif": "image/gif",
        "svg": "image/svg+xml",
        "ico": "image/vnd.microsoft.icon",
    },
    "audio": {
        "swf": FLASH_MEDIA_TYPE,
        "mp3": "audio/mpeg",
        "m4a": "audio/mp4",
        "ogg": "audio/ogg",
        "oga": "audio/ogg",
    },
    "video": {
        "swf": FLASH_MEDIA_TYPE,
        "mp4": "video/mp4",
        "ogv": "video/ogg",
        "webm": "video/webm",
    },
}


def extension_to_media_type(kind: str, extension) -> Optional[str]:
    """
    Map a file extension to an Internet media type.

    Args:
        kind: One of 'image', 'audio', 'video'
        extension: File extension, with or without the leading dot

    Returns:
        Media type, or None for unknown extensions
    """
    if not isinstance(extension, str) or not extension:
        return None
    return EXTENSION_MEDIA_TYPES.get(kind, {}).get(extension.lstrip(".").lower())


def media_type_in_family(value, family: str, allow_flash: bool = False) -> Optional[str]:
    """Accept media types such as 'image/png' for family 'image'."""
    if not isinstance(value, str):
        return None
    if value.startswith(f"{family}/") or (allow_flash and value == FLASH_MEDIA_TYPE):
        return value
    return None


# =================
# CONTACT AND LOCATION
# =================

def valid_latitude(value) -> Optional[float]:
    """Latitude in decimal degrees, strictly between -90 and 90."""
    if isinstance(value, float) and -90 < value < 90:
        return value
    return None


def valid_longitude(value) -> Optional[float]:
    """Longitude in decimal degrees, strictly between -180 and 180."""
    if isinstance(value, float) and -180 < value < 180:
        return value
    return None


def clean_address_part(value, max_length: int = MAX_ADDRESS_PART_LENGTH) -> Optional[str]:
    """Trimmed address component; rejected (not truncated) when too long."""
    if not isinstance(value, str):
        return None
    value = value.strip()
    if value and len(value) <= max_length:
        return value
    return None


def normalize_postal_code(value) -> Optional[str]:
    """Upper-cased postal code reduced to letters and digits, 2 to 9 characters."""
    if not isinstance(value, str):
        return None
    code = re.sub(r"[^A-Z0-9У]", "", value.upper())  # keeps Cyrillic 'У' used in Ukraine
    if MIN_POSTAL_CODE_LENGTH <= len(code) <= MAX_POSTAL_CODE_LENGTH:
        return code
    return None


def normalize_country_code(value) -> Optional[str]:
    """Assigned ISO 3166-1 alpha-2 country code, e.g. 'US'."""
    if not isinstance(value, str):
        return None
    value = value.strip()
    if is_supported_country(value):
        return value
    return None


def normalize_phone_number(value) -> Optional[str]:
    """
    Reduce a phone number to its digits and check the ITU-T E.164 length.

    Examples:
        >>> normalize_phone_number("+1 (555) 010-9999")
        '15550109999'
    """
    if not isinstance(value, str):
        return None
    digits = re.sub(r"\D", "", value)
    if digits and len(digits) <= MAX_PHONE_DIGITS:
        return digits
    return None


_ATEXT = r"[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]"
_DOT_ATOM = rf"{_ATEXT}+(?:\.{_ATEXT}+)*"
_QUOTED_STRING = r'"(?:[^"\\\r\n]|\\.)*"'
_LABEL = r"[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?"
_DOMAIN_LITERAL = r"\[[^\[\]\\\s]+\]"

EMAIL_PATTERN = re.compile(
    rf"(?P<local>{_DOT_ATOM}|{_QUOTED_STRING})"
    rf"@(?P<domain>{_LABEL}(?:\.{_LABEL})+|{_DOMAIN_LITERAL})"
)


def is_valid_email(value) -> bool:
    """
    Check an address against the RFC 5322 addr-spec grammar.

    Comments and folding whitespace are not accepted. Hostnames must have at
    least two labels and a non-numeric top-level label.
    """
    if not isinstance(value, str) or len(value) > MAX_EMAIL_LENGTH:
        return False
    match = EMAIL_PATTERN.fullmatch(value)
    if not match or len(match.group("local")) > 64:
        return False
    domain = match.group("domain")
    if not domain.startswith("[") and domain.rsplit(".", 1)[-1].isdigit():
        return False
    return True
