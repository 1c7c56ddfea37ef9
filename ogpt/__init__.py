"""
OGPT - Open Graph Protocol tools

Validated Open Graph Protocol objects serialized as HTML meta elements.

Design Principles:
- Setters normalize their input or quietly keep the previous value
- Output order is stable and follows the protocol's property order
- No network access unless URL verification is switched on

Example Usage:
    >>> from ogpt import OpenGraphProtocol, Image
    >>> ogp = OpenGraphProtocol().set_title("Hello world")
    >>> ogp = ogp.add_image(Image(url="http://example.com/img.jpg", width=400))
    >>> print(ogp.to_html())
    <meta property="og:title" content="Hello world">
    <meta property="og:image" content="http://example.com/img.jpg">
    <meta property="og:image:width" content="400">
"""

__version__ = "2.0.0"
__author__ = "OGPT Contributors"

# Configuration
from ogpt.config import OgptConfig, get_config, init_config

# Objects
from ogpt.base import OgptError
from ogpt.media import Image, Audio, Video
from ogpt.objects import (
    OpenGraphProtocol,
    Article,
    Book,
    Profile,
    VideoObject,
    VideoEpisode,
    Contact,
    OBJECT_TYPES,
)

# Serialization
from ogpt.serializer import build_html, to_html, prefix_attribute

# Utilities
from ogpt.url_checker import UrlStatus, UrlCheckResult, check_url
from ogpt.vocabulary import supported_types, supported_locales

__all__ = [
    # Config
    "OgptConfig",
    "get_config",
    "init_config",
    # Objects
    "OgptError",
    "Image",
    "Audio",
    "Video",
    "OpenGraphProtocol",
    "Article",
    "Book",
    "Profile",
    "VideoObject",
    "VideoEpisode",
    "Contact",
    "OBJECT_TYPES",
    # Serialization
    "build_html",
    "to_html",
    "prefix_attribute",
    # Utilities
    "UrlStatus",
    "UrlCheckResult",
    "check_url",
    "supported_types",
    "supported_locales",
]
