"""
Media references: images, audio and video attached to an Open Graph object.

Example:
    >>> image = Image().set_url("http://example.com/image.jpg").set_width(400)
    >>> image.to_dict()
    {'url': 'http://example.com/image.jpg', 'width': 400}
"""
from typing import Any, List, Optional, Tuple

from ogpt.base import PropertyBag
from ogpt.config import OgptConfig
from ogpt.constants import FLASH_MEDIA_TYPE
from ogpt.validators import (
    extension_to_media_type,
    media_type_in_family,
    positive_int,
    validate_url,
)


class Media(PropertyBag):
    """A media file referenced by an Open Graph object."""

    KIND = ""
    ALLOW_FLASH = False
    ACCEPTED_MIMES: Tuple[str, ...] = ()
    FIELDS = ("url", "secure_url", "type")

    def __init__(
        self,
        url: Optional[str] = None,
        secure_url: Optional[str] = None,
        type: Optional[str] = None,
        config: Optional[OgptConfig] = None,
    ):
        super().__init__(config)
        if url is not None:
            self.set_url(url)
        if secure_url is not None:
            self.set_secure_url(secure_url)
        if type is not None:
            self.set_type(type)

    @property
    def PREFIX(self) -> str:
        return f"og:{self.KIND}"

    @classmethod
    def extension_to_media_type(cls, extension: str) -> Optional[str]:
        """Map a file extension such as 'jpg' to this kind's media type."""
        return extension_to_media_type(cls.KIND, extension)

    @property
    def url(self) -> Optional[str]:
        return self._get("url")

    def set_url(self, url: str) -> "Media":
        return self._update("url", url, validate_url(url, self.ACCEPTED_MIMES, self.config))

    @property
    def secure_url(self) -> Optional[str]:
        return self._get("secure_url")

    def set_secure_url(self, url: str) -> "Media":
        value = validate_url(url, self.ACCEPTED_MIMES, self.config, require_https=True)
        return self._update("secure_url", url, value)

    @property
    def type(self) -> Optional[str]:
        return self._get("type")

    def set_type(self, media_type: str) -> "Media":
        value = media_type_in_family(media_type, self.KIND, allow_flash=self.ALLOW_FLASH)
        return self._update("type", media_type, value)

    def to_entries(self) -> List[Any]:
        """
        Serializable form: the URL first, then the other properties as siblings.

        Renders as ``og:image`` followed by ``og:image:width`` and so on,
        rather than ``og:image:url``.
        """
        data = self.to_dict()
        return [data.pop("url", None), data]

    def __str__(self) -> str:
        return self.url or ""


class VisualMedia(Media):
    """Media with pixel dimensions."""

    FIELDS = ("url", "height", "width", "secure_url", "type")

    def __init__(
        self,
        url: Optional[str] = None,
        secure_url: Optional[str] = None,
        type: Optional[str] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
        config: Optional[OgptConfig] = None,
    ):
        super().__init__(url, secure_url, type, config)
        if width is not None:
            self.set_width(width)
        if height is not None:
            self.set_height(height)

    @property
    def width(self) -> Optional[int]:
        return self._get("width")

    def set_width(self, width: int) -> "VisualMedia":
        return self._update("width", width, positive_int(width))

    @property
    def height(self) -> Optional[int]:
        return self._get("height")

    def set_height(self, height: int) -> "VisualMedia":
        return self._update("height", height, positive_int(height))


class Image(VisualMedia):
    """An image (image/* media types)."""
    KIND = "image"
    ACCEPTED_MIMES = ("image/*",)


class Video(VisualMedia):
    """A video file (video/* or Flash)."""
    KIND = "video"
    ALLOW_FLASH = True
    ACCEPTED_MIMES = ("video/*", FLASH_MEDIA_TYPE)


class Audio(Media):
    """An audio file (audio/* or Flash)."""
    KIND = "audio"
    ALLOW_FLASH = True
    ACCEPTED_MIMES = ("audio/*", FLASH_MEDIA_TYPE)
