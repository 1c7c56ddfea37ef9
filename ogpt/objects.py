"""
Open Graph Protocol objects.

The root ``OpenGraphProtocol`` object describes a page in the ``og``
namespace. Typed objects (article, book, profile, video) add properties in
their own namespace and are rendered alongside it:

    >>> ogp = OpenGraphProtocol().set_type("article").set_title("Hello world")
    >>> article = Article().set_section("Front page").add_tag("weather")
    >>> print(ogp.to_html())
    <meta property="og:type" content="article">
    <meta property="og:title" content="Hello world">
    >>> print(article.to_html())
    <meta property="article:section" content="Front page">
    <meta property="article:tag" content="weather">

Every setter returns the object. Invalid input is ignored and the previous
value is kept.
"""
import copy
import logging
from typing import Any, Dict, List, Optional

from ogpt.base import PropertyBag
from ogpt.constants import (
    DETERMINERS,
    GENDERS,
    MAX_DESCRIPTION_LENGTH,
    MAX_SITE_NAME_LENGTH,
    MAX_TITLE_LENGTH,
    OG_NAMESPACE,
    OG_PREFIX,
    PAGE_MEDIA_TYPES,
    VERSION,
)
from ogpt.media import Audio, Image, Media, Video
from ogpt.validators import (
    clean_address_part,
    clean_text,
    is_valid_email,
    non_empty_string,
    normalize_country_code,
    normalize_isbn,
    normalize_phone_number,
    normalize_postal_code,
    one_of,
    positive_int,
    to_iso8601,
    valid_latitude,
    valid_longitude,
    validate_url,
)
from ogpt.vocabulary import (
    is_supported_locale,
    is_supported_type,
    supported_locales,
    supported_types,
)

logger = logging.getLogger(__name__)


class OpenGraphProtocol(PropertyBag):
    """
    Page-level Open Graph properties.

    Attributes:
        type: Page type slug from ``supported_types``
        title: Title as it should appear in the graph (max 128 characters)
        site_name: Name of the larger site (max 128 characters)
        description: One to two sentence description (max 255 characters)
        url: Canonical URL used as the permanent ID in the graph
        determiner: Word before the title in a sentence (a, an, auto, the)
        locale: language_TERRITORY code from ``supported_locales``
        images, audio, videos: Attached media, first one has priority
    """

    VERSION = VERSION
    PREFIX = OG_PREFIX
    NS = OG_NAMESPACE
    FIELDS = (
        "type", "title", "site_name", "description", "url",
        "determiner", "locale", "image", "audio", "video",
    )
    LIST_FIELDS = ("image", "audio", "video")

    supported_types = staticmethod(supported_types)
    supported_locales = staticmethod(supported_locales)

    @property
    def type(self) -> Optional[str]:
        return self._get("type")

    def set_type(self, page_type: str) -> "OpenGraphProtocol":
        value = page_type if is_supported_type(page_type) else None
        return self._update("type", page_type, value)

    @property
    def title(self) -> Optional[str]:
        return self._get("title")

    def set_title(self, title: str) -> "OpenGraphProtocol":
        return self._update("title", title, clean_text(title, MAX_TITLE_LENGTH))

    @property
    def site_name(self) -> Optional[str]:
        return self._get("site_name")

    def set_site_name(self, site_name: str) -> "OpenGraphProtocol":
        value = clean_text(site_name, MAX_SITE_NAME_LENGTH, allow_empty=False)
        return self._update("site_name", site_name, value)

    @property
    def description(self) -> Optional[str]:
        return self._get("description")

    def set_description(self, description: str) -> "OpenGraphProtocol":
        value = clean_text(description, MAX_DESCRIPTION_LENGTH, allow_empty=False)
        return self._update("description", description, value)

    @property
    def url(self) -> Optional[str]:
        return self._get("url")

    def set_url(self, url: str) -> "OpenGraphProtocol":
        return self._update("url", url, validate_url(url, PAGE_MEDIA_TYPES, self.config))

    @property
    def determiner(self) -> Optional[str]:
        return self._get("determiner")

    def set_determiner(self, determiner: str) -> "OpenGraphProtocol":
        return self._update("determiner", determiner, one_of(determiner, DETERMINERS))

    @property
    def locale(self) -> Optional[str]:
        return self._get("locale")

    def set_locale(self, locale: str) -> "OpenGraphProtocol":
        value = locale if is_supported_locale(locale) else None
        return self._update("locale", locale, value)

    # Media

    @property
    def images(self) -> List[Image]:
        return self._get("image")

    def add_image(self, image: Optional[Image] = None, **properties) -> "OpenGraphProtocol":
        """
        Add an image. The first image added has priority.

        Accepts an ``Image`` or its properties as keywords
        (``add_image(url=..., width=...)``). Images without a URL are ignored.
        """
        return self._add_media("image", Image, image, properties)

    @property
    def audio(self) -> List[Audio]:
        return self._get("audio")

    def add_audio(self, audio: Optional[Audio] = None, **properties) -> "OpenGraphProtocol":
        """Add an audio reference. The first one added has priority."""
        return self._add_media("audio", Audio, audio, properties)

    @property
    def videos(self) -> List[Video]:
        return self._get("video")

    def add_video(self, video: Optional[Video] = None, **properties) -> "OpenGraphProtocol":
        """Add a video reference. The first one added has priority."""
        return self._add_media("video", Video, video, properties)

    def _add_media(self, name: str, media_class, media: Optional[Media], properties: Dict) -> "OpenGraphProtocol":
        if media is None:
            media = media_class.from_dict(properties, config=self.config)
        elif isinstance(media, str):
            media = media_class(url=media, config=self.config)
        if not isinstance(media, media_class) or not media.url:
            logger.debug(f"Ignoring {name} without a URL: {media!r}")
            return self
        # Stored as a snapshot; later changes to the caller's object are not reflected
        self._values[name].append(copy.deepcopy(media))
        return self

    def to_dict(self) -> Dict[str, Any]:
        """
        Return the set properties in serialization order.

        Each media reference becomes ``[url, {other properties}]`` so it
        renders as ``og:image`` followed by ``og:image:*`` siblings.
        """
        data = super().to_dict()
        for name in self.LIST_FIELDS:
            if name in data:
                data[name] = [media.to_entries() for media in data[name]]
        return data


class OpenGraphObject(PropertyBag):
    """Base for typed objects that live in their own namespace."""

    def _url(self, url: Any) -> Optional[str]:
        return validate_url(url, PAGE_MEDIA_TYPES, self.config)

    @staticmethod
    def datetime_to_iso8601(value) -> Optional[str]:
        """Format a datetime as ISO 8601 in UTC."""
        return to_iso8601(value)


class Article(OpenGraphObject):
    """A news or blog article (http://ogp.me/ns/article#)."""

    PREFIX = "article"
    NS = "http://ogp.me/ns/article#"
    FIELDS = ("published_time", "modified_time", "expiration_time", "author", "section", "tag")
    LIST_FIELDS = ("author", "tag")

    @property
    def published_time(self) -> Optional[str]:
        return self._get("published_time")

    def set_published_time(self, published) -> "Article":
        """Set the first publication time (datetime, date, or ISO 8601 string)."""
        return self._update("published_time", published, to_iso8601(published))

    @property
    def modified_time(self) -> Optional[str]:
        return self._get("modified_time")

    def set_modified_time(self, updated) -> "Article":
        return self._update("modified_time", updated, to_iso8601(updated))

    @property
    def expiration_time(self) -> Optional[str]:
        return self._get("expiration_time")

    def set_expiration_time(self, expires) -> "Article":
        return self._update("expiration_time", expires, to_iso8601(expires))

    @property
    def authors(self) -> List[str]:
        return self._get("author")

    def add_author(self, author_url: str) -> "Article":
        """Add the URL of an author's profile page."""
        return self._append("author", author_url, self._url(author_url))

    @property
    def section(self) -> Optional[str]:
        return self._get("section")

    def set_section(self, section: str) -> "Article":
        return self._update("section", section, non_empty_string(section))

    @property
    def tags(self) -> List[str]:
        return self._get("tag")

    def add_tag(self, tag: str) -> "Article":
        return self._append("tag", tag, non_empty_string(tag))


class Book(OpenGraphObject):
    """A book (http://ogp.me/ns/book#)."""

    PREFIX = "book"
    NS = "http://ogp.me/ns/book#"
    FIELDS = ("author", "isbn", "release_date", "tag")
    LIST_FIELDS = ("author", "tag")

    @property
    def authors(self) -> List[str]:
        return self._get("author")

    def add_author(self, author_url: str) -> "Book":
        return self._append("author", author_url, self._url(author_url))

    @property
    def isbn(self) -> Optional[str]:
        return self._get("isbn")

    def set_isbn(self, isbn: str) -> "Book":
        """Set an ISBN-10 or ISBN-13; hyphens are removed, the check digit must match."""
        return self._update("isbn", isbn, normalize_isbn(isbn))

    @property
    def release_date(self) -> Optional[str]:
        return self._get("release_date")

    def set_release_date(self, release_date) -> "Book":
        return self._update("release_date", release_date, to_iso8601(release_date))

    @property
    def tags(self) -> List[str]:
        return self._get("tag")

    def add_tag(self, tag: str) -> "Book":
        return self._append("tag", tag, non_empty_string(tag))


class Profile(OpenGraphObject):
    """A person's profile (http://ogp.me/ns/profile#)."""

    PREFIX = "profile"
    NS = "http://ogp.me/ns/profile#"
    FIELDS = ("first_name", "last_name", "username", "gender")

    @property
    def first_name(self) -> Optional[str]:
        return self._get("first_name")

    def set_first_name(self, first_name: str) -> "Profile":
        return self._update("first_name", first_name, non_empty_string(first_name))

    @property
    def last_name(self) -> Optional[str]:
        return self._get("last_name")

    def set_last_name(self, last_name: str) -> "Profile":
        return self._update("last_name", last_name, non_empty_string(last_name))

    @property
    def username(self) -> Optional[str]:
        return self._get("username")

    def set_username(self, username: str) -> "Profile":
        return self._update("username", username, non_empty_string(username))

    @property
    def gender(self) -> Optional[str]:
        return self._get("gender")

    def set_gender(self, gender: str) -> "Profile":
        return self._update("gender", gender, one_of(gender, GENDERS))


class VideoObject(OpenGraphObject):
    """A movie, TV show or other video (http://ogp.me/ns/video#)."""

    PREFIX = "video"
    NS = "http://ogp.me/ns/video#"
    FIELDS = ("actor", "director", "writer", "duration", "release_date", "tag")
    LIST_FIELDS = ("actor", "director", "writer", "tag")

    @property
    def actors(self) -> List[Any]:
        """Actor URLs; actors with a role are ``[url, {"role": role}]``."""
        return self._get("actor")

    def add_actor(self, url: str, role: str = "") -> "VideoObject":
        """Add the profile URL of an actor, optionally with the role played."""
        actor_url = self._url(url)
        value = actor_url
        if actor_url is not None and isinstance(role, str) and role:
            value = [actor_url, {"role": role}]
        return self._append("actor", url, value, key=actor_url)

    @property
    def directors(self) -> List[str]:
        return self._get("director")

    def add_director(self, url: str) -> "VideoObject":
        return self._append("director", url, self._url(url))

    @property
    def writers(self) -> List[str]:
        return self._get("writer")

    def add_writer(self, url: str) -> "VideoObject":
        return self._append("writer", url, self._url(url))

    @property
    def duration(self) -> Optional[int]:
        return self._get("duration")

    def set_duration(self, duration: int) -> "VideoObject":
        """Set the running time in whole seconds."""
        return self._update("duration", duration, positive_int(duration))

    @property
    def release_date(self) -> Optional[str]:
        return self._get("release_date")

    def set_release_date(self, release_date) -> "VideoObject":
        return self._update("release_date", release_date, to_iso8601(release_date))

    @property
    def tags(self) -> List[str]:
        return self._get("tag")

    def add_tag(self, tag: str) -> "VideoObject":
        return self._append("tag", tag, non_empty_string(tag))


class VideoEpisode(VideoObject):
    """An episode of a TV show."""

    FIELDS = VideoObject.FIELDS + ("series",)

    @property
    def series(self) -> Optional[str]:
        return self._get("series")

    def set_series(self, url: str) -> "VideoEpisode":
        """Set the URL of the show this episode belongs to."""
        return self._update("series", url, self._url(url))


class Contact(OpenGraphObject):
    """
    Location and contact properties from Open Graph 1.0.

    Rendered in the ``og`` namespace (og:latitude, og:email, ...).
    """

    PREFIX = OG_PREFIX
    NS = OG_NAMESPACE
    FIELDS = (
        "latitude", "longitude", "street_address", "locality", "region",
        "postal_code", "country_name", "email", "phone_number", "fax_number",
    )

    @property
    def latitude(self) -> Optional[float]:
        return self._get("latitude")

    def set_latitude(self, latitude: float) -> "Contact":
        return self._update("latitude", latitude, valid_latitude(latitude))

    @property
    def longitude(self) -> Optional[float]:
        return self._get("longitude")

    def set_longitude(self, longitude: float) -> "Contact":
        return self._update("longitude", longitude, valid_longitude(longitude))

    @property
    def street_address(self) -> Optional[str]:
        return self._get("street_address")

    def set_street_address(self, street_address: str) -> "Contact":
        """Street number, thoroughfare name and type; 40 characters or less."""
        return self._update("street_address", street_address, clean_address_part(street_address))

    @property
    def locality(self) -> Optional[str]:
        return self._get("locality")

    def set_locality(self, locality: str) -> "Contact":
        return self._update("locality", locality, clean_address_part(locality))

    @property
    def region(self) -> Optional[str]:
        return self._get("region")

    def set_region(self, region: str) -> "Contact":
        return self._update("region", region, clean_address_part(region))

    @property
    def postal_code(self) -> Optional[str]:
        return self._get("postal_code")

    def set_postal_code(self, postal_code: str) -> "Contact":
        return self._update("postal_code", postal_code, normalize_postal_code(postal_code))

    @property
    def country_name(self) -> Optional[str]:
        return self._get("country_name")

    def set_country_name(self, country_code: str) -> "Contact":
        """Set the ISO 3166-1 alpha-2 country code."""
        return self._update("country_name", country_code, normalize_country_code(country_code))

    @property
    def email(self) -> Optional[str]:
        return self._get("email")

    def set_email(self, email: str) -> "Contact":
        value = email.strip() if isinstance(email, str) else None
        return self._update("email", email, value if is_valid_email(value) else None)

    @property
    def phone_number(self) -> Optional[str]:
        return self._get("phone_number")

    def set_phone_number(self, phone_number: str) -> "Contact":
        return self._update("phone_number", phone_number, normalize_phone_number(phone_number))

    @property
    def fax_number(self) -> Optional[str]:
        return self._get("fax_number")

    def set_fax_number(self, fax_number: str) -> "Contact":
        return self._update("fax_number", fax_number, normalize_phone_number(fax_number))

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        # 0.0 is a real coordinate; render as text so it is not dropped as empty
        for name in ("latitude", "longitude"):
            if name in data:
                data[name] = repr(data[name])
        return data


OBJECT_TYPES = {
    "og": OpenGraphProtocol,
    "article": Article,
    "book": Book,
    "profile": Profile,
    "video": VideoObject,
    "video_episode": VideoEpisode,
    "contact": Contact,
}
