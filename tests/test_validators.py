"""
Tests for ogpt/validators.py field validators.

Every validator returns the normalized value or None, so most tests
check both an accepted and a rejected input.
"""
import pytest
from datetime import date, datetime, timedelta, timezone
from unittest.mock import MagicMock, patch

from ogpt.config import OgptConfig
from ogpt.url_checker import UrlCheckResult, UrlStatus
from ogpt.validators import (
    canonicalize_url,
    clean_address_part,
    clean_text,
    extension_to_media_type,
    is_valid_email,
    media_type_in_family,
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


class TestText:
    """Test text validators."""

    def test_clean_text_trims(self):
        """Surrounding whitespace should be removed."""
        assert clean_text("  Hello  ", 128) == "Hello"

    def test_clean_text_truncates(self):
        """Text longer than the cap should be truncated."""
        assert clean_text("x" * 200, 128) == "x" * 128

    def test_clean_text_trims_before_truncating(self):
        """Leading whitespace should not count toward the cap."""
        assert clean_text("   " + "y" * 10, 5) == "yyyyy"

    def test_clean_text_rejects_non_strings(self):
        """Non-string values should be rejected."""
        assert clean_text(42, 128) is None
        assert clean_text(None, 128) is None

    def test_clean_text_empty_allowed_by_default(self):
        """Empty text is accepted unless disallowed."""
        assert clean_text("   ", 128) == ""
        assert clean_text("   ", 128, allow_empty=False) is None

    def test_non_empty_string(self):
        """Only non-empty strings should pass."""
        assert non_empty_string("Front page") == "Front page"
        assert non_empty_string("") is None
        assert non_empty_string(3) is None

    def test_one_of(self):
        """Values outside the allowed set should be rejected."""
        assert one_of("the", ("a", "an", "auto", "the")) == "the"
        assert one_of("some", ("a", "an", "auto", "the")) is None
        assert one_of(None, ("a",)) is None


class TestCanonicalizeUrl:
    """Test URL canonicalization."""

    def test_adds_root_path(self):
        """An empty path should become '/'."""
        assert canonicalize_url("http://example.com") == "http://example.com/"

    def test_drops_userinfo_and_port(self):
        """User info and port should be removed."""
        assert canonicalize_url("https://user:pw@example.com:8443/a") == "https://example.com/a"

    def test_keeps_query_and_fragment(self):
        """Query and fragment should survive."""
        assert canonicalize_url("http://example.com/p?q=1#top") == "http://example.com/p?q=1#top"

    def test_lowercases_scheme_and_host(self):
        """Scheme and host are case-insensitive and normalized to lower case."""
        assert canonicalize_url("HTTP://Example.COM/Path") == "http://example.com/Path"

    @pytest.mark.parametrize("url", [
        "ftp://example.com/file",
        "javascript:alert(1)",
        "example.com/page",
        "",
        "   ",
        None,
        "http://",
    ])
    def test_rejects_invalid(self, url):
        """Non-http(s) or host-less URLs should be rejected."""
        assert canonicalize_url(url) is None

    def test_ipv6_host(self):
        """IPv6 hosts should keep their brackets."""
        assert canonicalize_url("http://[::1]:8080/x") == "http://[::1]/x"


class TestValidateUrl:
    """Test URL validation with and without live verification."""

    def test_without_verification_returns_trimmed_url(self):
        """With verification off the URL is only trimmed."""
        assert validate_url("  http://example.com/page  ") == "http://example.com/page"

    def test_without_verification_does_not_touch_network(self):
        """No request should be made when verification is off."""
        with patch("ogpt.validators.check_url") as mock_check:
            validate_url("http://example.com/")
        mock_check.assert_not_called()

    def test_rejects_non_strings_and_empty(self):
        """Non-strings and blank strings should be rejected."""
        assert validate_url(None) is None
        assert validate_url(123) is None
        assert validate_url("   ") is None

    def test_verification_canonicalizes_and_checks(self):
        """With verification on the canonical URL should be checked."""
        config = OgptConfig(verify_urls=True, timeout=2)
        ok = UrlCheckResult(url="http://example.com/", status=UrlStatus.OK, status_code=200)
        with patch("ogpt.validators.check_url", return_value=ok) as mock_check:
            assert validate_url("http://Example.com", config=config) == "http://example.com/"
        mock_check.assert_called_once()
        args, kwargs = mock_check.call_args
        assert args[0] == "http://example.com/"
        assert kwargs["timeout"] == 2
        assert kwargs["accepted_mimes"] == ("text/html", "application/xhtml+xml")

    def test_verification_failure_rejects(self):
        """A failed live check should reject the URL."""
        config = OgptConfig(verify_urls=True)
        failed = UrlCheckResult(url="http://example.com/", status=UrlStatus.HTTP_ERROR, status_code=404)
        with patch("ogpt.validators.check_url", return_value=failed):
            assert validate_url("http://example.com/", config=config) is None

    def test_verification_rejects_malformed_url_without_request(self):
        """Malformed URLs should be rejected before any request."""
        config = OgptConfig(verify_urls=True)
        with patch("ogpt.validators.check_url") as mock_check:
            assert validate_url("ftp://example.com/", config=config) is None
        mock_check.assert_not_called()

    def test_require_https(self):
        """Secure URLs must use https when verifying."""
        config = OgptConfig(verify_urls=True)
        with patch("ogpt.validators.check_url") as mock_check:
            assert validate_url("http://example.com/", config=config, require_https=True) is None
        mock_check.assert_not_called()

    def test_session_is_passed_through(self):
        """A caller-provided session should reach the checker."""
        config = OgptConfig(verify_urls=True)
        session = MagicMock()
        ok = UrlCheckResult(url="https://example.com/", status=UrlStatus.OK)
        with patch("ogpt.validators.check_url", return_value=ok) as mock_check:
            validate_url("https://example.com/", config=config, session=session)
        assert mock_check.call_args.kwargs["session"] is session


class TestNumbersAndDates:
    """Test integer and date validators."""

    def test_positive_int(self):
        """Only integers above zero should pass."""
        assert positive_int(400) == 400
        assert positive_int(0) is None
        assert positive_int(-1) is None

    def test_positive_int_rejects_other_types(self):
        """Floats, strings and booleans are not integers here."""
        assert positive_int(4.0) is None
        assert positive_int("400") is None
        assert positive_int(True) is None

    def test_aware_datetime_converted_to_utc(self):
        """Aware datetimes should be converted to UTC."""
        pacific = timezone(timedelta(hours=-8))
        value = datetime(2013, 2, 14, 16, 39, 6, tzinfo=pacific)
        assert to_iso8601(value) == "2013-02-15T00:39:06+00:00"

    def test_naive_datetime_taken_as_utc(self):
        """Naive datetimes should be treated as UTC."""
        assert to_iso8601(datetime(2011, 11, 3, 1, 23, 45)) == "2011-11-03T01:23:45+00:00"

    def test_date(self):
        """Dates should become YYYY-MM-DD."""
        assert to_iso8601(date(2012, 5, 1)) == "2012-05-01"

    def test_string_kept_verbatim(self):
        """Strings of at least ten characters are kept as given."""
        assert to_iso8601("2011-11-03T01:23:45Z") == "2011-11-03T01:23:45Z"
        assert to_iso8601("2011-11-03") == "2011-11-03"

    def test_short_string_and_other_types_rejected(self):
        """Short strings and non-date values should be rejected."""
        assert to_iso8601("2011-11") is None
        assert to_iso8601(1320283425) is None
        assert to_iso8601(None) is None


class TestIsbn:
    """Test ISBN check digit validation."""

    def test_isbn10_with_hyphens(self):
        """The documented ISBN-10 should be accepted with hyphens removed."""
        assert normalize_isbn("0-306-40615-2") == "0306406152"

    def test_isbn10_altered_check_digit(self):
        """Changing the last digit should invalidate the ISBN."""
        assert normalize_isbn("0306406153") is None
        assert normalize_isbn("0306406151") is None

    def test_isbn10_x_check_digit(self):
        """'X' stands for a check value of 10 and is upper-cased."""
        assert normalize_isbn("0-8044-2957-X") == "080442957X"
        assert normalize_isbn("080442957x") == "080442957X"

    def test_isbn10_zero_check_digit(self):
        """A weighted sum divisible by 11 has check digit 0."""
        assert normalize_isbn("0-7167-0344-0") == "0716703440"

    def test_isbn13(self):
        """A valid ISBN-13 should be accepted."""
        assert normalize_isbn("978-0-306-40615-7") == "9780306406157"

    def test_isbn13_altered_check_digit(self):
        """Changing the ISBN-13 check digit should invalidate it."""
        assert normalize_isbn("9780306406158") is None

    def test_isbn13_other_valid_codes(self):
        """Other valid ISBN-13 codes should be accepted."""
        assert normalize_isbn("978-1-86197-876-9") == "9781861978769"
        assert normalize_isbn("9780000000002") == "9780000000002"

    def test_isbn13_zero_check_digit(self):
        """A sum divisible by 10 has check digit 0."""
        assert normalize_isbn("9780000000200") == "9780000000200"

    def test_spaces_are_removed(self):
        """Whitespace separators should be removed like hyphens."""
        assert normalize_isbn("0 306 40615 2") == "0306406152"

    @pytest.mark.parametrize("value", ["", "12345", "ABCDEFGHIJ", "03064061522", None, 306406152])
    def test_rejects_malformed(self, value):
        """Wrong lengths, letters and non-strings should be rejected."""
        assert normalize_isbn(value) is None

    @pytest.mark.parametrize("value", [
        "030640615²",
        "978030640615²",
        "０３０６４０６１５２",
        "٠٣٠٦٤٠٦١٥٢",
        "03064X6152",
        "X306406152",
        "97803064X6157",
    ])
    def test_rejects_non_ascii_digits_and_stray_x(self, value):
        """Unicode digits, full-width digits and a misplaced X are rejected without raising."""
        assert normalize_isbn(value) is None


class TestMediaTypes:
    """Test extension and media type helpers."""

    def test_extension_lookup(self):
        """Known extensions should map to their media type."""
        assert extension_to_media_type("image", "jpg") == "image/jpeg"
        assert extension_to_media_type("image", "svg") == "image/svg+xml"
        assert extension_to_media_type("audio", "mp3") == "audio/mpeg"
        assert extension_to_media_type("video", "swf") == "application/x-shockwave-flash"

    def test_extension_is_normalized(self):
        """Leading dots and upper case should be ignored."""
        assert extension_to_media_type("image", ".PNG") == "image/png"

    def test_unknown_extension(self):
        """Unknown extensions and kinds should give None."""
        assert extension_to_media_type("image", "mp3") is None
        assert extension_to_media_type("text", "html") is None
        assert extension_to_media_type("image", "") is None

    def test_media_type_in_family(self):
        """Only types in the family (or Flash when allowed) should pass."""
        assert media_type_in_family("image/png", "image") == "image/png"
        assert media_type_in_family("video/mp4", "image") is None
        assert media_type_in_family("application/x-shockwave-flash", "video") is None
        assert media_type_in_family("application/x-shockwave-flash", "video", allow_flash=True) == (
            "application/x-shockwave-flash"
        )


class TestContact:
    """Test location and contact validators."""

    def test_latitude_range(self):
        """Latitude must be a float strictly between -90 and 90."""
        assert valid_latitude(37.416343) == 37.416343
        assert valid_latitude(0.0) == 0.0
        assert valid_latitude(90.0) is None
        assert valid_latitude(-90.5) is None
        assert valid_latitude(37) is None

    def test_longitude_range(self):
        """Longitude must be a float strictly between -180 and 180."""
        assert valid_longitude(-122.153013) == -122.153013
        assert valid_longitude(180.0) is None
        assert valid_longitude("12.5") is None

    def test_address_part(self):
        """Address parts are trimmed and rejected beyond 40 characters."""
        assert clean_address_part("  1601 S California Ave ") == "1601 S California Ave"
        assert clean_address_part("x" * 40) == "x" * 40
        assert clean_address_part("x" * 41) is None
        assert clean_address_part("   ") is None

    def test_postal_code(self):
        """Postal codes are upper-cased and reduced to letters and digits."""
        assert normalize_postal_code("94304-1111") == "943041111"
        assert normalize_postal_code("sw1a 1aa") == "SW1A1AA"
        assert normalize_postal_code("1") is None
        assert normalize_postal_code("1234567890") is None

    def test_country_code(self):
        """Country codes must be assigned ISO 3166-1 alpha-2 codes."""
        assert normalize_country_code("US") == "US"
        assert normalize_country_code(" GB ") == "GB"
        assert normalize_country_code("us") is None
        assert normalize_country_code("USA") is None

    @pytest.mark.parametrize("code", ["ZZ", "XX", "AA", "UK"])
    def test_unassigned_country_codes(self, code):
        """Well-formed but unassigned codes should be rejected."""
        assert normalize_country_code(code) is None

    def test_phone_number(self):
        """Phone numbers keep their digits and must fit E.164."""
        assert normalize_phone_number("+1 (650) 123-4567") == "16501234567"
        assert normalize_phone_number("1234567890123456") is None
        assert normalize_phone_number("call me") is None

    @pytest.mark.parametrize("email", [
        "user@example.com",
        "first.last+tag@mail.example.co.uk",
        '"quoted name"@example.com',
        "admin@[192.168.0.1]",
    ])
    def test_valid_emails(self, email):
        """Common addr-spec forms should be accepted."""
        assert is_valid_email(email) is True

    @pytest.mark.parametrize("email", [
        "plainaddress",
        "@example.com",
        "user@localhost",
        "user@example.123",
        "user..dots@example.com",
        "user@example.com trailing",
        "x" * 65 + "@example.com",
        None,
    ])
    def test_invalid_emails(self, email):
        """Malformed addresses should be rejected."""
        assert is_valid_email(email) is False

    def test_email_length_cap(self):
        """Addresses longer than 254 characters should be rejected."""
        domain = ".".join(["a" * 60] * 5) + ".com"
        assert is_valid_email("user@" + domain) is False
