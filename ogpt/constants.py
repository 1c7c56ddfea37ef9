"""
Constants for OGPT.

These constants are used by various modules for sensible defaults.
Network settings are also available via the config system.
"""

VERSION = "2.0"

# Namespaces
OG_PREFIX = "og"
OG_NAMESPACE = "http://ogp.me/ns#"

# Meta attribute: 'property' for RDFa, 'name' for HTML validation
META_ATTRIBUTE = "property"
META_ATTRIBUTES = ("property", "name")

# Network
URL_CHECK_TIMEOUT = 5
USER_AGENT = f"Open Graph protocol validator {VERSION} (+http://ogp.me/)"
ALLOWED_URL_SCHEMES = ("http", "https")
PAGE_MEDIA_TYPES = ("text/html", "application/xhtml+xml")

# Limits
MAX_TITLE_LENGTH = 128
MAX_SITE_NAME_LENGTH = 128
MAX_DESCRIPTION_LENGTH = 255
MAX_ADDRESS_PART_LENGTH = 40
MAX_EMAIL_LENGTH = 254
MAX_PHONE_DIGITS = 15
MIN_POSTAL_CODE_LENGTH = 2
MAX_POSTAL_CODE_LENGTH = 9

# Vocabularies
DETERMINERS = ("a", "an", "auto", "the")
GENDERS = ("male", "female")
FLASH_MEDIA_TYPE = "application/x-shockwave-flash"
