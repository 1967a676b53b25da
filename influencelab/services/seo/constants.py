"""Constants for the SEO metadata service."""
from enum import Enum


class ContentType(str, Enum):
    """Content type enumeration."""
    BLOG = "blog"
    PROJECT = "project"
    LED = "led"


class LanguageCode(str, Enum):
    """Supported site languages."""
    RU = "ru"
    UZ = "uz"
    EN = "en"


class SEOField(str, Enum):
    """Metadata fields produced for every page."""
    TITLE = "title"
    DESCRIPTION = "description"
    OG_TITLE = "ogTitle"
    OG_DESCRIPTION = "ogDescription"
    TWITTER_TITLE = "twitterTitle"
    TWITTER_DESCRIPTION = "twitterDescription"


class SEO_CONSTANTS:
    """Constants for metadata generation and structured data."""

    BRAND_NAME = "Influence Lab"
    LOGO_PATH = "/img/logo.png"

    # Character budgets; titles are never cut
    DESCRIPTION_MAX_LENGTH = 120
    OG_DESCRIPTION_MAX_LENGTH = 150
    TWITTER_DESCRIPTION_MAX_LENGTH = 100
    ELLIPSIS = "..."

    # Place name used in LED descriptions when a listing has no location.
    # Values are already inflected for the sentence they land in.
    DEFAULT_LOCATIONS = {
        LanguageCode.RU.value: "Ташкенте",
        LanguageCode.UZ.value: "Toshkentda",
        LanguageCode.EN.value: "Tashkent",
    }

    # JSON-LD
    SCHEMA_CONTEXT = "https://schema.org"
    SCHEMA_TYPES = {
        ContentType.BLOG.value: "BlogPosting",
        ContentType.PROJECT.value: "CreativeWork",
        ContentType.LED.value: "Product",
    }
    DEFAULT_SCHEMA_TYPE = "Product"
    OFFER_AVAILABILITY = "https://schema.org/InStock"
    OFFER_CURRENCY = "UZS"

    VALID_CONTENT_TYPES = {t.value for t in ContentType}
    VALID_LANGUAGES = {lang.value for lang in LanguageCode}


# Export enums for convenience
CONTENT_TYPES = ContentType
LANGUAGES = LanguageCode
SEO_FIELDS = SEOField
