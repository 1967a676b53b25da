"""SEO metadata generator for blog posts, projects and LED listings."""
import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional, Union

from influencelab.config import get_settings
from influencelab.services.seo.constants import SEO_CONSTANTS, ContentType, LanguageCode, SEOField
from influencelab.services.seo.errors import InvalidContentType, UnsupportedLanguage
from influencelab.services.seo.models import ContentRecord, SEOMeta
from influencelab.services.seo.templates import get_templates, templates_for_locations

logger = logging.getLogger(__name__)

Content = Union[ContentRecord, Mapping[str, Any]]


def _as_record(content: Content) -> ContentRecord:
    if isinstance(content, ContentRecord):
        return content
    return ContentRecord.from_dict(content or {})


def _key(value) -> str:
    """Enum members and plain strings both select by their string value."""
    return value.value if isinstance(value, (ContentType, LanguageCode)) else value


def _isoformat(moment: datetime) -> str:
    """UTC timestamp with millisecond precision and a Z suffix."""
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class SEOMetaGenerator:
    """Service for generating page metadata and JSON-LD structured data.

    Each call is a pure function of its inputs; an instance only holds its
    configuration and a read-only template table.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        default_locations: Optional[Mapping[str, str]] = None,
        strict: Optional[bool] = None,
    ):
        """Initialize the generator.

        Args:
            base_url: Canonical URL prefix. Defaults to SEO_BASE_URL.
            default_locations: Per-language place name for LED listings
                without a location. Defaults to the SEO_DEFAULT_LOCATION_* settings.
            strict: Raise InvalidContentType for unknown content types instead
                of degrading. Defaults to SEO_STRICT_CONTENT_TYPES.
        """
        settings = get_settings()
        self.constants = SEO_CONSTANTS
        self.base_url = (base_url or settings.SEO_BASE_URL).rstrip("/")
        self.strict = settings.SEO_STRICT_CONTENT_TYPES if strict is None else strict
        self.default_locations = {**settings.default_locations(), **(default_locations or {})}
        self.templates = templates_for_locations(self.default_locations)

    def _check_language(self, lang) -> str:
        lang_key = _key(lang)
        if lang_key not in self.constants.VALID_LANGUAGES:
            raise UnsupportedLanguage(lang)
        return lang_key

    def build_seo_meta(self, content: Content, content_type, lang=LanguageCode.RU) -> Optional[SEOMeta]:
        """Generate the six metadata strings for a content record.

        Args:
            content: Content record or a mapping with its fields
            content_type: blog, project or led
            lang: ru, uz or en

        Returns:
            SEOMeta, or None when the content type has no templates

        Raises:
            InvalidContentType: If the content type is unknown and strict mode is on
            UnsupportedLanguage: If lang is not supported
        """
        record = _as_record(content)
        templates = get_templates(content_type, self.templates)
        if not templates:
            if self.strict:
                raise InvalidContentType(content_type)
            logger.warning(f"No SEO templates for content type {content_type!r}, skipping")
            return None

        lang_key = self._check_language(lang)
        title = record.resolved_title
        description = record.resolved_description
        location = record.resolved_location

        logger.debug(f"Generating SEO meta for {_key(content_type)}/{record.id} ({lang_key})")

        return SEOMeta(
            title=templates[SEOField.TITLE.value][lang_key](title),
            description=templates[SEOField.DESCRIPTION.value][lang_key](description, title, location),
            og_title=templates[SEOField.OG_TITLE.value][lang_key](title),
            og_description=templates[SEOField.OG_DESCRIPTION.value][lang_key](description),
            twitter_title=templates[SEOField.TWITTER_TITLE.value][lang_key](title),
            twitter_description=templates[SEOField.TWITTER_DESCRIPTION.value][lang_key](description),
        )

    def generate_seo_meta(self, content: Content, content_type, lang=LanguageCode.RU) -> Dict[str, str]:
        """Generate the flat metadata mapping; empty for an unknown content type."""
        meta = self.build_seo_meta(content, content_type, lang)
        return meta.to_dict() if meta is not None else {}

    def resolve_image_url(self, image: str) -> str:
        """Absolute image URL; relative paths are prefixed with the base URL."""
        if image.startswith("http"):
            return image
        if not image.startswith("/"):
            image = f"/{image}"
        return f"{self.base_url}{image}"

    def generate_structured_data(
        self,
        content: Content,
        content_type,
        lang=LanguageCode.RU,
        now: Optional[datetime] = None,
    ) -> Dict[str, Any]:
        """Generate schema.org structured data for a content record.

        Unknown content types map to Product unless strict mode is on. The
        language is not reflected in the output.

        Args:
            content: Content record or a mapping with its fields
            content_type: blog, project or led
            lang: ru, uz or en
            now: Publication timestamp; the current UTC time when omitted

        Returns:
            JSON-LD compatible dictionary

        Raises:
            InvalidContentType: If the content type is unknown and strict mode is on
        """
        record = _as_record(content)
        type_key = _key(content_type)
        if self.strict and type_key not in self.constants.VALID_CONTENT_TYPES:
            raise InvalidContentType(content_type)

        image = record.resolved_image
        timestamp = _isoformat(now or datetime.now(timezone.utc))
        record_id = "" if record.id is None else record.id

        structured_data: Dict[str, Any] = {
            "@context": self.constants.SCHEMA_CONTEXT,
            "@type": self.constants.SCHEMA_TYPES.get(type_key, self.constants.DEFAULT_SCHEMA_TYPE),
            "headline": record.resolved_title,
            "description": record.resolved_description,
            "url": f"{self.base_url}/{type_key}/{record_id}",
            "datePublished": timestamp,
            "dateModified": timestamp,
            "author": {
                "@type": "Organization",
                "name": self.constants.BRAND_NAME,
                "url": self.base_url,
            },
            "publisher": {
                "@type": "Organization",
                "name": self.constants.BRAND_NAME,
                "logo": {
                    "@type": "ImageObject",
                    "url": f"{self.base_url}{self.constants.LOGO_PATH}",
                },
            },
        }

        if image:
            structured_data["image"] = {
                "@type": "ImageObject",
                "url": self.resolve_image_url(image),
            }

        if type_key == ContentType.LED.value and record.location:
            structured_data["@type"] = "Product"
            structured_data["brand"] = {
                "@type": "Brand",
                "name": self.constants.BRAND_NAME,
            }
            structured_data["offers"] = {
                "@type": "Offer",
                "availability": self.constants.OFFER_AVAILABILITY,
                "priceCurrency": self.constants.OFFER_CURRENCY,
            }

        return structured_data


def to_json_ld(structured_data: Mapping[str, Any], indent: Optional[int] = None) -> str:
    """Serialize structured data for a <script type="application/ld+json"> block."""
    return json.dumps(structured_data, ensure_ascii=False, indent=indent)


_default_generator: Optional[SEOMetaGenerator] = None


def get_generator() -> SEOMetaGenerator:
    """Shared generator built from application settings."""
    global _default_generator
    if _default_generator is None:
        _default_generator = SEOMetaGenerator()
    return _default_generator


def generate_seo_meta(content: Content, content_type, lang=LanguageCode.RU) -> Dict[str, str]:
    """Generate SEO meta tags for a content record with the default settings."""
    return get_generator().generate_seo_meta(content, content_type, lang)


def generate_structured_data(content: Content, content_type, lang=LanguageCode.RU) -> Dict[str, Any]:
    """Generate JSON-LD structured data for a content record with the default settings."""
    return get_generator().generate_structured_data(content, content_type, lang)
