"""SEO metadata service for blog posts, projects and LED listings."""
from influencelab.services.seo.models import ContentRecord, SEOMeta
from influencelab.services.seo.constants import (
    SEO_CONSTANTS,
    CONTENT_TYPES,
    LANGUAGES,
    SEO_FIELDS,
)
from influencelab.services.seo.errors import SEOError, InvalidContentType, UnsupportedLanguage
from influencelab.services.seo.templates import (
    SEO_TEMPLATES,
    build_templates,
    configured_templates,
    get_template,
    get_templates,
    templates_for_locations,
)
from influencelab.services.seo.generator import (
    SEOMetaGenerator,
    generate_seo_meta,
    generate_structured_data,
    to_json_ld,
)

__all__ = [
    "ContentRecord",
    "SEOMeta",
    "SEO_CONSTANTS",
    "CONTENT_TYPES",
    "LANGUAGES",
    "SEO_FIELDS",
    "SEOError",
    "InvalidContentType",
    "UnsupportedLanguage",
    "SEO_TEMPLATES",
    "build_templates",
    "configured_templates",
    "get_template",
    "get_templates",
    "templates_for_locations",
    "SEOMetaGenerator",
    "generate_seo_meta",
    "generate_structured_data",
    "to_json_ld",
]
