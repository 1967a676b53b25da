"""Localized SEO template table.

The table maps content type -> field -> language -> formatter. Formatters are
plain functions; descriptions are cut to a fixed character budget and always
end with an ellipsis, even when the source text was shorter than the budget.
"""
from functools import lru_cache
from typing import Callable, Dict, Mapping, Optional, Tuple

from influencelab.config import get_settings
from influencelab.services.seo.constants import (
    SEO_CONSTANTS,
    ContentType,
    LanguageCode,
    SEOField,
)
from influencelab.services.seo.errors import UnsupportedLanguage

Formatter = Callable[..., str]
TemplateGroup = Dict[str, Dict[str, Formatter]]
TemplateTable = Dict[str, TemplateGroup]

RU = LanguageCode.RU.value
UZ = LanguageCode.UZ.value
EN = LanguageCode.EN.value


def truncate(text: str, limit: int) -> str:
    """Cut text to `limit` characters and append the ellipsis marker."""
    return f"{text[:limit]}{SEO_CONSTANTS.ELLIPSIS}"


def _description(text: str) -> str:
    return truncate(text, SEO_CONSTANTS.DESCRIPTION_MAX_LENGTH)


def _og_description(description: str) -> str:
    return truncate(description, SEO_CONSTANTS.OG_DESCRIPTION_MAX_LENGTH)


def _twitter_title(title: str) -> str:
    return f"{title} - {SEO_CONSTANTS.BRAND_NAME}"


def _twitter_description(description: str) -> str:
    return truncate(description, SEO_CONSTANTS.TWITTER_DESCRIPTION_MAX_LENGTH)


def _social_fields() -> Dict[str, Dict[str, Formatter]]:
    """OG description and Twitter fields read the same in every language."""
    return {
        SEOField.OG_DESCRIPTION.value: {lang: _og_description for lang in (RU, UZ, EN)},
        SEOField.TWITTER_TITLE.value: {lang: _twitter_title for lang in (RU, UZ, EN)},
        SEOField.TWITTER_DESCRIPTION.value: {lang: _twitter_description for lang in (RU, UZ, EN)},
    }


def _blog_templates() -> TemplateGroup:
    return {
        SEOField.TITLE.value: {
            RU: lambda title: f"{title} - Блог Influence Lab | Инфлюенсер-маркетинг в Узбекистане",
            UZ: lambda title: f"{title} - Influence Lab Blogi | O'zbekistonda influencer marketing",
            EN: lambda title: f"{title} - Influence Lab Blog | Influencer Marketing in Uzbekistan",
        },
        SEOField.DESCRIPTION.value: {
            RU: lambda description, title, location="": (
                f"{_description(description)} Читайте больше о {title.lower()} в блоге Influence Lab"
                " - ведущего агентства инфлюенсер-маркетинга в Узбекистане."
            ),
            UZ: lambda description, title, location="": (
                f"{_description(description)} {title.lower()} haqida ko'proq o'qing Influence Lab blogida"
                " - O'zbekistondagi yetakchi influencer marketing agentligi."
            ),
            EN: lambda description, title, location="": (
                f"{_description(description)} Read more about {title.lower()} on Influence Lab blog"
                " - leading influencer marketing agency in Uzbekistan."
            ),
        },
        SEOField.OG_TITLE.value: {
            RU: lambda title: f"{title} | Influence Lab Blog",
            UZ: lambda title: f"{title} | Influence Lab Blogi",
            EN: lambda title: f"{title} | Influence Lab Blog",
        },
        **_social_fields(),
    }


def _project_templates() -> TemplateGroup:
    return {
        SEOField.TITLE.value: {
            RU: lambda title: f"{title} - Проект Influence Lab | Кейсы инфлюенсер-маркетинга",
            UZ: lambda title: f"{title} - Influence Lab Loyihasi | Influencer marketing keyslari",
            EN: lambda title: f"{title} - Influence Lab Project | Influencer Marketing Cases",
        },
        SEOField.DESCRIPTION.value: {
            RU: lambda description, title, location="": (
                f'{_description(description)} Смотрите кейс проекта "{title}" от Influence Lab'
                " - успешные примеры инфлюенсер-маркетинга в Узбекистане."
            ),
            UZ: lambda description, title, location="": (
                f'{_description(description)} "{title}" loyihasi keysini ko\'ring Influence Lab\'dan'
                " - O'zbekistonda muvaffaqiyatli influencer marketing misollari."
            ),
            EN: lambda description, title, location="": (
                f'{_description(description)} See case study of "{title}" project by Influence Lab'
                " - successful influencer marketing examples in Uzbekistan."
            ),
        },
        SEOField.OG_TITLE.value: {
            RU: lambda title: f"{title} | Influence Lab Project",
            UZ: lambda title: f"{title} | Influence Lab Loyihasi",
            EN: lambda title: f"{title} | Influence Lab Project",
        },
        **_social_fields(),
    }


def _led_templates(default_locations: Mapping[str, str]) -> TemplateGroup:
    def place(location: Optional[str], lang: str) -> str:
        return location or default_locations[lang]

    return {
        SEOField.TITLE.value: {
            RU: lambda title: f"{title} - LED экран в Ташкенте | Influence Lab",
            UZ: lambda title: f"{title} - Toshkentda LED ekran | Influence Lab",
            EN: lambda title: f"{title} - LED Screen in Tashkent | Influence Lab",
        },
        SEOField.DESCRIPTION.value: {
            RU: lambda description, title, location="": (
                f'{_description(description)} LED экран "{title}" в {place(location, RU)} от Influence Lab.'
                " Быстрое размещение рекламы на LED экранах."
            ),
            UZ: lambda description, title, location="": (
                f'{_description(description)} "{title}" LED ekrani {place(location, UZ)} Influence Lab\'dan.'
                " LED ekranlarda tez reklama joylashtirish."
            ),
            EN: lambda description, title, location="": (
                f'{_description(description)} LED screen "{title}" in {place(location, EN)} by Influence Lab.'
                " Fast LED screen advertising placement."
            ),
        },
        SEOField.OG_TITLE.value: {
            RU: lambda title: f"{title} | LED экран Influence Lab",
            UZ: lambda title: f"{title} | Influence Lab LED ekran",
            EN: lambda title: f"{title} | Influence Lab LED Screen",
        },
        **_social_fields(),
    }


def build_templates(default_locations: Optional[Mapping[str, str]] = None) -> TemplateTable:
    """Build the full template table.

    Args:
        default_locations: Per-language place name for LED listings without a
            location. Missing languages fall back to the built-in defaults.

    Returns:
        Nested mapping of content type -> field -> language -> formatter
    """
    locations = {**SEO_CONSTANTS.DEFAULT_LOCATIONS, **(default_locations or {})}
    return {
        ContentType.BLOG.value: _blog_templates(),
        ContentType.PROJECT.value: _project_templates(),
        ContentType.LED.value: _led_templates(locations),
    }


@lru_cache()
def _templates_for(locations: Tuple[Tuple[str, str], ...]) -> TemplateTable:
    return build_templates(dict(locations))


def templates_for_locations(default_locations: Mapping[str, str]) -> TemplateTable:
    """Shared template table for a set of default LED locations."""
    locations = {**SEO_CONSTANTS.DEFAULT_LOCATIONS, **default_locations}
    return _templates_for(tuple(sorted(locations.items())))


def configured_templates() -> TemplateTable:
    """Template table for the SEO_DEFAULT_LOCATION_* settings."""
    return templates_for_locations(get_settings().default_locations())


def get_templates(content_type, table: Optional[TemplateTable] = None) -> TemplateGroup:
    """Return the template group for a content type, or an empty mapping if unknown.

    Without an explicit table the one matching the current settings is used.
    """
    table = configured_templates() if table is None else table
    key = content_type.value if isinstance(content_type, ContentType) else content_type
    return table.get(key, {})


def get_template(content_type, field, lang, table: Optional[TemplateTable] = None) -> Optional[Formatter]:
    """Return a single localized formatter.

    Returns None for an unknown content type or field.

    Raises:
        UnsupportedLanguage: If lang is not ru, uz or en
    """
    lang_key = lang.value if isinstance(lang, LanguageCode) else lang
    if lang_key not in SEO_CONSTANTS.VALID_LANGUAGES:
        raise UnsupportedLanguage(lang)

    field_key = field.value if isinstance(field, SEOField) else field
    per_language = get_templates(content_type, table).get(field_key)
    if per_language is None:
        return None
    return per_language[lang_key]


# Built from the settings in effect at import time
SEO_TEMPLATES: TemplateTable = configured_templates()
