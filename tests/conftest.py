"""
Pytest configuration and shared fixtures for backend tests.

This module provides:
- Settings isolation from the developer's environment
- Sample content records in the content API shape
"""

import pytest

from influencelab.config import get_settings
from influencelab.services.seo import generator as seo_generator


SEO_ENV_VARS = (
    "SEO_BASE_URL",
    "SEO_DEFAULT_LOCATION_RU",
    "SEO_DEFAULT_LOCATION_UZ",
    "SEO_DEFAULT_LOCATION_EN",
    "SEO_STRICT_CONTENT_TYPES",
)


# ==============================================================================
# SETTINGS FIXTURES
# ==============================================================================

@pytest.fixture
def clean_settings(monkeypatch, tmp_path):
    """Clear SEO env vars and cached settings; restore the cache afterwards."""
    for name in SEO_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)

    get_settings.cache_clear()
    monkeypatch.setattr(seo_generator, "_default_generator", None)

    yield monkeypatch

    get_settings.cache_clear()


# ==============================================================================
# TEST DATA FACTORIES
# ==============================================================================

@pytest.fixture
def blog_post():
    """Blog post as returned by the content API."""
    return {
        "id": 17,
        "img": "/uploads/blog-17.jpg",
        "images": ["/uploads/blog-17.jpg"],
        "title": "Как выбрать блогера",
        "title_uz": "Blogerni qanday tanlash kerak",
        "title_en": "How to Pick an Influencer",
        "description": "Разбираем метрики, охваты и вовлечённость перед запуском кампании.",
        "description_uz": "",
        "description_en": "",
        "links": [],
    }


@pytest.fixture
def led_screen():
    """LED screen listing as returned by the content API."""
    return {
        "id": 3,
        "img": "",
        "images": ["https://cdn.influencelab.uz/led/3.jpg"],
        "title": "Экран на Амира Темура",
        "description": "Двусторонний LED экран 6x3 м у центральной площади.",
        "location": "Юнусабаде",
    }
