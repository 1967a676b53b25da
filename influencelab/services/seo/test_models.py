"""Tests for SEO data models."""
import dataclasses

import pytest

from influencelab.services.seo.models import ContentRecord, SEOMeta


class TestContentRecord:
    """Test ContentRecord resolution and parsing."""

    def test_from_dict_ignores_unknown_keys(self):
        record = ContentRecord.from_dict({"id": 1, "title": "T", "links": ["https://t.me/x"], "price": 10})

        assert record.id == 1
        assert record.title == "T"

    def test_from_dict_accepts_api_shape(self):
        """Records as the content API serves them."""
        record = ContentRecord.from_dict({
            "id": 12,
            "img": "/uploads/1.jpg",
            "images": ["/uploads/1.jpg", "/uploads/2.jpg"],
            "title": "",
            "title_uz": "Ekran",
            "title_en": "Screen",
            "description": "",
            "description_uz": "",
            "description_en": "",
            "location": "Chilonzor",
        })

        assert record.images == ("/uploads/1.jpg", "/uploads/2.jpg")
        assert record.resolved_title == ""
        assert record.resolved_image == "/uploads/1.jpg"
        assert record.resolved_location == "Chilonzor"

    def test_single_image_string_becomes_gallery(self):
        record = ContentRecord.from_dict({"images": "/uploads/only.jpg"})

        assert record.images == ("/uploads/only.jpg",)
        assert record.resolved_image == "/uploads/only.jpg"

    def test_null_images(self):
        record = ContentRecord.from_dict({"images": None})

        assert record.images == ()
        assert record.resolved_image == ""

    def test_image_resolution_order(self):
        assert ContentRecord(image="a", img="b", images=("c",)).resolved_image == "a"
        assert ContentRecord(img="b", images=("c",)).resolved_image == "b"
        assert ContentRecord(images=("c",)).resolved_image == "c"
        assert ContentRecord().resolved_image == ""

    def test_text_resolution(self):
        record = ContentRecord(title=None, title_ru="Заголовок", description="Text", description_ru="Текст")

        assert record.resolved_title == "Заголовок"
        assert record.resolved_description == "Text"

    def test_record_is_immutable(self):
        record = ContentRecord(title="T")

        with pytest.raises(dataclasses.FrozenInstanceError):
            record.title = "Other"


class TestSEOMeta:

    def test_to_dict_uses_meta_field_names(self):
        meta = SEOMeta(
            title="t",
            description="d",
            og_title="ot",
            og_description="od",
            twitter_title="tt",
            twitter_description="td",
        )

        assert meta.to_dict() == {
            "title": "t",
            "description": "d",
            "ogTitle": "ot",
            "ogDescription": "od",
            "twitterTitle": "tt",
            "twitterDescription": "td",
        }
