"""Data models for the SEO metadata service."""
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Mapping, Optional, Tuple

from influencelab.services.seo.constants import SEOField


@dataclass(frozen=True)
class ContentRecord:
    """A blog post, project or LED listing as served by the content API.

    Every field is optional. Text fields keep the per-language columns so the
    Russian ones can act as fallbacks.

    Attributes:
        id: Record identifier used in the canonical URL
        title: Title in the requested language
        title_ru: Russian title, used when `title` is empty
        description: Description in the requested language
        description_ru: Russian description, used when `description` is empty
        location: Place name of an LED screen
        image: Primary image path or URL
        img: Single-image column of the content API
        images: Ordered gallery; the first entry is the fallback image
    """
    id: Optional[Any] = None
    title: Optional[str] = None
    title_ru: Optional[str] = None
    title_uz: Optional[str] = None
    title_en: Optional[str] = None
    description: Optional[str] = None
    description_ru: Optional[str] = None
    description_uz: Optional[str] = None
    description_en: Optional[str] = None
    location: Optional[str] = None
    image: Optional[str] = None
    img: Optional[str] = None
    images: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def resolved_title(self) -> str:
        return self.title or self.title_ru or ""

    @property
    def resolved_description(self) -> str:
        return self.description or self.description_ru or ""

    @property
    def resolved_location(self) -> str:
        return self.location or ""

    @property
    def resolved_image(self) -> str:
        """First non-empty of image, img and images[0]."""
        if self.image:
            return self.image
        if self.img:
            return self.img
        if self.images:
            return self.images[0] or ""
        return ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ContentRecord":
        """Create a ContentRecord from a loosely-typed mapping.

        Unknown keys are ignored. A single string under `images` is treated
        as a one-element gallery.
        """
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in known}

        images = values.pop("images", None)
        if images is None:
            images = ()
        elif isinstance(images, str):
            images = (images,)
        else:
            images = tuple(images)

        return cls(images=images, **values)


@dataclass(frozen=True)
class SEOMeta:
    """Generated page metadata for one record in one language."""
    title: str
    description: str
    og_title: str
    og_description: str
    twitter_title: str
    twitter_description: str

    def to_dict(self) -> Dict[str, str]:
        """Flat mapping keyed by the meta field names used in page templates."""
        return {
            SEOField.TITLE.value: self.title,
            SEOField.DESCRIPTION.value: self.description,
            SEOField.OG_TITLE.value: self.og_title,
            SEOField.OG_DESCRIPTION.value: self.og_description,
            SEOField.TWITTER_TITLE.value: self.twitter_title,
            SEOField.TWITTER_DESCRIPTION.value: self.twitter_description,
        }
