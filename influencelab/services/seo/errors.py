"""Errors raised by the SEO metadata service."""


class SEOError(ValueError):
    """Base error for SEO metadata generation."""


class InvalidContentType(SEOError):
    """Content type is not one of blog, project or led."""

    def __init__(self, content_type):
        self.content_type = content_type
        super().__init__(f"Unknown content type: {content_type!r}")


class UnsupportedLanguage(SEOError):
    """Language code is not one of ru, uz or en."""

    def __init__(self, lang):
        self.lang = lang
        super().__init__(f"Unsupported language: {lang!r}")
