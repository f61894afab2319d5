"""Text normalization shared by the feed formatter and the HTML extractor."""

import re

TAG_PATTERN = re.compile(r"<[^>]*>")
WHITESPACE_PATTERN = re.compile(r"\s+")


def strip_tags(text: str) -> str:
    """Remove every ``<...>`` tag, keeping inner and surrounding text.

    HTML entities are left untouched.
    """
    return TAG_PATTERN.sub("", text)


def collapse_whitespace(text: str) -> str:
    """Replace each run of whitespace (newlines and tabs included) with one space."""
    return WHITESPACE_PATTERN.sub(" ", text)


def normalize_value(text: str, strip_html: bool = True, remove_space: bool = True) -> str:
    """Apply strip-tags, trim and collapse-whitespace in that order.

    Trimming always happens and runs before collapsing so no leading or
    trailing space survives.

    Args:
        text: Raw value
        strip_html: Remove markup tags first
        remove_space: Collapse inner whitespace runs

    Returns:
        Normalized value
    """
    if not text:
        return ""

    if strip_html:
        text = strip_tags(text)

    text = text.strip()

    if remove_space:
        text = collapse_whitespace(text)

    return text
