"""feed2text: fetch an RSS feed or HTML page and return it as plain text.

Pipeline for feeds: fetch -> open-schema decode -> format -> normalize.
Pipeline for pages: fetch -> CSS select -> normalize.
"""

from .formatter import format_feed
from .models import Feed, FormatOptions, HtmlOptions, Item
from .rss import decode_feed

__all__ = [
    "Feed",
    "FormatOptions",
    "HtmlOptions",
    "Item",
    "decode_feed",
    "format_feed",
]
