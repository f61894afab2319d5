"""Plain-text rendering of a decoded feed."""

from .models import Feed, FormatOptions, Item
from .text import normalize_value


def format_item(index: int, item: Item, options: FormatOptions) -> str:
    """Render one item block, fields in ascending key order."""
    lines = [f"Channel Item {index}:\n"]
    for key in item.sorted_keys():
        value = normalize_value(
            item.fields[key],
            strip_html=options.strip_html,
            remove_space=options.remove_space,
        )
        lines.append(f"{key}: {value}\n")
    return "".join(lines)


def format_feed(feed: Feed, options: FormatOptions | None = None) -> str:
    """Render a feed as a deterministic plain-text document.

    The header carries the channel title and, when present, the channel link,
    followed by the separator. Items follow in document order, each block
    separated from the next by the separator. A non-zero ``length`` stops
    after that many items.

    Args:
        feed: Decoded feed
        options: Formatting options, defaults when omitted

    Returns:
        The formatted document
    """
    if options is None:
        options = FormatOptions()

    items = feed.items
    if options.length != 0:
        # negative limits emit nothing
        items = items[: max(options.length, 0)]

    parts = [f"Channel Title: {feed.title}\n"]
    if feed.link:
        parts.append(f"Channel Link: {feed.link}")
    parts.append(options.separator)

    for position, item in enumerate(items):
        parts.append(format_item(position + 1, item, options))
        if position < len(items) - 1:
            parts.append(options.separator)

    return "".join(parts)
