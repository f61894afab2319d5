"""Data models for the feed2text service."""

from dataclasses import dataclass, field

DEFAULT_SEPARATOR = "\n\n"
DEFAULT_SELECTOR = "body"


@dataclass
class Item:
    """One feed entry as an open field-name to value mapping.

    Every direct child element of an ``<item>`` becomes a field keyed by its
    local name. A repeated element name overwrites the earlier value.
    """

    fields: dict[str, str] = field(default_factory=dict)

    def set_field(self, name: str, value: str) -> None:
        """Store a field value, last write wins."""
        self.fields[name] = value

    def sorted_keys(self) -> list[str]:
        """Field names in ascending lexicographic order."""
        return sorted(self.fields)


@dataclass(frozen=True)
class Feed:
    """Decoded RSS channel."""

    title: str = ""
    link: str = ""
    items: tuple[Item, ...] = ()


@dataclass(frozen=True)
class FormatOptions:
    """Rendering knobs for the content formatter."""

    separator: str = DEFAULT_SEPARATOR
    strip_html: bool = True
    remove_space: bool = True
    length: int = 0


@dataclass(frozen=True)
class HtmlOptions:
    """Extraction knobs for the HTML extractor."""

    selector: str = DEFAULT_SELECTOR
    separator: str = DEFAULT_SEPARATOR
    strip_html: bool = True
    remove_space: bool = True
