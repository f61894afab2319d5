"""RSS feed decoding and processing for the feed2text service."""

import xml.etree.ElementTree as ET
from collections.abc import Iterator

import requests

from .errors import ParseError
from .fetch import DEFAULT_TIMEOUT, create_session, fetch_url
from .formatter import format_feed
from .logging_config import create_request_logger
from .models import Feed, FormatOptions, Item

READ_CHUNK_SIZE = 64 * 1024


def local_name(tag: str) -> str:
    """Strip the ``{namespace}`` prefix ElementTree puts on qualified names."""
    if tag.startswith("{"):
        return tag.rpartition("}")[2]
    return tag


def element_text(element: ET.Element) -> str:
    """Concatenated character data of an element and its descendants.

    Text inside nested child elements is included, so unescaped XHTML in a
    description or a grouping element such as ``media:group`` still yields its
    words. A decoder that keeps only the element's own character data would
    return whitespace for those.
    """
    return "".join(element.itertext())


class XmlEventReader:
    """Pull-style stream of ``(event, element)`` pairs over an XML document.

    Events are ``"start"`` and ``"end"``. An element's text and children are
    complete at its ``"end"`` event. Malformed input raises
    ``xml.etree.ElementTree.ParseError`` while iterating.
    """

    def __init__(self, content: bytes, chunk_size: int = READ_CHUNK_SIZE):
        self.content = content
        self.chunk_size = chunk_size

    def __iter__(self) -> Iterator[tuple[str, ET.Element]]:
        parser = ET.XMLPullParser(events=("start", "end"))
        for offset in range(0, len(self.content), self.chunk_size):
            parser.feed(self.content[offset : offset + self.chunk_size])
            yield from parser.read_events()
        parser.close()
        yield from parser.read_events()


def resolve_link(element: ET.Element) -> str:
    """Best-available URL of a ``link`` or ``atom:link`` element.

    A non-empty ``href`` attribute wins (Atom); otherwise the element text is
    used (RSS). Returns an empty string when neither is present.
    """
    for name, value in element.attrib.items():
        if local_name(name) == "href" and value:
            return value
    return element_text(element).strip()


def decode_item(element: ET.Element) -> Item:
    """Capture every direct child of an ``<item>`` as a field.

    Unknown extension elements are kept under their local name. When a name
    repeats the later element overwrites the earlier one.
    """
    item = Item()
    for child in element:
        item.set_field(local_name(child.tag), element_text(child))
    return item


def decode_feed(content: bytes) -> Feed:
    """Decode an RSS document into a :class:`Feed` without a fixed item schema.

    The ``channel`` element is looked up among the root's direct children;
    only its own direct ``title``, ``link`` and ``item`` children are
    recognized. Everything else in the document is ignored, including any
    trailing content after the root element closes.

    Args:
        content: Raw XML bytes

    Returns:
        The decoded feed

    Raises:
        ParseError: If the document is not well-formed XML up to the end of
            its root element
    """
    title = ""
    link = ""
    items: list[Item] = []

    depth = 0
    in_channel = False
    try:
        for event, element in XmlEventReader(content):
            if event == "start":
                depth += 1
                if depth == 2 and local_name(element.tag) == "channel":
                    in_channel = True
                continue

            if in_channel and depth == 3:
                name = local_name(element.tag)
                if name == "title":
                    title = element_text(element)
                elif name == "link":
                    resolved = resolve_link(element)
                    if resolved:
                        link = resolved
                elif name == "item":
                    items.append(decode_item(element))
                    element.clear()
            elif depth == 2:
                in_channel = False
            depth -= 1
            if depth == 0:
                # anything after the root element is ignored
                break
    except ET.ParseError as e:
        raise ParseError(f"failed to parse RSS: {e}") from e

    return Feed(title=title, link=link, items=tuple(items))


class FeedProcessor:
    """Fetches, decodes and formats one RSS feed per call."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        request_id: str | None = None,
        session: requests.Session | None = None,
    ):
        """Initialize FeedProcessor with configuration.

        Args:
            timeout: HTTP request timeout in seconds
            request_id: Request ID for logging context
            session: Shared HTTP session; a new one is created when omitted
        """
        self.timeout = timeout
        self.logger = create_request_logger("feed_processor", request_id)
        self.session = session if session is not None else create_session()

    def fetch_feed(self, feed_url: str) -> bytes:
        """Download the raw feed document.

        Raises:
            UpstreamFetchError: If the download fails or is not a 200
        """
        response = fetch_url(self.session, feed_url, self.timeout, self.logger)
        return response.content

    def parse_feed(self, content: bytes) -> Feed:
        """Decode raw feed bytes.

        Raises:
            ParseError: If the document is malformed
        """
        try:
            feed = decode_feed(content)
        except ParseError as e:
            self.logger.error(f"Failed to parse feed: {e}", error=str(e))
            raise

        self.logger.info(
            "Successfully parsed feed",
            items_count=len(feed.items),
        )
        return feed

    def process(self, feed_url: str, options: FormatOptions) -> str:
        """Fetch a feed and render it as plain text.

        Args:
            feed_url: URL of the RSS feed
            options: Formatting options from the request

        Returns:
            The formatted document
        """
        self.logger.log_request_start(url=feed_url)
        try:
            feed = self.parse_feed(self.fetch_feed(feed_url))
        except Exception:
            self.logger.log_request_end(success=False, url=feed_url)
            raise

        text = format_feed(feed, options)
        self.logger.log_request_end(
            success=True, url=feed_url, items_count=len(feed.items)
        )
        return text
