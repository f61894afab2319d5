"""HTML page extraction for the feed2text service."""

import requests
from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from soupsieve import SelectorSyntaxError

from .errors import EmptyContentError, ParseError, ValidationError
from .fetch import DEFAULT_TIMEOUT, create_session, fetch_url
from .logging_config import create_request_logger
from .models import HtmlOptions
from .text import normalize_value


def parse_document(markup: str | bytes) -> BeautifulSoup:
    """Parse an HTML document."""
    try:
        return BeautifulSoup(markup, "html.parser")
    except ParserRejectedMarkup as e:
        raise ParseError(f"failed to parse HTML: {e}") from e


def _select(doc: BeautifulSoup, selector: str) -> list:
    try:
        return doc.select(selector)
    except SelectorSyntaxError as e:
        raise ValidationError(f"Invalid selector parameter: {e}") from e


def select_text(doc: BeautifulSoup, selector: str) -> str:
    """Combined text of every node matching the CSS selector."""
    return "".join(node.get_text() for node in _select(doc, selector))


def select_markup(doc: BeautifulSoup, selector: str) -> str:
    """Inner markup of the first node matching the CSS selector."""
    nodes = _select(doc, selector)
    if not nodes:
        return ""
    return "".join(str(child) for child in nodes[0].contents)


def page_title(doc: BeautifulSoup) -> str:
    """Text of the document's ``<title>`` elements."""
    return "".join(node.get_text() for node in doc.find_all("title"))


class HtmlExtractor:
    """Fetches a page and extracts selected text or markup."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        request_id: str | None = None,
        session: requests.Session | None = None,
    ):
        self.timeout = timeout
        self.logger = create_request_logger("html_extractor", request_id)
        self.session = session if session is not None else create_session()

    def fetch(self, url: str) -> bytes:
        """Download a page and return its raw bytes.

        Decoding is left to BeautifulSoup, which honours a ``<meta charset>``
        when the response headers carry no charset.
        """
        response = fetch_url(self.session, url, self.timeout, self.logger)
        return response.content

    def extract(self, url: str, options: HtmlOptions) -> str:
        """Fetch a page and return its title line plus the selected content.

        The title line ``website title: <title><separator>`` is included only
        when the page has a non-empty title. Selected text (or markup when
        ``strip_html`` is off) is normalized with the request's flags.

        Raises:
            UpstreamFetchError: If the page cannot be fetched
            ParseError: If the page cannot be parsed
            EmptyContentError: If nothing remains after processing
        """
        self.logger.log_request_start(url=url, selector=options.selector)
        try:
            content = self._extract(url, options)
        except Exception:
            self.logger.log_request_end(success=False, url=url)
            raise

        self.logger.log_request_end(
            success=True, url=url, content_length=len(content)
        )
        return content

    def _extract(self, url: str, options: HtmlOptions) -> str:
        doc = parse_document(self.fetch(url))

        content = ""
        title = page_title(doc)
        if title.strip():
            content = f"website title: {title}{options.separator}"

        if options.strip_html:
            extracted = select_text(doc, options.selector)
        else:
            extracted = select_markup(doc, options.selector)

        extracted = normalize_value(
            extracted,
            strip_html=options.strip_html,
            remove_space=options.remove_space,
        )
        if not extracted:
            self.logger.warning(
                "Selector matched no content", url=url, selector=options.selector
            )

        content += extracted
        if not content:
            raise EmptyContentError("empty HTML content")

        return content
