"""Query-string parsing for the HTTP endpoints."""

import re
from collections.abc import Mapping
from urllib.parse import urlparse

from .errors import ValidationError
from .models import DEFAULT_SELECTOR, DEFAULT_SEPARATOR, FormatOptions, HtmlOptions

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_url(args: Mapping[str, str], label: str) -> str:
    """Return the ``url`` parameter if it is an absolute http(s) URL.

    Raises:
        ValidationError: If the parameter is missing or not a usable URL
    """
    url = args.get("url", "")
    if not url:
        raise ValidationError(f"Missing {label} URL parameter")

    try:
        parsed = urlparse(url)
    except ValueError as e:
        raise ValidationError(f"Invalid {label} URL") from e

    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValidationError(f"Invalid {label} URL")

    return parsed.geturl()


def parse_separator(args: Mapping[str, str]) -> str:
    r"""Separator with literal ``\n`` sequences turned into newlines."""
    separator = args.get("separator", "") or DEFAULT_SEPARATOR
    return separator.replace("\\n", "\n")


def parse_flag(args: Mapping[str, str], name: str) -> bool:
    """Flags are on unless given as the literal ``false``."""
    return args.get(name, "") != "false"


def parse_length(args: Mapping[str, str]) -> int:
    """Item-count limit, 0 meaning unlimited.

    Raises:
        ValidationError: If the value is not a plain ASCII decimal integer
    """
    length = args.get("length", "") or "0"
    if not INTEGER_PATTERN.fullmatch(length):
        raise ValidationError("Invalid length parameter")
    return int(length)


def parse_rss_params(args: Mapping[str, str]) -> tuple[str, FormatOptions]:
    """Feed URL and formatting options for ``/process-rss``."""
    url = parse_url(args, "RSS")
    options = FormatOptions(
        separator=parse_separator(args),
        strip_html=parse_flag(args, "stripHTML"),
        remove_space=parse_flag(args, "removeSpace"),
        length=parse_length(args),
    )
    return url, options


def parse_html_params(args: Mapping[str, str]) -> tuple[str, HtmlOptions]:
    """Page URL and extraction options for ``/process-html``."""
    url = parse_url(args, "HTML")
    options = HtmlOptions(
        selector=args.get("selector", "") or DEFAULT_SELECTOR,
        separator=parse_separator(args),
        strip_html=parse_flag(args, "stripHTML"),
        remove_space=parse_flag(args, "removeSpace"),
    )
    return url, options
