"""Outbound HTTP fetching shared by the RSS and HTML paths."""

import requests

from .errors import UpstreamFetchError
from .logging_config import ExecutionLogger

DEFAULT_TIMEOUT = 10
DEFAULT_USER_AGENT = "feed2text/1.0 (RSS and HTML to plain text)"


def create_session(user_agent: str = DEFAULT_USER_AGENT) -> requests.Session:
    """Create the HTTP session reused across requests."""
    session = requests.Session()
    session.headers.update({"User-Agent": user_agent})
    return session


def fetch_url(
    session: requests.Session,
    url: str,
    timeout: float,
    logger: ExecutionLogger,
) -> requests.Response:
    """Download a URL and require a 200 answer.

    Args:
        session: HTTP session to issue the request with
        url: Absolute http(s) URL
        timeout: Request timeout in seconds
        logger: Request-scoped logger

    Returns:
        The upstream response

    Raises:
        UpstreamFetchError: On network failure, timeout or a non-200 status
    """
    logger.info("Downloading content", url=url)
    try:
        response = session.get(url, timeout=timeout)
    except requests.Timeout as e:
        logger.error(f"Timed out fetching {url}: {e}", url=url, error=str(e))
        raise UpstreamFetchError(f"request timed out after {timeout}s: {e}") from e
    except requests.RequestException as e:
        logger.error(f"Failed to download {url}: {e}", url=url, error=str(e))
        raise UpstreamFetchError(f"failed to fetch {url}: {e}") from e

    if response.status_code != 200:
        logger.error(
            f"Unexpected status code fetching {url}",
            url=url,
            status_code=response.status_code,
        )
        raise UpstreamFetchError(f"unexpected status code: {response.status_code}")

    logger.info(
        "Content downloaded successfully",
        url=url,
        status_code=response.status_code,
        content_length=len(response.content),
    )
    return response
