"""Shared fixtures for feed2text tests."""

from unittest.mock import Mock

import pytest

from feed2text.app import create_app


def make_response(body: bytes | str, status_code: int = 200) -> Mock:
    """Build a stand-in for ``requests.Response``."""
    content = body.encode("utf-8") if isinstance(body, str) else body
    response = Mock()
    response.status_code = status_code
    response.content = content
    response.text = content.decode("utf-8")
    return response


SAMPLE_RSS = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0"
     xmlns:atom="http://www.w3.org/2005/Atom"
     xmlns:dc="http://purl.org/dc/elements/1.1/">
  <channel>
    <title>Example News</title>
    <link>https://example.com/</link>
    <atom:link href="https://example.com/feed.xml" rel="self" type="application/rss+xml"/>
    <image>
      <title>Example Logo</title>
      <link>https://example.com/logo-page</link>
    </image>
    <item>
      <title>First &amp; foremost</title>
      <link>https://example.com/1</link>
      <description><![CDATA[<p>Hello   <b>world</b></p>]]></description>
      <dc:creator>Ann</dc:creator>
      <category>tech</category>
      <category>science</category>
    </item>
    <item>
      <title>Second</title>
      <x-custom>kept</x-custom>
    </item>
  </channel>
</rss>
"""


@pytest.fixture
def app():
    app = create_app({"TESTING": True, "FETCH_TIMEOUT": 10})
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def upstream(app):
    """The shared HTTP session with ``get`` replaced by a mock."""
    session = app.extensions["feed2text_session"]
    session.get = Mock()
    return session.get


@pytest.fixture
def response_factory():
    return make_response


@pytest.fixture
def sample_rss() -> bytes:
    return SAMPLE_RSS
