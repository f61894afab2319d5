"""Property-based tests for the content formatter."""

from hypothesis import given
from hypothesis import strategies as st

from feed2text.formatter import format_feed, format_item
from feed2text.models import Feed, FormatOptions, Item

SEPARATOR = "\n=====\n"

keys = st.from_regex(r"[A-Za-z][A-Za-z0-9_]{0,10}", fullmatch=True)
values = st.text(alphabet="abcdefghijklmnopqrstuvwxyz0123456789", max_size=12)
items = st.builds(Item, st.dictionaries(keys, values, max_size=8))
feeds = st.builds(Feed, title=values, link=values, items=st.lists(items, max_size=8).map(tuple))


class TestFormatterProperties:
    """Property-based tests for format_feed."""

    @given(items)
    def test_field_lines_strictly_ascending(self, item):
        lines = format_item(1, item, FormatOptions()).splitlines()[1:]
        emitted = [line.split(": ", 1)[0] for line in lines]

        assert emitted == sorted(item.fields)
        assert all(a < b for a, b in zip(emitted, emitted[1:]))

    @given(st.lists(st.tuples(keys, values), min_size=1, max_size=10))
    def test_duplicate_keys_emit_one_line_with_last_value(self, pairs):
        item = Item()
        for key, value in pairs:
            item.set_field(key, value)

        lines = format_item(1, item, FormatOptions()).splitlines()[1:]

        expected = dict(pairs)
        assert len(lines) == len(expected)
        for key, value in expected.items():
            assert f"{key}: {value}" in lines

    @given(feeds, st.integers(min_value=1, max_value=12))
    def test_limit_caps_item_headers(self, feed, length):
        result = format_feed(feed, FormatOptions(separator=SEPARATOR, length=length))

        assert result.count("Channel Item ") == min(length, len(feed.items))

    @given(feeds, st.integers(min_value=0, max_value=12))
    def test_separator_count_between_items(self, feed, length):
        result = format_feed(feed, FormatOptions(separator=SEPARATOR, length=length))
        emitted = len(feed.items) if length == 0 else min(length, len(feed.items))

        # one separator after the header, the rest between items
        assert result.count(SEPARATOR) == 1 + max(0, emitted - 1)

    @given(feeds)
    def test_output_is_deterministic(self, feed):
        reordered = Feed(
            title=feed.title,
            link=feed.link,
            items=tuple(Item(dict(reversed(item.fields.items()))) for item in feed.items),
        )

        assert format_feed(feed) == format_feed(reordered)
