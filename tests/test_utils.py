"""Tests for utility modules."""

from contributor_welcome.utils.pagination import (
    get_next_page_url,
    parse_link_header,
    with_query,
)


class TestParseLinkHeader:
    """Tests for Link header parsing."""

    def test_parse_single_link(self):
        """Test parsing a single link."""
        header = '<https://api.github.com/repos/o/r/commits?page=2>; rel="next"'
        links = parse_link_header(header)

        assert links["next"] == "https://api.github.com/repos/o/r/commits?page=2"

    def test_parse_multiple_links(self):
        """Test parsing multiple links."""
        header = (
            '<https://api.github.com/repos/o/r/commits?page=2>; rel="next", '
            '<https://api.github.com/repos/o/r/commits?page=5>; rel="last", '
            '<https://api.github.com/repos/o/r/commits?page=1>; rel="first"'
        )
        links = parse_link_header(header)

        assert links["next"].endswith("page=2")
        assert links["last"].endswith("page=5")
        assert links["first"].endswith("page=1")

    def test_parse_empty_header(self):
        """Test parsing empty header."""
        assert parse_link_header(None) == {}
        assert parse_link_header("") == {}

    def test_get_next_page_url_missing(self):
        """Test when no next page exists."""
        header = '<https://api.github.com/repos/o/r/commits?page=1>; rel="first"'
        assert get_next_page_url(header) is None


class TestWithQuery:
    """Tests for query string building."""

    def test_plain_endpoint(self):
        assert with_query("/repos/o/r/commits", {"author": "alice"}) == (
            "/repos/o/r/commits?author=alice"
        )

    def test_existing_query(self):
        url = with_query("/repos/o/r/commits?author=alice", {"per_page": 2, "page": 1})
        assert url == "/repos/o/r/commits?author=alice&per_page=2&page=1"

    def test_none_values_skipped(self):
        assert with_query("/x", {"since": None}) == "/x"

    def test_values_are_encoded(self):
        assert with_query("/x", {"author": "a b"}) == "/x?author=a+b"
