"""Unit tests for mark parsing and internal link redaction."""

from extractors.marks import (
    INTERNAL_LINK_PREFIX,
    is_internal_link,
    parse_marks,
    sanitize_marks,
)
from models import Mark, RawString, to_raw_value


def link(href: object) -> Mark:
    return Mark(type="link", attrs={"href": to_raw_value(href)})


class TestSanitizeMarks:
    """Tests for sanitize_marks."""

    def test_redacts_internal_link(self) -> None:
        marks = [link("statamic://entry::42")]
        sanitize_marks(marks)
        assert marks[0].attrs["href"] is None

    def test_keeps_external_link(self) -> None:
        marks = [link("https://example.com")]
        sanitize_marks(marks)
        assert marks[0].attrs["href"] == RawString("https://example.com")

    def test_only_link_marks_are_touched(self) -> None:
        """A non-link mark with an internal-looking href is left alone."""
        mark = Mark(type="bold", attrs={"href": RawString("statamic://asset::main::a.jpg")})
        sanitize_marks([mark])
        assert mark.attrs["href"] == RawString("statamic://asset::main::a.jpg")

    def test_non_string_href_untouched(self) -> None:
        mark = Mark(type="link", attrs={"href": None})
        sanitize_marks([mark])
        assert mark.attrs == {"href": None}

    def test_other_attrs_preserved(self) -> None:
        mark = Mark(type="link", attrs={
            "href": RawString("statamic://entry::1"),
            "target": RawString("_blank"),
        })
        sanitize_marks([mark])
        assert mark.attrs == {"href": None, "target": RawString("_blank")}

    def test_mixed_marks(self) -> None:
        marks = [link("statamic://entry::1"), Mark(type="italic"), link("/about")]
        sanitize_marks(marks)
        assert [m.attrs.get("href") for m in marks] == [None, None, RawString("/about")]

    def test_returns_same_list(self) -> None:
        marks = [link("statamic://entry::1")]
        assert sanitize_marks(marks) is marks

    def test_empty(self) -> None:
        assert sanitize_marks([]) == []

    def test_prefix_must_be_at_start(self) -> None:
        assert not is_internal_link(link(f"https://example.com/?u={INTERNAL_LINK_PREFIX}x"))


class TestParseMarks:
    """Tests for building Mark objects from raw values."""

    def test_parses_link(self) -> None:
        raw = to_raw_value([{"type": "link", "attrs": {"href": "https://example.com"}}])
        assert parse_marks(raw) == [Mark(type="link", attrs={"href": RawString("https://example.com")})]

    def test_mark_without_attrs(self) -> None:
        assert parse_marks(to_raw_value([{"type": "bold"}])) == [Mark(type="bold", attrs={})]

    def test_skips_non_mappings(self) -> None:
        raw = to_raw_value(["bold", None, {"type": "italic"}])
        assert parse_marks(raw) == [Mark(type="italic", attrs={})]

    def test_non_list_gives_no_marks(self) -> None:
        assert parse_marks(None) == []
        assert parse_marks(RawString("link")) == []
