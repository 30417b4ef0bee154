"""Tests for the shared types: RawValue normalization, options, errors."""

from collections import deque

import pytest

from models import (
    BardError,
    Blueprint,
    ErrorKind,
    ExtractionOptions,
    LazyText,
    RawList,
    RawMapping,
    RawScalar,
    RawString,
    is_empty,
    node_type,
    to_raw_value,
)
from tests.helpers import DictConvertible, RawHolder, Stringable


class ArrayConvertible:
    def toArray(self):
        return ["from", "array"]


class TestToRawValue:
    """Shape probing at the boundary."""

    def test_string(self):
        assert to_raw_value("hi") == RawString("hi")

    @pytest.mark.parametrize("value", [None, True, 0, 12, 1.5])
    def test_non_text_scalars(self, value):
        assert to_raw_value(value) is None

    def test_list_and_tuple(self):
        expected = RawList((RawString("a"), None))
        assert to_raw_value(["a", 1]) == expected
        assert to_raw_value(("a", 1)) == expected

    def test_mapping_keys_stringified_in_order(self):
        raw = to_raw_value({"b": "x", 1: "y"})

        assert raw == RawMapping({"b": RawString("x"), "1": RawString("y")})
        assert list(raw.entries) == ["b", "1"]

    def test_nested(self):
        raw = to_raw_value([{"type": "text", "marks": [{"type": "bold"}]}])

        assert raw == RawList((
            RawMapping({
                "type": RawString("text"),
                "marks": RawList((RawMapping({"type": RawString("bold")}),)),
            }),
        ))

    def test_raw_holder_is_lazy(self):
        holder = RawHolder("later")
        raw = to_raw_value(holder)

        assert isinstance(raw, LazyText)
        assert holder.calls == 0
        assert raw.resolve() == RawString("later")
        assert holder.calls == 1

    def test_to_dict(self):
        assert to_raw_value(DictConvertible({"k": "v"})) == RawMapping({"k": RawString("v")})

    def test_to_array(self):
        assert to_raw_value(ArrayConvertible()) == RawList((RawString("from"), RawString("array")))

    def test_stringified(self):
        assert to_raw_value(Stringable("obj")) == RawScalar("obj")

    def test_generator_walked(self):
        assert to_raw_value(item for item in ["a", "b"]) == RawList((RawString("a"), RawString("b")))

    def test_deque_walked(self):
        assert to_raw_value(deque(["x"])) == RawList((RawString("x"),))

    def test_set_walked(self):
        assert to_raw_value({"only"}) == RawList((RawString("only"),))

    def test_bytes_decoded(self):
        assert to_raw_value(b"caf\xc3\xa9") == RawString("caf\u00e9")

    def test_converter_wins_over_iteration(self):
        """A collection object exposing toArray() is converted, not iterated."""

        class Collection(ArrayConvertible):
            def __iter__(self):
                return iter(["wrong"])

        assert to_raw_value(Collection()) == RawList((RawString("from"), RawString("array")))

    def test_already_normalized(self):
        value = RawString("same")
        assert to_raw_value(value) is value


class TestIsEmpty:

    @pytest.mark.parametrize("value", [
        None,
        RawString(""),
        RawList(()),
        RawMapping({}),
        RawScalar(""),
    ])
    def test_empty(self, value):
        assert is_empty(value)

    @pytest.mark.parametrize("value", [
        RawString(" "),
        RawList((None,)),
        RawMapping({"a": None}),
        RawScalar("x"),
        LazyText(RawHolder("")),
    ])
    def test_not_empty(self, value):
        """LazyText is never empty until resolved."""
        assert not is_empty(value)


class TestNodeType:

    def test_string_type(self):
        assert node_type({"type": RawString("quote")}) == "quote"

    def test_missing_or_non_string(self):
        assert node_type({}) is None
        assert node_type({"type": RawList(())}) is None


class TestExtractionOptions:

    def test_descend_returns_copy(self):
        options = ExtractionOptions(max_depth=2)
        child = options.descend()

        assert child.current_depth == 1
        assert options.current_depth == 0
        assert child.max_depth == 2

    def test_depth_exhausted(self):
        options = ExtractionOptions(max_depth=1)

        assert not options.depth_exhausted
        assert options.descend().depth_exhausted

    def test_frozen(self):
        with pytest.raises(AttributeError):
            ExtractionOptions().current_depth = 5


class TestBardError:

    def test_to_dict_merges_details(self):
        error = BardError(ErrorKind.INVALID_INPUT, "Bad input", details={"source": "x.json"})

        assert str(error) == "Bad input"
        assert error.to_dict() == {
            "error": True,
            "kind": "invalid_input",
            "message": "Bad input",
            "source": "x.json",
        }

    def test_no_details(self):
        assert BardError(ErrorKind.UNKNOWN, "?").details == {}


def test_blueprint_field_lookup():
    blueprint = Blueprint(handle="page", fields={"content": {"type": "bard"}})

    assert blueprint.field("content") == {"type": "bard"}
    assert blueprint.field("title") is None
