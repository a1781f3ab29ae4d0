"""Tests for the recursive walk engine."""

import pytest
from utils import collect_tags, count_tags, make_document

from pandocwalk.ast.builder import Div, Emph, Image, Para, Plain, Space, Str
from pandocwalk.ast.walk import walk
from pandocwalk.exceptions import ActionError


def keep_all(key, value, format, meta):
    return None


@pytest.mark.unit
class TestWalkIdentity:
    """Test walking with an action that never replaces anything."""

    def test_identity_on_document(self, sample_document, frozen_sample) -> None:
        """Test that a no-op action reproduces the document exactly."""
        result = walk(sample_document, keep_all, "html", {})

        assert result == frozen_sample

    def test_result_is_a_new_tree(self, sample_document) -> None:
        """Test that containers are rebuilt rather than shared."""
        result = walk(sample_document, keep_all, "", {})

        assert result is not sample_document
        assert result[1] is not sample_document[1]
        assert result[2]["c"] is not sample_document[2]["c"]

    def test_primitives_returned_unchanged(self) -> None:
        """Test the base case of the recursion."""
        for value in ("text", 3, 2.5, True, None):
            assert walk(value, keep_all, "", {}) == value

    def test_plain_dict_walked_by_key(self) -> None:
        """Test that untagged objects keep their keys and order."""
        obj = {"b": [Str("x")], "a": {"nested": 1}}
        result = walk(obj, keep_all, "", {})

        assert result == obj
        assert list(result.keys()) == ["b", "a"]

    def test_tuple_becomes_list(self) -> None:
        """Test that tuples are walked as sequences."""
        result = walk((Str("a"), Space()), keep_all, "", {})

        assert result == [Str("a"), Space()]


@pytest.mark.unit
class TestWalkActionCalls:
    """Test how and when the action is invoked."""

    def test_action_receives_tag_content_format_and_meta(self) -> None:
        """Test the arguments passed to the action."""
        calls = []
        meta = {"author": "me"}

        def record(key, value, format, meta):
            calls.append((key, value, format, meta))

        walk([Str("hello")], record, "latex", meta)

        assert calls == [("Str", "hello", "latex", meta)]

    def test_visits_in_document_order(self, sample_document) -> None:
        """Test that every tagged node is offered once, left to right, parents first."""
        seen = []

        def record(key, value, format, meta):
            seen.append(key)

        walk(sample_document, record, "", {})

        # MetaInlines is a mapping value, not a list element, so only its Str is offered
        expected = [tag for tag in collect_tags(sample_document) if tag != "MetaInlines"]
        assert seen == expected
        assert seen[0] == "Str"
        assert seen.count("Image") == 2

    def test_root_node_not_offered(self) -> None:
        """Test that a bare root node is descended into, not offered to the action."""
        seen = []

        def record(key, value, format, meta):
            seen.append(key)

        walk(Para([Str("a")]), record, "", {})

        assert seen == ["Str"]

    def test_node_without_content(self) -> None:
        """Test that nodes serialized without 'c' pass None as content."""
        seen = []

        def record(key, value, format, meta):
            seen.append((key, value))

        walk([{"t": "Space"}], record, "", {})

        assert seen == [("Space", None)]


@pytest.mark.unit
class TestWalkReplacement:
    """Test the four kinds of action results."""

    def test_title_case_str_keeps_string_content(self) -> None:
        """Test that a primitive result replaces content without re-wrapping."""

        def title(key, value, format, meta):
            if key == "Str":
                return value.title()

        result = walk([Str("hello")], title, "", {})

        assert result == [{"t": "Str", "c": "Hello"}]
        assert isinstance(result[0]["c"], str)

    def test_primitive_result_is_stringified(self) -> None:
        """Test that non-string primitives become their string form."""

        def number(key, value, format, meta):
            if key == "Str":
                return 42

        assert walk([Str("x")], number, "", {}) == [{"t": "Str", "c": "42"}]

    def test_boolean_result_uses_python_str(self) -> None:
        """Test that booleans become 'True' and 'False'."""

        def flag(key, value, format, meta):
            if key == "Str":
                return value == "yes"

        result = walk([Str("yes"), Str("no")], flag, "", {})

        assert result == [{"t": "Str", "c": "True"}, {"t": "Str", "c": "False"}]

    def test_primitive_result_copies_other_keys(self) -> None:
        """Test that the shallow copy keeps keys besides 't' and 'c'."""
        node = {"t": "Str", "c": "x", "extra": [1]}

        def replace(key, value, format, meta):
            return "y"

        result = walk([node], replace, "", {})

        assert result == [{"t": "Str", "c": "y", "extra": [1]}]
        assert node["c"] == "x"

    def test_primitive_result_is_not_walked(self) -> None:
        """Test that a primitive replacement is final."""
        calls = []

        def replace_para(key, value, format, meta):
            calls.append(key)
            if key == "Para":
                return "flattened"

        result = walk([Para([Str("inner")])], replace_para, "", {})

        assert result == [{"t": "Para", "c": "flattened"}]
        assert calls == ["Para"]

    def test_node_result_replaces_and_is_walked(self) -> None:
        """Test that the content of a replacement node is rewritten as well."""

        # The replacement holds a Plain, so its own walk does not match Para again
        def rewrite(key, value, format, meta):
            if key == "Para":
                return Div(["", [], []], [Plain(value)])
            if key == "Str":
                return value.upper()

        result = walk([Para([Str("a")])], rewrite, "", {})

        assert result == [Div(["", [], []], [Plain([Str("A")])])]

    def test_replacement_matching_again_is_offered_again(self) -> None:
        """Test that nodes nested in a replacement are offered like any others."""
        calls = []

        def wrap_once(key, value, format, meta):
            calls.append(key)
            if key == "Para" and value and value[0]["t"] == "Str":
                return Div(["", [], []], [Para([Emph(value)])])

        result = walk([Para([Str("a")])], wrap_once, "", {})

        assert result == [Div(["", [], []], [Para([Emph([Str("a")])])])]
        assert calls == ["Para", "Para", "Emph", "Str"]

    def test_replacement_node_itself_not_offered_again(self) -> None:
        """Test that a returned node is descended into but not re-offered."""
        calls = []

        def rewrite(key, value, format, meta):
            calls.append(key)
            if key == "Emph":
                return Emph(value)

        walk([Emph([Str("a")])], rewrite, "", {})

        assert calls == ["Emph", "Str"]

    def test_image_becomes_empty_str_everywhere(self, sample_document) -> None:
        """Test replacing every Image, including ones nested in Para and Div."""

        def strip_images(key, value, format, meta):
            if key == "Image":
                return Str("")

        result = walk(sample_document, strip_images, "", {})

        assert count_tags(result, "Image") == 0
        assert count_tags(result, "Str") == count_tags(sample_document, "Str") + 2 - 1
        # The Div keeps its attributes and its paragraph
        div = result[3]
        assert div["t"] == "Div"
        assert div["c"][0] == ["box", ["note"], []]
        assert div["c"][1][0]["c"][1] == Str("")


@pytest.mark.unit
class TestWalkSplice:
    """Test list results: deletion and expansion."""

    def test_empty_list_deletes(self) -> None:
        """Test that every Space disappears and sibling order holds."""

        def drop_spaces(key, value, format, meta):
            if key == "Space":
                return []

        para = Para([Str("a"), Space(), Str("b"), Space(), Str("c")])
        result = walk([para], drop_spaces, "", {})

        assert result == [Para([Str("a"), Str("b"), Str("c")])]

    def test_deletion_reduces_node_count(self, sample_document) -> None:
        """Test that deletion removes exactly the matching nodes."""

        def drop_spaces(key, value, format, meta):
            if key == "Space":
                return []

        result = walk(sample_document, drop_spaces, "", {})

        removed = count_tags(sample_document, "Space")
        assert removed > 0
        assert count_tags(result) == count_tags(sample_document) - removed

    def test_expansion_to_three_siblings(self) -> None:
        """Test that a three item result yields three siblings in place."""

        def triple(key, value, format, meta):
            if key == "Str" and value == "x":
                return [Str("1"), Str("2"), Str("3")]

        result = walk([Para([Str("a"), Str("x"), Str("b")])], triple, "", {})

        assert result == [Para([Str("a"), Str("1"), Str("2"), Str("3"), Str("b")])]

    def test_spliced_items_are_walked(self) -> None:
        """Test that each spliced item has its content rewritten."""

        def expand(key, value, format, meta):
            if key == "Image":
                return [Emph([Str("alt")]), Space()]
            if key == "Str":
                return value.upper()

        result = walk([Para([Image([], ["a.png", ""])])], expand, "", {})

        assert result == [Para([Emph([Str("ALT")]), Space()])]

    def test_tuple_result_spliced(self) -> None:
        """Test that a tuple result is treated like a list."""

        def split(key, value, format, meta):
            if key == "Str":
                return (Str(value[0]), Str(value[1:]))

        assert walk([Str("ab")], split, "", {}) == [Str("a"), Str("b")]

    def test_spliced_primitives_kept(self) -> None:
        """Test that untagged items in a list result pass through."""

        def expand(key, value, format, meta):
            if key == "Str":
                return ["raw", 1]

        assert walk([Str("x")], expand, "", {}) == ["raw", 1]


@pytest.mark.unit
class TestWalkPurity:
    """Test that walking never mutates its input."""

    def test_input_unchanged_after_rewrite(self, sample_document, frozen_sample) -> None:
        """Test that a rewriting walk leaves its input intact."""

        def rewrite(key, value, format, meta):
            if key == "Str":
                return value.upper()
            if key == "Space":
                return []
            if key == "Image":
                return Str("")

        walk(sample_document, rewrite, "", {})

        assert sample_document == frozen_sample

    def test_meta_passed_through(self) -> None:
        """Test that meta is handed over as the same object."""
        meta = {"k": "v"}
        received = []

        def record(key, value, format, meta):
            received.append(meta)

        walk(make_document(Para([Str("a")])), record, "", meta)

        assert all(m is meta for m in received)


@pytest.mark.unit
class TestWalkErrors:
    """Test failure propagation."""

    def test_action_error_propagates_unchanged(self) -> None:
        """Test that the exact exception raised by the action reaches the caller."""
        error = ActionError("boom", tag="Str")

        def fail(key, value, format, meta):
            if key == "Str":
                raise error

        with pytest.raises(ActionError) as exc_info:
            walk([Para([Emph([Str("deep")])])], fail, "", {})

        assert exc_info.value is error

    def test_foreign_exception_not_wrapped(self) -> None:
        """Test that arbitrary exceptions are not converted."""

        def fail(key, value, format, meta):
            raise KeyError("missing")

        with pytest.raises(KeyError):
            walk([Str("a")], fail, "", {})
