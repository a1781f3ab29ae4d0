"""Tests for document loading, serialization and the filter driver."""

import io
import json
import sys

import pytest
from utils import make_document

from pandocwalk.ast.builder import Emph, Para, Space, Str
from pandocwalk.document import apply_action, dump_document, get_meta, load_document, to_json_filter
from pandocwalk.exceptions import ActionError, MalformedDocumentError


def shout(key, value, format, meta):
    if key == "Str":
        return value.upper()


def hello_doc_json() -> str:
    return json.dumps(make_document(Para([Str("hello")])))


@pytest.mark.unit
class TestLoadDocument:
    """Test parsing JSON documents from the supported sources."""

    def test_load_from_text(self) -> None:
        """Test loading JSON text."""
        doc = load_document('[{"unMeta":{}},{"t":"Para","c":[]}]')

        assert doc == [{"unMeta": {}}, {"t": "Para", "c": []}]

    def test_load_from_bytes_and_stream(self) -> None:
        """Test loading UTF-8 bytes and readable streams."""
        text = hello_doc_json()

        assert load_document(text.encode("utf-8")) == json.loads(text)
        assert load_document(io.StringIO(text)) == json.loads(text)
        assert load_document(io.BytesIO(text.encode("utf-8"))) == json.loads(text)

    def test_load_from_path(self, tmp_path) -> None:
        """Test loading a JSON file."""
        path = tmp_path / "doc.json"
        path.write_text(hello_doc_json(), encoding="utf-8")

        assert load_document(path) == json.loads(hello_doc_json())

    def test_missing_path(self, tmp_path) -> None:
        """Test that an unreadable file is reported as malformed input."""
        with pytest.raises(MalformedDocumentError) as exc_info:
            load_document(tmp_path / "missing.json")

        assert isinstance(exc_info.value.original_error, OSError)

    def test_invalid_json(self) -> None:
        """Test that invalid JSON fails before any filtering."""
        with pytest.raises(MalformedDocumentError) as exc_info:
            load_document("[{not json")

        assert isinstance(exc_info.value.original_error, json.JSONDecodeError)

    @pytest.mark.parametrize(
        "text",
        [
            "[]",
            '[{"t": "Para", "c": []}]',
            '{"blocks": []}',
            '"just a string"',
            "42",
        ],
    )
    def test_missing_metadata(self, text) -> None:
        """Test that valid JSON without document shape is rejected."""
        with pytest.raises(MalformedDocumentError):
            load_document(text)

    def test_invalid_utf8_bytes(self) -> None:
        """Test that undecodable bytes are reported as malformed input."""
        with pytest.raises(MalformedDocumentError) as exc_info:
            load_document(b'[{"unMeta":{}},{"t":"Str","c":"\xff"}]')

        assert isinstance(exc_info.value.original_error, UnicodeDecodeError)

    def test_invalid_utf8_file_and_stream(self, tmp_path) -> None:
        """Test undecodable files and text streams."""
        data = b'[{"unMeta":{}},{"t":"Str","c":"\xfe\xff"}]'
        path = tmp_path / "bad.json"
        path.write_bytes(data)

        with pytest.raises(MalformedDocumentError):
            load_document(path)
        with pytest.raises(MalformedDocumentError):
            load_document(io.TextIOWrapper(io.BytesIO(data), encoding="utf-8"))

    def test_stdin_read_as_utf8(self, monkeypatch) -> None:
        """Test that standard input is decoded as UTF-8 whatever its encoding setting."""
        data = json.dumps(make_document(Para([Str("café")])), ensure_ascii=False).encode("utf-8")
        monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(data), encoding="ascii"))

        assert load_document(sys.stdin) == make_document(Para([Str("café")]))

    def test_unsupported_source(self) -> None:
        """Test that non-document sources are a type error."""
        with pytest.raises(TypeError):
            load_document(42)


@pytest.mark.unit
class TestGetMeta:
    """Test metadata lookup for both document shapes."""

    def test_array_form(self) -> None:
        """Test metadata of the array form."""
        meta = {"title": {"t": "MetaString", "c": "T"}}

        assert get_meta(make_document(meta=meta)) is meta

    def test_object_form(self) -> None:
        """Test metadata of the object form."""
        doc = {"pandoc-api-version": [1, 22], "meta": {"k": 1}, "blocks": []}

        assert get_meta(doc) == {"k": 1}


@pytest.mark.unit
class TestApplyAction:
    """Test walking a whole document."""

    def test_meta_and_format_passed(self) -> None:
        """Test that the action receives the document metadata and format."""
        meta = {"lang": {"t": "MetaString", "c": "en"}}
        received = []

        def record(key, value, format, meta):
            received.append((key, format, meta))

        apply_action(make_document(Para([Str("a")]), meta=meta), record, "latex")

        assert ("Para", "latex", meta) in received
        assert ("Str", "latex", meta) in received

    def test_object_form_rewritten(self) -> None:
        """Test that the object form keeps its shape."""
        doc = {"pandoc-api-version": [1, 22], "meta": {}, "blocks": [Para([Str("a")])]}

        result = apply_action(doc, shout)

        assert result == {"pandoc-api-version": [1, 22], "meta": {}, "blocks": [Para([Str("A")])]}
        assert doc["blocks"] == [Para([Str("a")])]


@pytest.mark.unit
class TestDumpDocument:
    """Test compact HTML-safe serialization."""

    def test_compact(self) -> None:
        """Test that no whitespace separators are written."""
        assert dump_document([{"unMeta": {}}, {"t": "Space", "c": []}]) == '[{"unMeta":{}},{"t":"Space","c":[]}]'

    def test_html_sensitive_characters_escaped(self) -> None:
        """Test escaping of angle brackets and ampersands."""
        text = dump_document([Str("<b>&</b>")])

        assert "<" not in text and ">" not in text and "&" not in text
        assert text == '[{"t":"Str","c":"\\u003Cb\\u003E\\u0026\\u003C/b\\u003E"}]'
        assert json.loads(text) == [Str("<b>&</b>")]

    def test_unicode_and_slash_verbatim(self) -> None:
        """Test that non-ASCII text and slashes are not escaped."""
        text = dump_document([Str("café/naïve")])

        assert text == '[{"t":"Str","c":"café/naïve"}]'


@pytest.mark.unit
class TestToJsonFilter:
    """Test the complete filter driver."""

    def test_shout_filter(self) -> None:
        """Test the upper-case filter end to end."""
        output = io.StringIO()

        to_json_filter(shout, source=io.StringIO(hello_doc_json()), argv=["prog"], output=output)

        assert output.getvalue() == '[{"unMeta":{}},{"t":"Para","c":[{"t":"Str","c":"HELLO"}]}]\n'

    def test_format_from_argv(self) -> None:
        """Test that the first argument is the target format."""
        formats = []

        def record(key, value, format, meta):
            formats.append(format)

        to_json_filter(record, source=hello_doc_json(), argv=["prog", "html5"], output=io.StringIO())
        to_json_filter(record, source=hello_doc_json(), argv=["prog"], output=io.StringIO())

        assert formats == ["html5", "html5", "", ""]

    def test_defaults_to_standard_streams(self, monkeypatch, capsys) -> None:
        """Test reading stdin and writing stdout when no streams are given."""
        monkeypatch.setattr("sys.stdin", io.StringIO(hello_doc_json()))
        monkeypatch.setattr("sys.argv", ["prog", "latex"])

        to_json_filter(shout)

        out = capsys.readouterr().out
        assert json.loads(out) == make_document(Para([Str("HELLO")]))
        assert out.endswith("\n")

    def test_deletion_in_output(self) -> None:
        """Test a deleting filter through the driver."""

        def no_emph(key, value, format, meta):
            if key == "Emph":
                return []

        doc = json.dumps(make_document(Para([Str("a"), Space(), Emph([Str("b")])])))
        output = io.StringIO()

        to_json_filter(no_emph, source=doc, argv=["prog"], output=output)

        assert json.loads(output.getvalue()) == make_document(Para([Str("a"), Space()]))

    def test_malformed_input_writes_nothing(self) -> None:
        """Test that invalid input fails before any output."""
        output = io.StringIO()

        with pytest.raises(MalformedDocumentError):
            to_json_filter(shout, source="{broken", argv=["prog"], output=output)

        assert output.getvalue() == ""

    def test_action_failure_writes_nothing(self) -> None:
        """Test that a failing action aborts without partial output."""

        def fail(key, value, format, meta):
            raise ActionError("cannot handle", tag=key)

        output = io.StringIO()

        with pytest.raises(ActionError):
            to_json_filter(fail, source=hello_doc_json(), argv=["prog"], output=output)

        assert output.getvalue() == ""
