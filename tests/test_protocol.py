import io
import json
import logging

import pytest
import semver

from inline_mathjax.exceptions import ProtocolError
from inline_mathjax.models import PreprocessorContext
from inline_mathjax.preprocessor import InlineMathjax
from inline_mathjax.protocol import (
    caret_upper_bound,
    check_version,
    handle_preprocessing,
    parse_input,
    version_matches,
    write_output
)


def test_parse_input(stdin_payload):
    ctx, book = parse_input(io.StringIO(stdin_payload))
    assert ctx.renderer == "html"
    assert [chapter.name for chapter in book.iter_chapters()] == ["Intro", "Prices", "Draft"]


CONTEXT = {"root": "/b", "config": {}, "renderer": "html", "mdbook_version": "0.4.40"}


def payload_with(context=None, chapter=None):
    chapter = chapter if chapter is not None else {"name": "a", "content": "$x$"}
    return json.dumps([context if context is not None else CONTEXT, {"sections": [{"Chapter": chapter}]}])


@pytest.mark.parametrize("payload", [
    "not json",
    "{}",
    "[1, 2, 3]",
    '[{"renderer": "html"}, {}]',
    payload_with(chapter={"name": "a", "content": 5}),
    payload_with(chapter={"name": "a", "content": None}),
    payload_with(chapter={"name": 3, "content": ""}),
    payload_with(chapter={"name": "a", "content": "", "sub_items": {}}),
    payload_with(chapter={"name": "a", "content": "", "parent_names": "Intro"}),
    payload_with(context=dict(CONTEXT, config=[])),
    payload_with(context=dict(CONTEXT, renderer=None)),
    payload_with(context=dict(CONTEXT, mdbook_version=440)),
])
def test_parse_input_rejects_malformed(payload):
    with pytest.raises(ProtocolError):
        parse_input(io.StringIO(payload))


def test_non_table_preprocessor_config_is_a_protocol_error():
    context = dict(CONTEXT, config={"preprocessor": {"inline-mathjax": "on"}})
    with pytest.raises(ProtocolError):
        handle_preprocessing(InlineMathjax(), io.StringIO(payload_with(context=context)), io.StringIO())


@pytest.mark.parametrize("version,upper", [
    ("1.2.3", "2.0.0"),
    ("0.4.40", "0.5.0"),
    ("0.0.3", "0.0.4"),
])
def test_caret_upper_bound(version, upper):
    assert caret_upper_bound(semver.Version.parse(version)) == semver.Version.parse(upper)


@pytest.mark.parametrize("version,expected", [
    ("0.4.40", True),
    ("0.4.52", True),
    ("0.4.39", False),
    ("0.5.0", False),
    ("1.0.0", False),
    ("0.5.0-alpha", False),
    ("0.4.41-beta", False),
    ("0.4.40-rc.1", False),
])
def test_version_matches(version, expected):
    assert version_matches(version, "0.4.40") is expected


def test_version_mismatch_only_warns(context_data, caplog):
    context_data["mdbook_version"] = "0.3.7"
    ctx = PreprocessorContext.from_dict(context_data)
    with caplog.at_level(logging.WARNING):
        assert check_version(ctx) is False
    assert "called from version 0.3.7" in caplog.text


def test_unparsable_version_is_an_error(context_data):
    context_data["mdbook_version"] = "latest"
    with pytest.raises(ProtocolError):
        check_version(PreprocessorContext.from_dict(context_data))


def test_write_output_keeps_unicode(book_data):
    from inline_mathjax.models import Book

    book_data["sections"][1]["Chapter"]["content"] = "角度"
    out = io.StringIO()
    write_output(Book.from_dict(book_data), out)
    assert "角度" in out.getvalue()
    assert json.loads(out.getvalue()) == book_data


def test_handle_preprocessing(stdin_payload):
    out = io.StringIO()
    handle_preprocessing(InlineMathjax(), io.StringIO(stdin_payload), out)
    result = json.loads(out.getvalue())
    intro = result["sections"][1]["Chapter"]
    assert intro["content"] == "# Intro\n\nLet \\( x \\) be real and $$x^2 \\ge 0$$.\n"
    assert intro["sub_items"][0]["Chapter"]["content"] == "It costs \\$5, or \\( p \\) in general."
    assert result["__non_exhaustive"] is None


def test_handle_preprocessing_continues_on_version_mismatch(context_data, book_data):
    context_data["mdbook_version"] = "0.5.1"
    out = io.StringIO()
    handle_preprocessing(InlineMathjax(), io.StringIO(json.dumps([context_data, book_data])), out)
    assert "\\( x \\)" in json.loads(out.getvalue())["sections"][1]["Chapter"]["content"]


def test_prerelease_matches_prerelease_requirement_on_same_release():
    assert version_matches("0.4.40-rc.2", "0.4.40-rc.1") is True
    assert version_matches("0.4.41-rc.1", "0.4.40-rc.1") is False
