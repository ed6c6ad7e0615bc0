"""Tests for the front matter codec."""

import uuid
from pathlib import Path
from unittest.mock import patch

import pytest

from xcodesnippet.domain.entities import CodeSnippet, SourceLanguage
from xcodesnippet.domain.errors import (
    FileIsEmptyError,
    FrontMatterNotDetectedError,
    SnippetDecodeError,
)
from xcodesnippet.infrastructure.codecs.front_matter import (
    FrontMatterCodec,
    split_front_matter,
)


@pytest.fixture
def codec() -> FrontMatterCodec:
    """Create a FrontMatterCodec instance."""
    return FrontMatterCodec()


def _write(directory: Path, name: str, text: str) -> Path:
    path = directory / name
    path.write_text(text, encoding="utf-8")
    return path


def test_can_decode_source_files(codec: FrontMatterCodec) -> None:
    """Test that Swift and Objective-C sources are claimed."""
    assert codec.can_decode(Path("foo.swift"))
    assert codec.can_decode(Path("foo.m"))
    assert codec.can_decode(Path("foo.mm"))
    assert not codec.can_decode(Path("foo.codesnippet"))
    assert not codec.can_decode(Path("foo.py"))


def test_decode_end_to_end(codec: FrontMatterCodec, tmp_path: Path) -> None:
    """Test decoding a complete front matter Swift file."""
    path = _write(
        tmp_path,
        "foo.swift",
        '---\ntitle: Foo\ncompletion-scope: CodeBlock\n---\n\nprint("hi")\n',
    )

    snippet = codec.decode(path)

    assert snippet.completion_prefix == "foo"
    assert snippet.language == SourceLanguage.SWIFT.value
    assert snippet.title == "Foo"
    assert snippet.summary == ""
    assert snippet.completion_scopes == ("CodeBlock",)
    assert snippet.contents == 'print("hi")\n'
    assert snippet.is_user_snippet is True
    assert snippet.version == 0
    assert uuid.UUID(snippet.identifier)


def test_decode_mints_new_identifier_each_time(
    codec: FrontMatterCodec, tmp_path: Path
) -> None:
    """Test that every decode creates a new identity."""
    path = _write(tmp_path, "foo.m", "---\n---\n\nNSLog(@\"hi\");\n")

    assert codec.decode(path).identifier != codec.decode(path).identifier
    assert codec.decode(path).language == SourceLanguage.OBJECTIVE_C.value


def test_decode_invalid_single_scope_defaults_to_all(
    codec: FrontMatterCodec, tmp_path: Path
) -> None:
    """Test that an unknown completion-scope becomes All."""
    path = _write(tmp_path, "foo.swift", "---\ncompletion-scope: BogusScope\n---\nx\n")

    assert codec.decode(path).completion_scopes == ("All",)


def test_decode_scope_list_filters_invalid_entries(
    codec: FrontMatterCodec, tmp_path: Path
) -> None:
    """Test that unknown entries are dropped from completion-scopes."""
    path = _write(
        tmp_path,
        "foo.swift",
        "---\ncompletion-scopes: [All, BogusScope, CodeBlock]\n---\nx\n",
    )

    assert codec.decode(path).completion_scopes == ("All", "CodeBlock")


def test_decode_single_scope_takes_precedence(
    codec: FrontMatterCodec, tmp_path: Path
) -> None:
    """Test that completion-scope wins over completion-scopes."""
    path = _write(
        tmp_path,
        "foo.swift",
        "---\ncompletion-scope: TopLevel\ncompletion-scopes:\n  - CodeBlock\n---\nx\n",
    )

    assert codec.decode(path).completion_scopes == ("TopLevel",)


def test_decode_without_scopes_defaults_to_all(
    codec: FrontMatterCodec, tmp_path: Path
) -> None:
    """Test that a header without scopes yields All."""
    path = _write(tmp_path, "foo.swift", "---\ntitle: Foo\nauthor: me\n---\nx\n")

    snippet = codec.decode(path)

    assert snippet.completion_scopes == ("All",)
    assert snippet.title == "Foo"


def test_decode_missing_closing_delimiter(
    codec: FrontMatterCodec, tmp_path: Path
) -> None:
    """Test that a header without a closing line is rejected."""
    path = _write(tmp_path, "foo.swift", "---\ntitle: Foo\n\nprint(1)\n")

    with pytest.raises(FrontMatterNotDetectedError):
        codec.decode(path)


def test_decode_without_front_matter(codec: FrontMatterCodec, tmp_path: Path) -> None:
    """Test that a plain source file is rejected."""
    path = _write(tmp_path, "foo.swift", "print(1)\n---\n")

    with pytest.raises(FrontMatterNotDetectedError):
        codec.decode(path)


@pytest.mark.parametrize("name", ["foo.swift", "foo.m", "foo.mm"])
def test_decode_empty_file(codec: FrontMatterCodec, tmp_path: Path, name: str) -> None:
    """Test that zero byte files are reported as empty."""
    path = tmp_path / name
    path.write_bytes(b"")

    with pytest.raises(FileIsEmptyError):
        codec.decode(path)


def test_decode_non_utf8_file(codec: FrontMatterCodec, tmp_path: Path) -> None:
    """Test that undecodable bytes are reported as a decode error."""
    path = tmp_path / "foo.swift"
    path.write_bytes(b"---\n\xff\xfe\n---\n")

    with pytest.raises(SnippetDecodeError):
        codec.decode(path)


def test_decode_unreadable_file(codec: FrontMatterCodec, tmp_path: Path) -> None:
    """Test that a file that cannot be read is reported as empty."""
    path = _write(tmp_path, "locked.swift", "---\n---\nx\n")
    failure = PermissionError(13, "Permission denied", str(path))

    with (
        patch.object(Path, "read_bytes", side_effect=failure),
        pytest.raises(FileIsEmptyError) as exc_info,
    ):
        codec.decode(path)

    assert exc_info.value.__cause__ is failure


def test_decode_directory(codec: FrontMatterCodec, tmp_path: Path) -> None:
    """Test that a directory with a source extension is reported as empty."""
    path = tmp_path / "weird.swift"
    path.mkdir()

    with pytest.raises(FileIsEmptyError):
        codec.decode(path)


def test_decode_broken_header_degrades_to_no_metadata(
    codec: FrontMatterCodec, tmp_path: Path
) -> None:
    """Test that unreadable YAML does not fail the whole decode."""
    path = _write(tmp_path, "foo.swift", "---\ntitle: [unclosed\n---\n\nbody\n")

    snippet = codec.decode(path)

    assert snippet.title == ""
    assert snippet.completion_scopes == ("All",)
    assert snippet.contents == "body\n"


def test_decode_non_mapping_header(codec: FrontMatterCodec, tmp_path: Path) -> None:
    """Test that a header that is not a mapping is ignored."""
    path = _write(tmp_path, "foo.swift", "---\n- just\n- a list\n---\nbody\n")

    assert codec.decode(path).title == ""


def test_split_stops_at_first_closing_delimiter() -> None:
    """Test that a --- line inside the body stays in the body."""
    header, body = split_front_matter("---\ntitle: a\n---\n\nfirst\n---\nsecond\n")

    assert header == "title: a\n"
    assert body == "first\n---\nsecond\n"


def test_split_consumes_optional_blank_lines() -> None:
    """Test that one blank line after each delimiter is dropped."""
    header, body = split_front_matter("---\n\ntitle: a\n---\n\n\ncode")

    assert header == "title: a\n"
    assert body == "\ncode"


def test_render_omits_empty_fields(codec: FrontMatterCodec) -> None:
    """Test the document for a snippet without metadata."""
    snippet = CodeSnippet.create(
        contents="x\n", completion_prefix="foo", language=SourceLanguage.SWIFT
    )

    assert codec.render(snippet) == "---\n---\n\nx\n"


def test_render_single_scope(codec: FrontMatterCodec) -> None:
    """Test that one scope is written as completion-scope."""
    snippet = CodeSnippet.create(
        contents="x\n",
        completion_prefix="foo",
        language=SourceLanguage.SWIFT,
        title="Foo",
        summary="Does foo",
        completion_scopes=["CodeBlock"],
    )

    assert codec.render(snippet) == (
        "---\ntitle: Foo\nsummary: Does foo\ncompletion-scope: CodeBlock\n---\n\nx\n"
    )


def test_render_scope_list(codec: FrontMatterCodec) -> None:
    """Test that several scopes are written as a list."""
    snippet = CodeSnippet.create(
        contents="x",
        completion_prefix="foo",
        language=SourceLanguage.SWIFT,
        completion_scopes=["All", "TopLevel"],
    )

    assert codec.render(snippet) == (
        "---\ncompletion-scopes:\n  - All\n  - TopLevel\n---\n\nx"
    )


def test_render_quotes_values_yaml_would_misread(
    codec: FrontMatterCodec, tmp_path: Path
) -> None:
    """Test that titles with YAML syntax survive a round trip."""
    snippet = CodeSnippet.create(
        contents="x",
        completion_prefix="foo",
        language=SourceLanguage.SWIFT,
        title="Key: value # not a comment",
        summary="yes",
    )

    decoded = codec.decode(codec.encode(snippet, tmp_path))

    assert decoded.title == "Key: value # not a comment"
    assert decoded.summary == "yes"


def test_encode_then_decode_keeps_content_but_not_identity(
    codec: FrontMatterCodec, tmp_path: Path
) -> None:
    """Test the front matter round trip."""
    snippet = CodeSnippet(
        contents="@implementation Foo\n@end\n",
        completion_prefix="impl",
        language=SourceLanguage.OBJECTIVE_CPP.value,
        title="Implementation",
        summary="Class body",
        completion_scopes=("TopLevel", "ClassImplementation"),
        identifier="ABC",
        version=7,
    )

    path = codec.encode(snippet, tmp_path)
    decoded = codec.decode(path)

    assert path == tmp_path / "impl.mm"
    assert decoded.contents == snippet.contents
    assert decoded.title == snippet.title
    assert decoded.summary == snippet.summary
    assert decoded.completion_scopes == snippet.completion_scopes
    assert decoded.language == snippet.language
    assert decoded.completion_prefix == snippet.completion_prefix
    assert decoded.identifier != "ABC"
    assert decoded.version == 0


def test_encode_unknown_language_keeps_empty_extension(
    codec: FrontMatterCodec, tmp_path: Path
) -> None:
    """Test that an unknown language writes a file with an empty extension."""
    snippet = CodeSnippet.create(contents="x", completion_prefix="foo", language="")

    path = codec.encode(snippet, tmp_path)

    assert path.name == "foo."
    assert path.read_text(encoding="utf-8") == "---\n---\n\nx"
