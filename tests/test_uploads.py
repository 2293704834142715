# tests/test_uploads.py

import pytest

from mdapi.core import (
    CatalogBuilder,
    ContentReader,
    FileWriteError,
    InvalidFileNameError,
    MarkdownFileExistsError,
    MarkdownUploader,
)


def test_upload_stores_file_and_returns_metadata(markdown_dir):
    stored = MarkdownUploader(markdown_dir).upload("notes.md", "# Notes\r\nbody")

    assert stored.filename == "notes.md"
    assert stored.mimetype == "text/markdown"
    assert stored.encoding == "utf-8"
    assert (markdown_dir / "notes.md").read_bytes() == b"# Notes\r\nbody"


def test_upload_adds_extension(markdown_dir):
    stored = MarkdownUploader(markdown_dir).upload("draft", "# Draft")

    assert stored.filename == "draft.md"
    assert ContentReader(markdown_dir).read("draft") == "# Draft"
    assert [d.title for d in CatalogBuilder(markdown_dir).list_documents()] == ["Draft"]


def test_upload_never_overwrites(markdown_dir, write_md):
    write_md("notes.md", "original")

    with pytest.raises(MarkdownFileExistsError):
        MarkdownUploader(markdown_dir).upload("notes", "replacement")

    assert (markdown_dir / "notes.md").read_text() == "original"


@pytest.mark.parametrize("name", ["notes.txt", ".md", "../evil.md", "sub/evil", ""])
def test_upload_rejects_bad_names(markdown_dir, name):
    with pytest.raises(InvalidFileNameError):
        MarkdownUploader(markdown_dir).upload(name, "x")

    assert not (markdown_dir.parent / "evil.md").exists()


def test_upload_into_missing_directory(tmp_path):
    with pytest.raises(FileWriteError) as exc_info:
        MarkdownUploader(tmp_path / "nope").upload("notes", "x")

    assert exc_info.value.message == "Error writing file"


def test_failed_write_leaves_no_partial_file(markdown_dir):
    uploader = MarkdownUploader(markdown_dir)

    with pytest.raises(FileWriteError):
        uploader.upload("notes", "# Notes\n\ud800 not encodable")

    assert not (markdown_dir / "notes.md").exists()
    assert uploader.upload("notes", "# Notes").filename == "notes.md"
