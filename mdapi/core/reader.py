# mdapi/core/reader.py

import logging
from pathlib import Path

from mdapi.core.catalog import MARKDOWN_SUFFIX
from mdapi.core.errors import (
    FileReadError,
    InvalidFileNameError,
    MarkdownFileNotFoundError,
)

logger = logging.getLogger(__name__)

_FORBIDDEN = ("/", "\\", "\x00")


def resolve_markdown_path(markdown_dir: Path, file_name: str) -> Path:
    """
    Map a logical name (no extension) to `<markdown_dir>/<name>.md`.

    Raises InvalidFileNameError for anything that is not a plain name or
    that would resolve outside `markdown_dir`.
    """
    if not file_name or file_name in (".", "..") or any(c in file_name for c in _FORBIDDEN):
        raise InvalidFileNameError()

    root = Path(markdown_dir).resolve()
    path = (root / f"{file_name}{MARKDOWN_SUFFIX}").resolve()
    if path.parent != root:
        raise InvalidFileNameError()
    return path


class ContentReader:
    """Returns the raw text of one markdown file."""

    def __init__(self, markdown_dir: Path):
        self.markdown_dir = Path(markdown_dir)

    def read(self, file_name: str) -> str:
        try:
            path = resolve_markdown_path(self.markdown_dir, file_name)
        except InvalidFileNameError:
            logger.warning("read rejected file name %r", file_name)
            raise

        # Single read attempt; the failure kind decides the error.
        try:
            return path.read_bytes().decode("utf-8")
        except FileNotFoundError as exc:
            logger.warning("read: markdown file %r not found", file_name)
            raise MarkdownFileNotFoundError() from exc
        except (OSError, UnicodeDecodeError) as exc:
            logger.exception("read failed for markdown file %r", file_name)
            raise FileReadError() from exc
