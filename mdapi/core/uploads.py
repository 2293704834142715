# mdapi/core/uploads.py

import logging
from dataclasses import dataclass
from pathlib import Path

from mdapi.core.catalog import MARKDOWN_SUFFIX
from mdapi.core.errors import (
    FileWriteError,
    InvalidFileNameError,
    MarkdownFileExistsError,
)
from mdapi.core.reader import resolve_markdown_path

logger = logging.getLogger(__name__)

MARKDOWN_MIMETYPE = "text/markdown"
MARKDOWN_ENCODING = "utf-8"


@dataclass(frozen=True)
class StoredFile:
    filename: str
    mimetype: str
    encoding: str


def _stem_of(filename: str) -> str:
    # "notes" and "notes.md" both name notes.md; any other extension is refused
    if filename.endswith(MARKDOWN_SUFFIX):
        return filename[: -len(MARKDOWN_SUFFIX)]
    if Path(filename).suffix:
        raise InvalidFileNameError()
    return filename


class MarkdownUploader:
    """Writes new markdown files into the configured directory."""

    def __init__(self, markdown_dir: Path):
        self.markdown_dir = Path(markdown_dir)

    def upload(self, filename: str, content: str) -> StoredFile:
        """
        Store `content` verbatim as `<stem>.md`. Existing files are never
        overwritten.
        """
        try:
            path = resolve_markdown_path(self.markdown_dir, _stem_of(filename))
        except InvalidFileNameError:
            logger.warning("upload rejected file name %r", filename)
            raise

        try:
            f = open(path, "x", encoding=MARKDOWN_ENCODING, newline="")
        except FileExistsError as exc:
            logger.warning("upload: %s already exists", path.name)
            raise MarkdownFileExistsError() from exc
        except OSError as exc:
            logger.exception("upload failed for %r", filename)
            raise FileWriteError() from exc

        try:
            with f:
                f.write(content)
        except (OSError, UnicodeEncodeError) as exc:
            # drop the partial file so the name can be uploaded again
            path.unlink(missing_ok=True)
            logger.exception("upload failed writing %s", path.name)
            raise FileWriteError() from exc

        logger.info("Stored uploaded markdown file %s (%s chars)", path.name, len(content))
        return StoredFile(
            filename=path.name,
            mimetype=MARKDOWN_MIMETYPE,
            encoding=MARKDOWN_ENCODING,
        )
