# mdapi/core/catalog.py

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List

from mdapi.core.errors import DirectoryAccessError

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"
UNTITLED = "Untitled"

_HEADING_MARKER = re.compile(r"^#\s")


@dataclass(frozen=True)
class MarkdownDocument:
    id: int
    title: str
    file_name: str


def extract_title(content: str) -> str:
    """
    First line of `content`, minus a leading "# " marker; "Untitled" if that
    leaves nothing.
    """
    first_line = content.split("\n", 1)[0]
    title = _HEADING_MARKER.sub("", first_line, count=1)
    return title or UNTITLED


class CatalogBuilder:
    """Lists the markdown documents found in one directory."""

    def __init__(self, markdown_dir: Path):
        self.markdown_dir = Path(markdown_dir)

    def _markdown_paths(self) -> List[Path]:
        root = self.markdown_dir.resolve()
        entries = sorted(self.markdown_dir.iterdir(), key=lambda p: p.name)
        # symlinks resolving outside the directory are not part of the catalog
        return [
            p
            for p in entries
            if p.suffix == MARKDOWN_SUFFIX and p.is_file() and p.resolve().parent == root
        ]

    def list_documents(self) -> List[MarkdownDocument]:
        """
        Build the catalog. ids are 1..N in file-name order and are only
        meaningful within this one call.
        """
        try:
            paths = self._markdown_paths()
            documents = []
            for index, path in enumerate(paths, start=1):
                content = path.read_bytes().decode("utf-8")
                documents.append(
                    MarkdownDocument(
                        id=index,
                        title=extract_title(content),
                        file_name=path.stem,
                    )
                )
        except (OSError, UnicodeDecodeError) as exc:
            logger.exception("list_documents failed for %s", self.markdown_dir)
            raise DirectoryAccessError() from exc

        logger.info("Listed %s markdown files", len(documents))
        return documents
