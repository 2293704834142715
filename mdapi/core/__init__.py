# mdapi/core/__init__.py

from .catalog import CatalogBuilder, MarkdownDocument, extract_title
from .errors import (
    DirectoryAccessError,
    FileReadError,
    FileWriteError,
    InvalidFileNameError,
    MarkdownError,
    MarkdownFileExistsError,
    MarkdownFileNotFoundError,
)
from .reader import ContentReader, resolve_markdown_path
from .uploads import MarkdownUploader, StoredFile

__all__ = [
    "CatalogBuilder",
    "MarkdownDocument",
    "extract_title",
    "ContentReader",
    "resolve_markdown_path",
    "MarkdownUploader",
    "StoredFile",
    "MarkdownError",
    "DirectoryAccessError",
    "MarkdownFileNotFoundError",
    "FileReadError",
    "InvalidFileNameError",
    "MarkdownFileExistsError",
    "FileWriteError",
]
