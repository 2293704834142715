# scripts/list_markdown.py
"""
Print the markdown catalog of the configured directory (MARKDOWN_DIR).

Usage:
    python -m scripts.list_markdown
"""

import logging
import sys

from mdapi.config import get_settings
from mdapi.core import CatalogBuilder, DirectoryAccessError

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()
    catalog = CatalogBuilder(settings.markdown_dir)

    try:
        documents = catalog.list_documents()
    except DirectoryAccessError as e:
        logger.error("%s (%s)", e.message, settings.markdown_dir)
        return 1

    print(f"Markdown directory:    {settings.markdown_dir}")
    print(f"Markdown files found:  {len(documents)}")
    for doc in documents:
        print(f"{doc.id:>4}  {doc.file_name:<30} {doc.title}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
