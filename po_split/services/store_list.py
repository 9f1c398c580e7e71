from __future__ import annotations

import logging
from pathlib import Path

from ..errors import ResourceUnavailable

"""Store list parsing.

The store list is a small text file of comma-separated store identifiers,
e.g. `014,071,123`. Line breaks are removed before splitting, so a list wrapped
over several lines still needs its commas.
"""

logger = logging.getLogger(__name__)


def split_store_tokens(text: str) -> list[str]:
    """Split raw list text into identifiers.

    Surrounding spaces are stripped. Duplicates and empty tokens are kept;
    the filter decides what they match.
    """
    joined = text.replace("\r", "").replace("\n", "")
    return [token.strip() for token in joined.split(",")]


def parse_store_list(path: Path, encoding: str = "utf-8") -> list[str]:
    """Read and split the store list file.

    Raises:
        ResourceUnavailable: if the file cannot be read
    """
    try:
        text = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise ResourceUnavailable(f"cannot read store list {path}: {e}") from e
    identifiers = split_store_tokens(text)
    logger.debug("store list %s -> %s", path, identifiers)
    return identifiers
