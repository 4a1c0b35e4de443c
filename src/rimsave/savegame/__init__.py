"""Load save files from disk or memory and build the domain model."""

from __future__ import annotations

import logging
from pathlib import Path
from xml.etree import ElementTree
from xml.etree.ElementTree import Element

from rimsave.domain.errors import DocumentParseError
from rimsave.domain.game import build_game
from rimsave.domain.models import Game
from rimsave.domain.save_format import DEFAULT_FORMAT, SaveFormat

logger = logging.getLogger(__name__)


def parse_document(data: bytes | str) -> Element:
    """Parse raw markup and return the document root element."""

    try:
        return ElementTree.fromstring(data)
    except ElementTree.ParseError as exc:
        raise DocumentParseError(f"save document is not well-formed: {exc}") from exc


def parse_game(data: bytes | str, *, fmt: SaveFormat = DEFAULT_FORMAT) -> Game:
    """Build a :class:`Game` from an in-memory save document."""

    return build_game(parse_document(data), fmt=fmt)


def load_game(path: Path | str, *, fmt: SaveFormat = DEFAULT_FORMAT) -> Game:
    """Read a save file from disk and build its :class:`Game`."""

    save_path = Path(path)
    logger.info("loading save file %s", save_path)
    return parse_game(save_path.read_bytes(), fmt=fmt)


__all__ = ["load_game", "parse_document", "parse_game"]
