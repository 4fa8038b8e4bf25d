"""Parse skin markup text into a :class:`SkinDocument`."""
from __future__ import annotations

from vcp_skin.model.skin_model import DEFAULT_COLUMN_COUNT, DEFAULT_ROW_COUNT, SkinDocument
from vcp_skin.parser.block_parser import (
    BUTTON_OPEN,
    parse_border,
    parse_button,
    parse_image,
    parse_on_click,
    parse_on_hover,
)
from vcp_skin.parser.line_cursor import LineCursor
from vcp_skin.utils.logger import get_logger
from vcp_skin.utils.text_utils import extract_text_content, parse_int

LOGGER = get_logger(__name__)


class SkinParser:
    """Line scanner for the top level of a skin document.

    Block lines are handed to the block parsers, which leave the shared
    cursor on their closing line; the loop then steps past it like any other
    line. Lines that match nothing are skipped, so the parser never fails.
    """

    def __init__(self, text: str) -> None:
        self._cursor = LineCursor.from_text(text)

    def parse(self) -> SkinDocument:
        document = SkinDocument()
        cursor = self._cursor
        while not cursor.at_end():
            self._parse_line(cursor.current(), document)
            cursor.advance()
        LOGGER.debug(
            "Parsed skin: %d borders, %d images, %d buttons",
            len(document.borders),
            len(document.images),
            len(document.buttons),
        )
        return document

    def _parse_line(self, line: str, document: SkinDocument) -> None:
        cursor = self._cursor
        if line.startswith("<background>"):
            document.background = extract_text_content(line)
        elif line.startswith("<column_count>"):
            document.column_count = parse_int(extract_text_content(line), DEFAULT_COLUMN_COUNT)
        elif line.startswith("<row_count>"):
            document.row_count = parse_int(extract_text_content(line), DEFAULT_ROW_COUNT)
        elif line.startswith("<border>"):
            document.borders.append(parse_border(cursor))
        elif line.startswith("<image>"):
            document.images.append(parse_image(cursor))
        elif line.startswith(BUTTON_OPEN):
            document.buttons.append(parse_button(line))
        elif line.startswith("<on_click>"):
            document.on_click = parse_on_click(cursor)
        elif line.startswith("<on_hover>"):
            document.on_hover = parse_on_hover(cursor)
        elif line:
            LOGGER.debug("Skipping unrecognized line %d: %s", cursor.pos + 1, line)


def parse_skin(text: str) -> SkinDocument:
    """Parse skin markup; malformed content falls back to defaults."""
    return SkinParser(text).parse()
