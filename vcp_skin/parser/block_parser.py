"""Parsers for the nested blocks of a skin document.

Every block parser builds its struct from the dataclass defaults first and
then overrides fields from the recognized leaf lines. Unknown lines are
skipped and a missing closing tag simply ends the block at end of input.
"""
from __future__ import annotations

from typing import Callable, Dict, Optional

from vcp_skin.model.skin_model import (
    Border,
    Button,
    Image,
    PlcWord,
    StyleBlock,
    default_click_style,
    default_hover_style,
)
from vcp_skin.parser.line_cursor import LineCursor
from vcp_skin.utils.logger import get_logger
from vcp_skin.utils.text_utils import (
    extract_attribute,
    extract_text_content,
    parse_bool,
    parse_int,
    parse_optional_int,
)

LOGGER = get_logger(__name__)

BUTTON_OPEN = "<button "

LeafHandler = Callable[[object, str], None]


def _int_field(name: str, default: int) -> LeafHandler:
    def assign(target: object, text: str) -> None:
        setattr(target, name, parse_int(text, default))

    return assign


def _str_field(name: str) -> LeafHandler:
    def assign(target: object, text: str) -> None:
        setattr(target, name, text)

    return assign


def _bool_field(name: str) -> LeafHandler:
    def assign(target: object, text: str) -> None:
        setattr(target, name, parse_bool(text))

    return assign


_GRID_FIELDS: Dict[str, LeafHandler] = {
    "<row_start>": _int_field("row_start", 1),
    "<column_start>": _int_field("column_start", 1),
    "<row_span>": _int_field("row_span", 1),
    "<column_span>": _int_field("column_span", 1),
}

BORDER_FIELDS: Dict[str, LeafHandler] = {
    **_GRID_FIELDS,
    "<fill>": _str_field("fill"),
    "<outline_color>": _str_field("outline_color"),
    "<outline_thickness>": _int_field("outline_thickness", 1),
}

PLC_WORD_FIELDS: Dict[str, LeafHandler] = {
    "<number>": _int_field("number", 0),
    "<color>": _str_field("color"),
    "<fontsize>": _int_field("fontsize", 12),
    "<font>": _str_field("font"),
    "<fontstyle>": _str_field("fontstyle"),
    "<verticalalignment>": _str_field("verticalalignment"),
    "<horizontalalignment>": _str_field("horizontalalignment"),
    "<marginbottom>": _int_field("marginbottom", 0),
    "<percentage>": _bool_field("percentage"),
}

IMAGE_FIELDS: Dict[str, LeafHandler] = {
    **_GRID_FIELDS,
    "<path>": _str_field("path"),
}

STYLE_FIELDS: Dict[str, LeafHandler] = {
    "<opacity>": _int_field("opacity", 100),
    "<outline_color>": _str_field("outline_color"),
}


def _match_leaf(line: str, fields: Dict[str, LeafHandler]) -> Optional[LeafHandler]:
    for prefix, handler in fields.items():
        if line.startswith(prefix):
            return handler
    return None


def _scan_block(
    cursor: LineCursor,
    target: object,
    close_tag: str,
    fields: Dict[str, LeafHandler],
    nested: Optional[Dict[str, Callable[[LineCursor], None]]] = None,
) -> None:
    cursor.advance()
    while not cursor.at_end():
        line = cursor.current()
        if line.startswith(close_tag):
            return
        handler = _match_leaf(line, fields)
        if handler is not None:
            handler(target, extract_text_content(line))
        elif nested:
            for prefix, parse_nested in nested.items():
                if line.startswith(prefix):
                    parse_nested(cursor)
                    break
        cursor.advance()
    LOGGER.debug("Block closed by end of input; expected %s", close_tag)


def parse_plc_word(cursor: LineCursor) -> PlcWord:
    """Parse a ``<plc_word>`` block starting at the cursor."""
    plc_word = PlcWord()
    _scan_block(cursor, plc_word, "</plc_word>", PLC_WORD_FIELDS)
    return plc_word


def parse_border(cursor: LineCursor) -> Border:
    """Parse a ``<border>`` block, including an optional nested ``<plc_word>``."""
    border = Border()

    def attach_plc_word(inner: LineCursor) -> None:
        border.plc_word = parse_plc_word(inner)

    _scan_block(cursor, border, "</border>", BORDER_FIELDS, {"<plc_word>": attach_plc_word})
    return border


def parse_image(cursor: LineCursor) -> Image:
    """Parse an ``<image>`` block starting at the cursor."""
    image = Image()
    _scan_block(cursor, image, "</image>", IMAGE_FIELDS)
    return image


def parse_style_block(cursor: LineCursor, close_tag: str, default: StyleBlock) -> StyleBlock:
    """Parse an ``<on_click>``/``<on_hover>`` body on top of ``default``."""
    _scan_block(cursor, default, close_tag, STYLE_FIELDS)
    return default


def parse_on_click(cursor: LineCursor) -> StyleBlock:
    return parse_style_block(cursor, "</on_click>", default_click_style())


def parse_on_hover(cursor: LineCursor) -> StyleBlock:
    return parse_style_block(cursor, "</on_hover>", default_hover_style())


def parse_button(line: str) -> Button:
    """Parse a single-line ``<button ...>name</button>`` element.

    Multi-line button elements are not supported: the attributes, name and
    closing tag must all share one line.
    """
    button = Button()
    button.row = parse_int(extract_attribute(line, "row"), 1)
    button.column = parse_int(extract_attribute(line, "column"), 1)
    button.row_span = parse_optional_int(extract_attribute(line, "row_span"))
    button.column_span = parse_optional_int(extract_attribute(line, "column_span"))
    button.name = extract_text_content(line)
    return button
