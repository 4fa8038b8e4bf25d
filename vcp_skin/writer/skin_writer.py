"""Write a :class:`SkinDocument` back to skin markup in canonical order."""
from __future__ import annotations

from typing import List

from vcp_skin.model.skin_model import Border, Button, Image, PlcWord, SkinDocument, StyleBlock
from vcp_skin.utils.text_utils import format_bool

INDENT = "    "
ROOT_TAG = "vcp_skin"


class SkinWriter:
    """Emit fixed-order, fixed-indentation markup.

    Field order never depends on how the document was read, so the output is
    not byte-identical to arbitrary input, but reading it back yields an equal
    document.
    """

    def __init__(self) -> None:
        self._lines: List[str] = []

    def serialize(self, document: SkinDocument) -> str:
        self._lines = [f"<{ROOT_TAG}>"]
        self._leaf(1, "background", document.background)
        self._leaf(1, "column_count", document.column_count)
        self._leaf(1, "row_count", document.row_count)
        for border in document.borders:
            self._write_border(border)
        for image in document.images:
            self._write_image(image)
        if document.on_click is not None:
            self._write_style("on_click", document.on_click)
        if document.on_hover is not None:
            self._write_style("on_hover", document.on_hover)
        for button in document.buttons:
            self._write_button(button)
        self._lines.append(f"</{ROOT_TAG}>")
        return "\n".join(self._lines) + "\n"

    def _leaf(self, depth: int, tag: str, value: object) -> None:
        self._lines.append(f"{INDENT * depth}<{tag}>{value}</{tag}>")

    def _open(self, depth: int, tag: str) -> None:
        self._lines.append(f"{INDENT * depth}<{tag}>")

    def _close(self, depth: int, tag: str) -> None:
        self._lines.append(f"{INDENT * depth}</{tag}>")

    def _write_border(self, border: Border) -> None:
        self._open(1, "border")
        self._leaf(2, "column_span", border.column_span)
        self._leaf(2, "column_start", border.column_start)
        self._leaf(2, "fill", border.fill)
        self._leaf(2, "row_span", border.row_span)
        self._leaf(2, "row_start", border.row_start)
        self._leaf(2, "outline_color", border.outline_color)
        self._leaf(2, "outline_thickness", border.outline_thickness)
        if border.plc_word is not None:
            self._write_plc_word(border.plc_word)
        self._close(1, "border")

    def _write_plc_word(self, plc_word: PlcWord) -> None:
        self._open(2, "plc_word")
        self._leaf(3, "number", plc_word.number)
        self._leaf(3, "color", plc_word.color)
        self._leaf(3, "fontsize", plc_word.fontsize)
        self._leaf(3, "font", plc_word.font)
        self._leaf(3, "fontstyle", plc_word.fontstyle)
        self._leaf(3, "verticalalignment", plc_word.verticalalignment)
        self._leaf(3, "horizontalalignment", plc_word.horizontalalignment)
        self._leaf(3, "marginbottom", plc_word.marginbottom)
        self._leaf(3, "percentage", format_bool(plc_word.percentage))
        self._close(2, "plc_word")

    def _write_image(self, image: Image) -> None:
        self._open(1, "image")
        self._leaf(2, "column_span", image.column_span)
        self._leaf(2, "column_start", image.column_start)
        self._leaf(2, "row_span", image.row_span)
        self._leaf(2, "row_start", image.row_start)
        self._leaf(2, "path", image.path)
        self._close(1, "image")

    def _write_style(self, tag: str, style: StyleBlock) -> None:
        self._open(1, tag)
        self._leaf(2, "opacity", style.opacity)
        self._leaf(2, "outline_color", style.outline_color)
        self._close(1, tag)

    def _write_button(self, button: Button) -> None:
        attributes = f'row="{button.row}" column="{button.column}"'
        if button.row_span is not None:
            attributes += f' row_span="{button.row_span}"'
        if button.column_span is not None:
            attributes += f' column_span="{button.column_span}"'
        self._lines.append(f"{INDENT}<button {attributes}>{button.name}</button>")


def serialize_skin(document: SkinDocument) -> str:
    """Return canonical skin markup for ``document``."""
    return SkinWriter().serialize(document)
