"""In-memory representation of a VCP skin document."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

DEFAULT_BACKGROUND = "#E9E0B7"
DEFAULT_COLUMN_COUNT = 6
DEFAULT_ROW_COUNT = 14


@dataclass(slots=True)
class PlcWord:
    """Text overlay bound to a PLC channel, drawn inside a border."""

    number: int = 0
    color: str = "#000000"
    fontsize: int = 12
    font: str = "Arial"
    fontstyle: str = "normal"
    verticalalignment: str = "center"
    horizontalalignment: str = "center"
    marginbottom: int = 0
    percentage: bool = False


@dataclass(slots=True)
class Border:
    """Filled and outlined grid rectangle, optionally carrying a PLC word."""

    row_start: int = 1
    column_start: int = 1
    row_span: int = 1
    column_span: int = 1
    fill: str = "Transparent"
    outline_color: str = "#000000"
    outline_thickness: int = 1
    plc_word: Optional[PlcWord] = None


@dataclass(slots=True)
class Image:
    """Image file placed on a grid rectangle."""

    row_start: int = 1
    column_start: int = 1
    row_span: int = 1
    column_span: int = 1
    path: str = ""


@dataclass(slots=True)
class Button:
    """Named button cell.

    ``file`` and ``default_image`` come from the button's sidecar file and are
    only filled in by the file loader.
    """

    row: int = 1
    column: int = 1
    row_span: Optional[int] = None
    column_span: Optional[int] = None
    name: str = ""
    file: Optional[str] = None
    default_image: Optional[str] = None


@dataclass(slots=True)
class StyleBlock:
    """Opacity and outline applied to buttons on click or hover."""

    opacity: int = 100
    outline_color: str = "#000000"


def default_click_style() -> StyleBlock:
    return StyleBlock(opacity=100, outline_color="#000000")


def default_hover_style() -> StyleBlock:
    return StyleBlock(opacity=100, outline_color="#ffffff")


@dataclass(slots=True)
class SkinDocument:
    """Complete skin: grid, styling blocks and ordered element lists."""

    background: str = DEFAULT_BACKGROUND
    column_count: int = DEFAULT_COLUMN_COUNT
    row_count: int = DEFAULT_ROW_COUNT
    on_click: Optional[StyleBlock] = field(default_factory=default_click_style)
    on_hover: Optional[StyleBlock] = field(default_factory=default_hover_style)
    borders: List[Border] = field(default_factory=list)
    images: List[Image] = field(default_factory=list)
    buttons: List[Button] = field(default_factory=list)


def new_document() -> SkinDocument:
    """Return the document used for a freshly created skin."""
    return SkinDocument()
