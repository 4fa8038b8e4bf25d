"""Convert skin documents to and from plain JSON-compatible dictionaries."""
from __future__ import annotations

from dataclasses import fields, is_dataclass
from typing import Any, Dict, Mapping, Optional, Type, TypeVar

from vcp_skin.model.skin_model import (
    Border,
    Button,
    Image,
    PlcWord,
    SkinDocument,
    StyleBlock,
    default_click_style,
    default_hover_style,
)

T = TypeVar("T")


def document_to_dict(value: Any) -> Any:
    """Return a JSON-ready structure; ``None`` optionals are left out."""
    if is_dataclass(value):
        result: Dict[str, Any] = {}
        for item in fields(value):
            field_value = getattr(value, item.name)
            if field_value is None:
                continue
            result[item.name] = document_to_dict(field_value)
        return result
    if isinstance(value, (list, tuple)):
        return [document_to_dict(v) for v in value]
    return value


def _scalars(cls: Type[T], data: Mapping[str, Any], **overrides: Any) -> T:
    names = {item.name for item in fields(cls)}
    kwargs = {key: value for key, value in data.items() if key in names}
    kwargs.update(overrides)
    return cls(**kwargs)


def _style(data: Optional[Mapping[str, Any]], default: StyleBlock) -> Optional[StyleBlock]:
    if data is None:
        return None
    return _scalars(StyleBlock, {**document_to_dict(default), **data})


def _border(data: Mapping[str, Any]) -> Border:
    plc_data = data.get("plc_word")
    plc_word = _scalars(PlcWord, plc_data) if plc_data is not None else None
    return _scalars(Border, data, plc_word=plc_word)


def document_from_dict(data: Mapping[str, Any]) -> SkinDocument:
    """Rebuild a document; absent keys take the dataclass defaults.

    A missing ``on_click``/``on_hover`` key means no style block, mirroring
    how :func:`document_to_dict` drops ``None`` values.
    """
    return _scalars(
        SkinDocument,
        data,
        on_click=_style(data.get("on_click"), default_click_style()),
        on_hover=_style(data.get("on_hover"), default_hover_style()),
        borders=[_border(item) for item in data.get("borders", [])],
        images=[_scalars(Image, item) for item in data.get("images", [])],
        buttons=[_scalars(Button, item) for item in data.get("buttons", [])],
    )
