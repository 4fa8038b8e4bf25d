"""Helpers to persist documents as JSON for inspection."""
from __future__ import annotations

import json
from pathlib import Path

from vcp_skin.model.document_dict import document_to_dict
from vcp_skin.model.skin_model import SkinDocument


class DebugDumper:
    """Writes the parsed document onto disk as JSON."""

    def __init__(self, output_path: Path) -> None:
        self.output_path = output_path

    def dump(self, document: SkinDocument) -> None:
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        payload = document_to_dict(document)
        self.output_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
