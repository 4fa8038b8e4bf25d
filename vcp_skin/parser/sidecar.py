"""Attach per-button sidecar metadata to parsed buttons."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from vcp_skin.model.skin_model import Button, SkinDocument
from vcp_skin.utils.filesystem import SkinFileSystem
from vcp_skin.utils.logger import get_logger
from vcp_skin.utils.text_utils import extract_between

LOGGER = get_logger(__name__)

SKINS_DIR = "skins"
BUTTONS_DIR = "Buttons"
DEFAULT_IMAGE_OPEN = "<default_image>"
DEFAULT_IMAGE_CLOSE = "</default_image>"


def resolve_skin_root(skin_path: Path) -> Path:
    """Return the folder holding ``Buttons/`` for a skin file.

    Skins live either directly in the root or in its ``skins`` subfolder.
    """
    root = Path(skin_path).parent
    if root.name == SKINS_DIR:
        root = root.parent
    return root


def sidecar_file_name(button_name: str) -> str:
    return f"{button_name}.xml"


def sidecar_path(root: Path, button_name: str) -> Path:
    return root / BUTTONS_DIR / button_name / sidecar_file_name(button_name)


def extract_default_image(content: str) -> Optional[str]:
    """Return the first non-empty ``<default_image>`` value in a sidecar."""
    value = extract_between(content, DEFAULT_IMAGE_OPEN, DEFAULT_IMAGE_CLOSE)
    return value or None


class SidecarEnricher:
    """Fills ``Button.file`` and ``Button.default_image`` from sidecar files.

    Missing or unreadable sidecars leave the button untouched; enrichment
    never fails the surrounding load.
    """

    def __init__(self, fs: SkinFileSystem, root: Path) -> None:
        self._fs = fs
        self._root = root

    def enrich(self, document: SkinDocument) -> int:
        """Enrich every named button and return how many had a sidecar."""
        enriched = 0
        for button in document.buttons:
            if button.name and self._enrich_button(button):
                enriched += 1
        return enriched

    def _enrich_button(self, button: Button) -> bool:
        path = sidecar_path(self._root, button.name)
        LOGGER.debug("Checking for sidecar at %s", path)
        if not self._fs.exists(path):
            LOGGER.debug("No sidecar for button %s", button.name)
            return False

        button.file = sidecar_file_name(button.name)
        try:
            content = self._fs.read_text(path)
        except (OSError, UnicodeDecodeError) as exc:
            LOGGER.warning("Could not read sidecar %s: %s", path, exc)
            return True

        default_image = extract_default_image(content)
        if default_image is not None:
            button.default_image = default_image
            LOGGER.debug("Button %s default image: %s", button.name, default_image)
        return True
