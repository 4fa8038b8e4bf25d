"""Load and save skin files, layering sidecar enrichment on the parser."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from vcp_skin.model.skin_model import SkinDocument
from vcp_skin.parser.sidecar import SidecarEnricher, resolve_skin_root
from vcp_skin.parser.skin_parser import parse_skin
from vcp_skin.utils.filesystem import LocalFileSystem, SkinFileSystem
from vcp_skin.utils.logger import get_logger
from vcp_skin.writer.skin_writer import serialize_skin

LOGGER = get_logger(__name__)


class SkinFileError(OSError):
    """Raised when a skin file cannot be read or written."""


def load_skin(path: Path | str, fs: Optional[SkinFileSystem] = None) -> SkinDocument:
    """Read, parse and enrich the skin at ``path``.

    Only the read of the skin file itself can fail; sidecar problems are
    logged and ignored.
    """
    fs = fs or LocalFileSystem()
    skin_path = Path(path)
    try:
        content = fs.read_text(skin_path)
    except (OSError, UnicodeDecodeError) as exc:
        raise SkinFileError(f"Failed to read file {skin_path}: {exc}") from exc

    document = parse_skin(content)
    root = resolve_skin_root(skin_path)
    LOGGER.debug("Skin root directory: %s", root)
    enriched = SidecarEnricher(fs, root).enrich(document)
    LOGGER.info(
        "Loaded %s (%d buttons, %d with sidecar files)", skin_path.name, len(document.buttons), enriched
    )
    return document


def save_skin(path: Path | str, document: SkinDocument, fs: Optional[SkinFileSystem] = None) -> None:
    """Serialize ``document`` and write it to ``path``."""
    fs = fs or LocalFileSystem()
    skin_path = Path(path)
    try:
        fs.write_text(skin_path, serialize_skin(document))
    except OSError as exc:
        raise SkinFileError(f"Failed to write file {skin_path}: {exc}") from exc
    LOGGER.info("Saved %s", skin_path.name)
