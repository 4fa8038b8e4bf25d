"""Command-line entry point for inspecting and normalizing skin files."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from vcp_skin.model.skin_model import SkinDocument, new_document
from vcp_skin.parser.skin_loader import load_skin, save_skin
from vcp_skin.utils.debug import DebugDumper
from vcp_skin.utils.logger import get_logger, set_verbose

LOGGER = get_logger(__name__)


def summarize(document: SkinDocument) -> str:
    """One-line description of a document for log output."""
    with_sidecar = sum(1 for button in document.buttons if button.file)
    return (
        f"grid {document.column_count}x{document.row_count}, "
        f"{len(document.borders)} borders, {len(document.images)} images, "
        f"{len(document.buttons)} buttons ({with_sidecar} with sidecar files)"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Read a VCP skin file and rewrite it in canonical form")
    parser.add_argument("skin_file", nargs="?", help="Path to the skin file to load")
    parser.add_argument("--output", help="Write the canonical serialization to this path")
    parser.add_argument("--json", help="Write a JSON dump of the parsed document to this path")
    parser.add_argument("--new", metavar="PATH", help="Write a new default skin to PATH instead of loading one")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    set_verbose(args.verbose)
    if not args.new and not args.skin_file:
        parser.error("skin_file is required unless --new is given")

    try:
        if args.new:
            document = new_document()
            save_skin(Path(args.new), document)
        else:
            document = load_skin(Path(args.skin_file))
            LOGGER.info("%s: %s", args.skin_file, summarize(document))
            if args.output:
                save_skin(Path(args.output), document)

        if args.json:
            DebugDumper(Path(args.json)).dump(document)
            LOGGER.info("Wrote JSON dump to %s", args.json)
    except OSError as exc:
        LOGGER.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
