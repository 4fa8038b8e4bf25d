"""Tests for the command-line entry point."""
import json
import tempfile
import unittest
from pathlib import Path

from vcp_skin.main import main, summarize
from vcp_skin.model.skin_model import SkinDocument
from vcp_skin.parser.skin_parser import parse_skin


class MainTest(unittest.TestCase):
    def test_normalizes_and_dumps_json(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            skin = root / "main.vcp"
            skin.write_text(
                "<vcp_skin>\n<image>\n<path>a.svg</path>\n</image>\n<column_count>4</column_count>\n</vcp_skin>\n",
                encoding="utf-8",
            )
            output = root / "out.vcp"
            dump = root / "debug" / "doc.json"

            code = main([str(skin), "--output", str(output), "--json", str(dump)])

            self.assertEqual(code, 0)
            self.assertEqual(parse_skin(output.read_text(encoding="utf-8")).column_count, 4)
            payload = json.loads(dump.read_text(encoding="utf-8"))
            self.assertEqual(payload["images"][0]["path"], "a.svg")

    def test_new_document(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "new.vcp"

            self.assertEqual(main(["--new", str(target)]), 0)
            self.assertEqual(parse_skin(target.read_text(encoding="utf-8")), SkinDocument())

    def test_new_document_with_json_dump(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "new.vcp"
            dump = Path(tmp) / "new.json"

            self.assertEqual(main(["--new", str(target), "--json", str(dump)]), 0)
            payload = json.loads(dump.read_text(encoding="utf-8"))
            self.assertEqual(payload["column_count"], 6)
            self.assertEqual(payload["on_hover"]["outline_color"], "#ffffff")

    def test_failed_json_dump_returns_error_code(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            skin = Path(tmp) / "main.vcp"
            skin.write_text("<vcp_skin>\n</vcp_skin>\n", encoding="utf-8")

            with self.assertLogs("vcp_skin.main", level="ERROR"):
                self.assertEqual(main([str(skin), "--json", tmp]), 1)

    def test_missing_file_returns_error_code(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertLogs("vcp_skin.main", level="ERROR"):
                self.assertEqual(main([str(Path(tmp) / "missing.vcp")]), 1)

    def test_summarize(self) -> None:
        self.assertEqual(
            summarize(SkinDocument()),
            "grid 6x14, 0 borders, 0 images, 0 buttons (0 with sidecar files)",
        )


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
