"""Tests for top-level skin document parsing."""
import unittest

from vcp_skin.model.skin_model import Border, Button, Image, SkinDocument, StyleBlock
from vcp_skin.parser.skin_parser import parse_skin

SAMPLE_SKIN = """<vcp_skin>
    <background>#202020</background>
    <column_count>8</column_count>
    <row_count>10</row_count>
    <border>
        <row_start>1</row_start>
        <column_start>2</column_start>
        <fill>Transparent</fill>
        <plc_word>
            <number>5</number>
            <percentage>true</percentage>
        </plc_word>
    </border>
    <border>
        <row_start>3</row_start>
    </border>
    <image>
        <path>images/panel.svg</path>
    </image>
    <on_click>
        <opacity>60</opacity>
        <outline_color>#FF0000</outline_color>
    </on_click>
    <button row="1" column="1">Cycle Start</button>
    <button row="2" column="1" column_span="2">Feed Hold</button>
</vcp_skin>
"""


class SkinParserTest(unittest.TestCase):
    def test_parse_sample(self) -> None:
        doc = parse_skin(SAMPLE_SKIN)

        self.assertEqual(doc.background, "#202020")
        self.assertEqual((doc.column_count, doc.row_count), (8, 10))
        self.assertEqual(len(doc.borders), 2)
        self.assertEqual(doc.borders[0].column_start, 2)
        self.assertEqual(doc.borders[0].plc_word.number, 5)
        self.assertTrue(doc.borders[0].plc_word.percentage)
        self.assertEqual(doc.borders[1], Border(row_start=3))
        self.assertEqual(doc.images, [Image(path="images/panel.svg")])
        self.assertEqual(doc.on_click, StyleBlock(opacity=60, outline_color="#FF0000"))
        self.assertEqual(doc.on_hover, StyleBlock(opacity=100, outline_color="#ffffff"))
        self.assertEqual(
            doc.buttons,
            [
                Button(row=1, column=1, name="Cycle Start"),
                Button(row=2, column=1, column_span=2, name="Feed Hold"),
            ],
        )

    def test_empty_input_gives_default_document(self) -> None:
        self.assertEqual(parse_skin(""), SkinDocument())

    def test_default_document(self) -> None:
        doc = SkinDocument()

        self.assertEqual(doc.background, "#E9E0B7")
        self.assertEqual(doc.column_count, 6)
        self.assertEqual(doc.row_count, 14)
        self.assertIsNotNone(doc.on_click)
        self.assertIsNotNone(doc.on_hover)
        self.assertEqual(doc.borders, [])
        self.assertEqual(doc.images, [])
        self.assertEqual(doc.buttons, [])

    def test_root_counts_fall_back_on_malformed_values(self) -> None:
        doc = parse_skin("<column_count>six</column_count>\n<row_count></row_count>")

        self.assertEqual(doc.column_count, 6)
        self.assertEqual(doc.row_count, 14)

    def test_root_counts_reject_separators_and_overflow(self) -> None:
        doc = parse_skin("<column_count>1_0</column_count>\n<row_count>99999999999</row_count>")

        self.assertEqual(doc.column_count, 6)
        self.assertEqual(doc.row_count, 14)

    def test_only_newline_separates_lines(self) -> None:
        doc = parse_skin("<image>\r\n<path>a\x0cb c.svg</path>\r\n</image>\r\n<background>#111111</background>\r\n")

        self.assertEqual(doc.images, [Image(path="a\x0cb c.svg")])
        self.assertEqual(doc.background, "#111111")

    def test_unknown_tags_are_ignored(self) -> None:
        text = """<vcp_skin>
    <theme>dark</theme>
    <border>
        <glow>yes</glow>
    </border>
    <widget>
        <row_start>9</row_start>
    </widget>
</vcp_skin>"""
        doc = parse_skin(text)

        self.assertEqual(doc.borders, [Border()])
        self.assertEqual(doc.images, [])
        self.assertEqual(doc.buttons, [])
        self.assertEqual(doc.background, "#E9E0B7")

    def test_order_of_elements_is_preserved(self) -> None:
        text = "\n".join(
            f'<button row="{row}" column="1">b{row}</button>' for row in (3, 1, 2)
        )
        doc = parse_skin(text)

        self.assertEqual([b.name for b in doc.buttons], ["b3", "b1", "b2"])

    def test_truncated_border_at_end_of_file(self) -> None:
        doc = parse_skin("<background>#000000</background>\n<border>\n<row_span>4</row_span>\n<button row=\"1\" column=\"1\">X</button>")

        self.assertEqual(doc.background, "#000000")
        self.assertEqual(len(doc.borders), 1)
        self.assertEqual(doc.borders[0].row_span, 4)
        self.assertEqual(doc.buttons, [])

    def test_indentation_and_field_order_do_not_matter(self) -> None:
        text = "<image>\n<path>a.svg</path>\n\t\t<row_start>5</row_start>\n</image>"
        doc = parse_skin(text)

        self.assertEqual(doc.images, [Image(row_start=5, path="a.svg")])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
