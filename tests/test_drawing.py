"""Tests for drawing backends."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from gridplanner.drawing import (
    PRIMITIVE_NAMES,
    RecordingPrimitives,
    create_reportlab_primitives,
)


class RecordingPrimitivesTests(unittest.TestCase):
    def test_records_calls_in_order(self) -> None:
        pdf = RecordingPrimitives()
        pdf.set_font("Helvetica", 8)
        pdf.draw_string(1, 2, "a")
        pdf.rect(0, 0, 5, 5, fill=1, stroke=0)
        pdf.show_page()
        pdf.save()

        self.assertEqual(
            [call.name for call in pdf.calls],
            ["set_font", "draw_string", "rect", "show_page", "save"],
        )
        self.assertEqual(pdf.calls_named("rect")[0].kwargs, {"fill": 1, "stroke": 0})
        self.assertEqual(pdf.texts(), ["a"])
        self.assertEqual(pdf.pages, 1)
        self.assertTrue(pdf.saved)

        pdf.clear()
        self.assertEqual(pdf.calls, [])

    def test_unknown_primitives_are_rejected(self) -> None:
        with self.assertRaises(AttributeError):
            RecordingPrimitives().draw_bezier(0, 0)

    def test_string_width_uses_font_metrics(self) -> None:
        pdf = RecordingPrimitives()
        self.assertGreater(pdf.string_width("Week", "Helvetica", 10), 0)
        self.assertEqual(pdf.calls, [])

    def test_primitive_names(self) -> None:
        self.assertIn("link_rect", PRIMITIVE_NAMES)
        self.assertIn("do_form", PRIMITIVE_NAMES)
        self.assertNotIn("_target", PRIMITIVE_NAMES)


class ReportLabPrimitivesTests(unittest.TestCase):
    def test_writes_linked_pages(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            output_path = Path(tmp_dir) / "two_pages.pdf"
            pdf = create_reportlab_primitives(str(output_path), pagesize=(100, 100))
            pdf.bookmark_page("first")
            pdf.set_dash((1, 2))
            pdf.set_dash(None)
            pdf.link_rect("second", (0, 0, 10, 10))
            pdf.show_page()
            pdf.bookmark_page("second")
            pdf.add_outline_entry("Second", "second", level=0)
            pdf.show_page()
            pdf.save()

            data = output_path.read_bytes()
            self.assertTrue(data.startswith(b"%PDF"))
            self.assertIn(b"/Subtype /Link", data)

    def test_unknown_primitives_are_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            pdf = create_reportlab_primitives(str(Path(tmp_dir) / "x.pdf"), pagesize=(100, 100))
            with self.assertRaises(AttributeError):
                pdf.draw_bezier(0, 0)


if __name__ == "__main__":
    unittest.main()
