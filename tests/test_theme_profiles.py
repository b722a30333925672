"""Tests for theme profile resolution and validation."""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path

from reportlab.lib import colors

from gridplanner.theme_profiles import available_theme_profiles, parse_color, resolve_theme


class ThemeProfileTests(unittest.TestCase):
    def test_available_theme_profiles(self) -> None:
        self.assertEqual(available_theme_profiles(), ("dark", "earth", "light"))

    def test_resolve_theme_defaults_match_builtin_theme_values(self) -> None:
        theme = resolve_theme()
        self.assertEqual(theme.FONT_HEADER, "Helvetica-Bold")
        self.assertEqual(theme.BACKGROUND.rgb(), colors.HexColor("#FFFFFF").rgb())
        self.assertEqual(theme.DOT_GRID.rgb(), colors.HexColor("#CCCCCC").rgb())

    def test_resolve_dark_theme(self) -> None:
        theme = resolve_theme(profile="dark")
        self.assertEqual(theme.BACKGROUND.rgb(), colors.HexColor("#1E1E1E").rgb())
        self.assertEqual(theme.TEXT_PRIMARY.rgb(), colors.HexColor("#B0B0B0").rgb())

    def test_resolve_theme_rejects_unknown_profile(self) -> None:
        with self.assertRaisesRegex(ValueError, "unknown theme profile 'neon'"):
            resolve_theme(profile="neon")

    def test_resolve_theme_applies_json_overrides(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            theme_path = Path(tmp_dir) / "theme.json"
            theme_path.write_text(
                json.dumps(
                    {
                        "borders": "#112233",
                        "font_header": "Courier-Bold",
                    }
                ),
                encoding="utf-8",
            )

            theme = resolve_theme(profile="earth", theme_file=theme_path)
            self.assertEqual(theme.BORDERS.rgb(), colors.HexColor("#112233").rgb())
            self.assertEqual(theme.FONT_HEADER, "Courier-Bold")
            self.assertEqual(theme.BACKGROUND.rgb(), colors.HexColor("#F5F1E8").rgb())

    def test_theme_file_can_extend_another_profile(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            theme_path = Path(tmp_dir) / "theme.json"
            theme_path.write_text(
                json.dumps({"extends": "dark", "text_primary": "white"}), encoding="utf-8"
            )

            theme = resolve_theme(theme_file=theme_path)
            self.assertEqual(theme.BACKGROUND.rgb(), colors.HexColor("#1E1E1E").rgb())
            self.assertEqual(theme.TEXT_PRIMARY.rgb(), colors.white.rgb())

    def test_resolve_theme_rejects_non_object_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            theme_path = Path(tmp_dir) / "theme.json"
            theme_path.write_text("[1, 2]", encoding="utf-8")

            with self.assertRaisesRegex(ValueError, "must hold a JSON object"):
                resolve_theme(theme_file=theme_path)

    def test_resolve_theme_rejects_unknown_key(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            theme_path = Path(tmp_dir) / "theme.json"
            theme_path.write_text(json.dumps({"unknown": "#111111"}), encoding="utf-8")

            with self.assertRaisesRegex(ValueError, "unknown theme key\\(s\\): unknown"):
                resolve_theme(theme_file=theme_path)

    def test_resolve_theme_rejects_invalid_color(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            theme_path = Path(tmp_dir) / "theme.json"
            theme_path.write_text(json.dumps({"borders": "invalid-color"}), encoding="utf-8")

            with self.assertRaisesRegex(ValueError, "invalid color value 'invalid-color'"):
                resolve_theme(theme_file=theme_path)

    def test_resolve_theme_rejects_missing_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            with self.assertRaisesRegex(ValueError, "does not exist"):
                resolve_theme(theme_file=Path(tmp_dir) / "missing.json")


class ParseColorTests(unittest.TestCase):
    def test_hex_with_and_without_hash(self) -> None:
        self.assertEqual(parse_color("#FF0000").rgb(), colors.red.rgb())
        self.assertEqual(parse_color("ff0000").rgb(), colors.red.rgb())

    def test_named_colors_and_color_objects(self) -> None:
        self.assertEqual(parse_color("blue").rgb(), colors.blue.rgb())
        self.assertIs(parse_color(colors.green), colors.green)

    def test_invalid_values(self) -> None:
        for value in ("", "   ", "no-such-colour", 12, None):
            with self.assertRaises(ValueError):
                parse_color(value)


if __name__ == "__main__":
    unittest.main()
