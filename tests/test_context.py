"""Tests for render contexts, page sets and destination ids."""

from __future__ import annotations

import enum
import unittest
from datetime import date

from gridplanner.context import PageSet, RenderContext, canonical_key
from gridplanner.destinations import (
    collection_destination,
    day_destination,
    parse_day_destination,
    week_destination,
)


class PageKind(enum.Enum):
    WEEK_5 = "week_5"


class RenderContextTests(unittest.TestCase):
    def test_is_current_page_compares_page_keys(self) -> None:
        context = RenderContext(page_key="week_5", page_number=7, year=2025)
        self.assertTrue(context.is_current_page("week_5"))
        self.assertFalse(context.is_current_page("week_6"))
        self.assertTrue(context.is_current_page(PageKind.WEEK_5))

    def test_enum_page_keys_are_canonicalized(self) -> None:
        context = RenderContext(
            page_key=PageKind.WEEK_5,  # type: ignore[arg-type]
            page_number=1,
            year=2025,
        )
        self.assertEqual(context.page_key, "week_5")
        self.assertEqual(canonical_key(PageKind.WEEK_5), "week_5")
        self.assertEqual(canonical_key(12), "12")

    def test_context_is_immutable(self) -> None:
        context = RenderContext(page_key="seasonal", page_number=1, year=2025)
        with self.assertRaises(AttributeError):
            context.page_number = 2  # type: ignore[misc]
        with self.assertRaises(TypeError):
            context.extras["note"] = "x"  # type: ignore[index]

    def test_contexts_are_hashable(self) -> None:
        first = RenderContext(page_key="week_5", page_number=1, year=2025)
        same = RenderContext(page_key="week_5", page_number=1, year=2025)
        with_extras = RenderContext(
            page_key="week_5", page_number=1, year=2025, extras={"theme": "dark"}
        )
        self.assertEqual(hash(first), hash(same))
        self.assertEqual(len({first, same}), 1)
        self.assertNotEqual(first, with_extras)
        self.assertEqual(len({first, with_extras}), 2)

    def test_extras_are_copied_and_readable(self) -> None:
        extras = {"theme": "dark"}
        context = RenderContext(page_key="dots", page_number=3, year=2025, extras=extras)
        extras["theme"] = "light"
        self.assertEqual(context["theme"], "dark")
        self.assertEqual(context["year"], 2025)
        self.assertIn("theme", context)
        self.assertIn("page_key", context)
        self.assertNotIn("missing", context)
        self.assertIsNone(context.get("missing"))
        self.assertEqual(context.to_dict()["theme"], "dark")
        self.assertEqual(context.to_dict()["page_number"], 3)

    def test_extras_cannot_shadow_fields(self) -> None:
        with self.assertRaises(ValueError):
            RenderContext(page_key="dots", page_number=1, year=2025, extras={"year": 1999})

    def test_required_fields_are_validated(self) -> None:
        with self.assertRaises(ValueError):
            RenderContext(page_key=" ", page_number=1, year=2025)
        with self.assertRaises(ValueError):
            RenderContext(page_key="dots", page_number=0, year=2025)

    def test_weekly_pages(self) -> None:
        self.assertTrue(RenderContext(page_key="week_2", page_number=5, year=2025).is_weekly_page)
        self.assertTrue(
            RenderContext(page_key="custom", page_number=5, year=2025, week_num=2).is_weekly_page
        )
        self.assertFalse(RenderContext(page_key="dots", page_number=5, year=2025).is_weekly_page)


class PageSetTests(unittest.TestCase):
    def test_labels_and_positions(self) -> None:
        pages = PageSet(name="index", count=3, label_pattern="Index %page of %total")
        self.assertEqual(len(pages), 3)
        self.assertEqual(pages[0].label, "Index 1 of 3")
        self.assertTrue(pages[0].is_first)
        self.assertTrue(pages[2].is_last)
        self.assertEqual(pages[1].page, 2)
        self.assertEqual([item.index for item in pages], [0, 1, 2])
        self.assertEqual(pages.destinations(), ("index_1", "index_2", "index_3"))

    def test_out_of_range_index_raises(self) -> None:
        pages = PageSet(name="index", count=2)
        with self.assertRaises(IndexError):
            pages[2]
        with self.assertRaises(IndexError):
            pages[-1]

    def test_invalid_page_sets(self) -> None:
        with self.assertRaises(ValueError):
            PageSet(name="", count=2)
        with self.assertRaises(ValueError):
            PageSet(name="index", count=0)

    def test_context_carries_page_set(self) -> None:
        pages = PageSet(name="index", count=2)
        context = RenderContext(page_key="index_2", page_number=3, year=2025, page_set=pages[1])
        self.assertEqual(context.page_set.label, "2 of 2")
        self.assertTrue(context.page_set.is_last)


class DestinationTests(unittest.TestCase):
    def test_week_destination(self) -> None:
        self.assertEqual(week_destination(17), "week_17")
        with self.assertRaises(ValueError):
            week_destination(0)

    def test_day_destination_round_trip(self) -> None:
        self.assertEqual(day_destination(date(2025, 3, 7)), "day_20250307")
        self.assertEqual(parse_day_destination("day_20250307"), date(2025, 3, 7))
        self.assertIsNone(parse_day_destination("day_20250231"))
        self.assertIsNone(parse_day_destination("week_5"))

    def test_collection_destination(self) -> None:
        self.assertEqual(collection_destination("books-2025"), "collection_books-2025")
        with self.assertRaises(ValueError):
            collection_destination("bad id")


if __name__ == "__main__":
    unittest.main()
