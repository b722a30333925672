"""Built-in drawing verbs."""

from ..verbs import VerbRegistry, VerbSpec
from .calendar import MiniMonth, mini_month
from .navigation import (
    LinkBox,
    MonthSidebar,
    NavigationTab,
    ResolvedTab,
    RightSidebar,
    WeekSidebar,
    link_box,
    month_sidebar,
    resolve_tab,
    resolve_tabs,
    right_sidebar,
    week_sidebar,
)
from .primitives import (
    Box,
    EraseDots,
    GridDots,
    HLine,
    VLine,
    box,
    erase_dots,
    grid_dots,
    hline,
    vline,
)
from .ruled import Fieldset, RuledLines, fieldset, ruled_lines
from .text import H1, H2, Text, h1, h2, text

BUILTIN_VERBS = (
    VerbSpec("box", box, Box, "Rectangle over whole boxes."),
    VerbSpec("hline", hline, HLine, "Horizontal rule."),
    VerbSpec("vline", vline, VLine, "Vertical rule."),
    VerbSpec("grid_dots", grid_dots, GridDots, "Dots on grid intersections."),
    VerbSpec("erase_dots", erase_dots, EraseDots, "Cover dots with the background."),
    VerbSpec("text", text, Text, "Single line of text."),
    VerbSpec("h1", h1, H1, "Section heading."),
    VerbSpec("h2", h2, H2, "Page title."),
    VerbSpec("ruled_lines", ruled_lines, RuledLines, "Writing lines over the dot grid."),
    VerbSpec("fieldset", fieldset, Fieldset, "Frame with a legend."),
    VerbSpec("mini_month", mini_month, MiniMonth, "Compact month calendar."),
    VerbSpec("link_box", link_box, LinkBox, "Labelled navigation box."),
    VerbSpec("week_sidebar", week_sidebar, WeekSidebar, "Week navigation column."),
    VerbSpec("month_sidebar", month_sidebar, MonthSidebar, "Month navigation column."),
    VerbSpec("right_sidebar", right_sidebar, RightSidebar, "Rotated navigation tabs."),
)


def build_verb_registry() -> VerbRegistry:
    """Return a fresh registry holding every built-in verb."""
    registry = VerbRegistry()
    registry.register_many(BUILTIN_VERBS)
    return registry


__all__ = [
    "BUILTIN_VERBS",
    "H1",
    "H2",
    "Box",
    "EraseDots",
    "Fieldset",
    "GridDots",
    "HLine",
    "LinkBox",
    "MiniMonth",
    "MonthSidebar",
    "NavigationTab",
    "ResolvedTab",
    "RightSidebar",
    "RuledLines",
    "Text",
    "VLine",
    "WeekSidebar",
    "build_verb_registry",
    "resolve_tab",
    "resolve_tabs",
]
