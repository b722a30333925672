"""Configuration constants for planner rendering."""

from reportlab.lib import colors

# US letter in points.
PAGE_WIDTH = 612
PAGE_HEIGHT = 792

# Dot grid: 14.17pt is roughly 5mm, giving a 43 x 55 grid on letter paper.
DOT_SPACING = 14.17
DOT_RADIUS = 0.5

# Sidebars
WEEK_SIDEBAR_WIDTH = 2
RIGHT_SIDEBAR_WIDTH = 1
SIDEBAR_START_ROW = 2
SIDEBAR_FONT_SIZE = 6
SIDEBAR_PADDING = 4.25
LINK_FILL_OPACITY = 0.2

# File output
DEFAULT_FILENAME_TEMPLATE = "planner_{year}.pdf"

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

MONTH_ABBREVIATIONS = tuple(name[:3] for name in MONTH_NAMES)

WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
WEEKDAY_INITIALS = ("M", "T", "W", "T", "F", "S", "S")


class Theme:
    """Color and font choices for rendering."""

    BACKGROUND = colors.HexColor("#FFFFFF")
    DOT_GRID = colors.HexColor("#CCCCCC")
    BORDERS = colors.HexColor("#E5E5E5")
    SECTION_HEADERS = colors.HexColor("#AAAAAA")
    WEEKEND_BG = colors.HexColor("#CCCCCC")

    TEXT_PRIMARY = colors.HexColor("#000000")
    TEXT_SECONDARY = colors.HexColor("#888888")

    FONT_HEADER = "Helvetica-Bold"
    FONT_REGULAR = "Helvetica"
    FONT_BOLD = "Helvetica-Bold"
