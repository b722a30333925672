"""Drawing backends: the primitive protocol, ReportLab output and a recorder."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol

from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen import canvas


class DrawingPrimitives(Protocol):
    """Backend-agnostic drawing primitives used by renderers."""

    def set_fill_color(self, color: Any) -> None: ...
    def set_stroke_color(self, color: Any) -> None: ...
    def set_fill_alpha(self, alpha: float) -> None: ...
    def set_stroke_alpha(self, alpha: float) -> None: ...
    def set_line_width(self, width: float) -> None: ...
    def set_dash(self, pattern: tuple[float, ...] | None) -> None: ...
    def set_font(self, font_name: str, size: float) -> None: ...
    def string_width(self, text: str, font_name: str, size: float) -> float: ...
    def draw_string(self, x: float, y: float, text: str) -> None: ...
    def draw_centred_string(self, x: float, y: float, text: str) -> None: ...
    def draw_right_string(self, x: float, y: float, text: str) -> None: ...
    def line(self, x1: float, y1: float, x2: float, y2: float) -> None: ...
    def rect(
        self, x: float, y: float, width: float, height: float, *, fill: int = 0, stroke: int = 1
    ) -> None: ...
    def round_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        radius: float,
        *,
        fill: int = 0,
        stroke: int = 1,
    ) -> None: ...
    def circle(
        self, x: float, y: float, radius: float, *, fill: int = 0, stroke: int = 1
    ) -> None: ...
    def link_rect(self, destination: str, rect: tuple[float, float, float, float]) -> None: ...
    def bookmark_page(self, key: str) -> None: ...
    def add_outline_entry(self, title: str, key: str, *, level: int) -> None: ...
    def begin_form(self, name: str) -> None: ...
    def end_form(self) -> None: ...
    def do_form(self, name: str) -> None: ...
    def save_state(self) -> None: ...
    def restore_state(self) -> None: ...
    def translate(self, x: float, y: float) -> None: ...
    def rotate(self, angle: float) -> None: ...
    def set_title(self, title: str) -> None: ...
    def show_page(self) -> None: ...
    def save(self) -> None: ...


PRIMITIVE_NAMES = frozenset(
    name
    for name, value in vars(DrawingPrimitives).items()
    if callable(value) and not name.startswith("_")
)

# Primitives that map one-to-one onto a ReportLab canvas method.
_REPORTLAB_METHODS = {
    "set_fill_color": "setFillColor",
    "set_stroke_color": "setStrokeColor",
    "set_fill_alpha": "setFillAlpha",
    "set_stroke_alpha": "setStrokeAlpha",
    "set_line_width": "setLineWidth",
    "set_font": "setFont",
    "string_width": "stringWidth",
    "draw_string": "drawString",
    "draw_centred_string": "drawCentredString",
    "draw_right_string": "drawRightString",
    "line": "line",
    "rect": "rect",
    "round_rect": "roundRect",
    "circle": "circle",
    "bookmark_page": "bookmarkPage",
    "add_outline_entry": "addOutlineEntry",
    "begin_form": "beginForm",
    "end_form": "endForm",
    "do_form": "doForm",
    "save_state": "saveState",
    "restore_state": "restoreState",
    "translate": "translate",
    "rotate": "rotate",
    "set_title": "setTitle",
    "show_page": "showPage",
    "save": "save",
}


class ReportLabPrimitives:
    """ReportLab-backed implementation of DrawingPrimitives."""

    def __init__(self, target: canvas.Canvas) -> None:
        self._target = target

    def __getattr__(self, name: str) -> Callable[..., Any]:
        try:
            method_name = _REPORTLAB_METHODS[name]
        except KeyError:
            raise AttributeError(name) from None
        return getattr(self._target, method_name)

    def set_dash(self, pattern: tuple[float, ...] | None) -> None:
        self._target.setDash(list(pattern or ()), 0)

    def link_rect(self, destination: str, rect: tuple[float, float, float, float]) -> None:
        self._target.linkRect("", destination, rect, thickness=0)


def create_reportlab_primitives(
    output_path: str,
    *,
    pagesize: tuple[float, float],
) -> ReportLabPrimitives:
    """Create a ReportLab-backed primitives renderer."""
    return ReportLabPrimitives(canvas.Canvas(output_path, pagesize=pagesize))


@dataclass(frozen=True)
class DrawCall:
    """One recorded backend call."""

    name: str
    args: tuple[Any, ...] = ()
    kwargs: dict[str, Any] = field(default_factory=dict)


_TEXT_CALLS = frozenset({"draw_string", "draw_centred_string", "draw_right_string"})


class RecordingPrimitives:
    """In-memory DrawingPrimitives that records calls instead of drawing.

    Used for dry runs and for inspecting what a component emitted. Text
    widths come from ReportLab's font metrics so layout decisions match the
    PDF backend.
    """

    def __init__(self) -> None:
        self.calls: list[DrawCall] = []
        self.pages = 0
        self.saved = False

    def __getattr__(self, name: str) -> Callable[..., None]:
        if name not in PRIMITIVE_NAMES:
            raise AttributeError(name)

        def record(*args: Any, **kwargs: Any) -> None:
            self.calls.append(DrawCall(name=name, args=args, kwargs=kwargs))

        return record

    def string_width(self, text: str, font_name: str, size: float) -> float:
        return stringWidth(text, font_name, size)

    def show_page(self) -> None:
        self.calls.append(DrawCall(name="show_page"))
        self.pages += 1

    def save(self) -> None:
        self.calls.append(DrawCall(name="save"))
        self.saved = True

    def calls_named(self, name: str) -> list[DrawCall]:
        return [call for call in self.calls if call.name == name]

    def links(self) -> list[tuple[str, tuple[float, float, float, float]]]:
        return [(call.args[0], call.args[1]) for call in self.calls_named("link_rect")]

    def link_destinations(self) -> list[str]:
        return [destination for destination, _ in self.links()]

    def texts(self) -> list[str]:
        return [call.args[2] for call in self.calls if call.name in _TEXT_CALLS]

    def clear(self) -> None:
        self.calls.clear()
