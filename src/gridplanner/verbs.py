"""Verb registry: named drawing operations invoked with grid coordinates."""

from __future__ import annotations

import dataclasses
import functools
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from .canvas import Canvas


@dataclass(frozen=True)
class VerbSpec:
    """A named verb plus the renderer class that implements it."""

    name: str
    verb: Callable[..., None]
    renderer: type
    description: str = ""

    def option_names(self) -> tuple[str, ...] | None:
        """Return the renderer's field names, or None when it declares none."""
        if not dataclasses.is_dataclass(self.renderer):
            return None
        return tuple(
            item.name for item in dataclasses.fields(self.renderer) if item.name != "canvas"
        )

    def invoke(self, canvas: Canvas, *args: Any, **options: Any) -> None:
        supported = self.option_names()
        if supported is not None:
            check_options(f"verb '{self.name}'", options, supported)
        self.verb(canvas, *args, **options)


def check_options(owner: str, options: dict[str, Any], supported: Iterable[str]) -> None:
    """Reject option names that ``owner`` does not understand."""
    allowed = set(supported)
    unknown = sorted(name for name in options if name not in allowed)
    if unknown:
        valid = ", ".join(sorted(allowed)) or "none"
        msg = f"unknown option(s) for {owner}: {', '.join(unknown)}. Supported options: {valid}."
        raise ValueError(msg)


@dataclass
class VerbRegistry:
    """In-memory registry of verbs; names are unique across all components."""

    _specs: dict[str, VerbSpec] = field(default_factory=dict)

    def register(self, spec: VerbSpec) -> None:
        name = spec.name.strip()
        if not name:
            msg = "verb name cannot be empty."
            raise ValueError(msg)
        if not name.isidentifier():
            msg = f"verb name '{name}' must be a valid identifier."
            raise ValueError(msg)
        if name in self._specs:
            msg = f"verb '{name}' is already registered."
            raise ValueError(msg)
        self._specs[name] = spec

    def register_many(self, specs: Iterable[VerbSpec]) -> None:
        for spec in specs:
            self.register(spec)

    def get(self, name: str) -> VerbSpec:
        if name not in self._specs:
            valid = ", ".join(sorted(self._specs))
            msg = f"unknown verb '{name}'. Valid verbs: {valid}."
            raise ValueError(msg)
        return self._specs[name]

    def names(self) -> tuple[str, ...]:
        return tuple(self._specs)

    def __contains__(self, name: object) -> bool:
        return name in self._specs

    def bind(self, canvas: Canvas) -> VerbNamespace:
        return VerbNamespace(registry=self, canvas=canvas)


@dataclass(frozen=True)
class VerbNamespace:
    """Registry verbs bound to one canvas: ``verbs.box(2, 5, 10, 3)``."""

    registry: VerbRegistry
    canvas: Canvas

    def __getattr__(self, name: str) -> Callable[..., None]:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            spec = self.registry.get(name)
        except ValueError as exc:
            raise AttributeError(str(exc)) from exc
        return functools.partial(spec.invoke, self.canvas)

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self.registry.names()))

    def call(self, name: str, *args: Any, **options: Any) -> None:
        self.registry.get(name).invoke(self.canvas, *args, **options)
