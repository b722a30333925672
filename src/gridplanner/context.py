"""Per-page render context and numbered page sets."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field, fields
from datetime import date
from enum import Enum
from types import MappingProxyType
from typing import Any

WEEK_PAGE_PREFIX = "week_"


def canonical_key(key: object) -> str:
    """Return the string form used to compare page keys and destinations."""
    if isinstance(key, Enum):
        key = key.value
    return str(key)


@dataclass(frozen=True)
class PageSetContext:
    """Position of one page inside a numbered page set."""

    index: int
    count: int
    label: str
    name: str = ""

    @property
    def page(self) -> int:
        return self.index + 1

    @property
    def is_first(self) -> bool:
        return self.index == 0

    @property
    def is_last(self) -> bool:
        return self.index == self.count - 1


@dataclass(frozen=True)
class PageSet:
    """A run of related pages such as "Index 1 of 2"."""

    name: str
    count: int
    label_pattern: str = "%page of %total"

    def __post_init__(self) -> None:
        if not self.name.strip():
            msg = "page set name cannot be empty."
            raise ValueError(msg)
        if self.count < 1:
            msg = f"page set '{self.name}' needs at least one page."
            raise ValueError(msg)

    def __len__(self) -> int:
        return self.count

    def __getitem__(self, index: int) -> PageSetContext:
        if not 0 <= index < self.count:
            msg = f"page set '{self.name}' has {self.count} pages; index {index} is out of range."
            raise IndexError(msg)
        return PageSetContext(
            index=index,
            count=self.count,
            label=self.label_for(index),
            name=self.name,
        )

    def __iter__(self) -> Iterator[PageSetContext]:
        for index in range(self.count):
            yield self[index]

    def label_for(self, index: int) -> str:
        return self.label_pattern.replace("%page", str(index + 1)).replace(
            "%total", str(self.count)
        )

    def destination_for(self, index: int) -> str:
        return f"{self.name}_{self[index].page}"

    def destinations(self) -> tuple[str, ...]:
        return tuple(self.destination_for(index) for index in range(self.count))


@dataclass(frozen=True)
class RenderContext:
    """Immutable identity and metadata for the page being rendered."""

    page_key: str
    page_number: int
    year: int
    week_num: int | None = None
    week_start: date | None = None
    week_end: date | None = None
    total_weeks: int | None = None
    total_pages: int | None = None
    page_set: PageSetContext | None = None
    extras: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        key = canonical_key(self.page_key)
        if not key.strip():
            msg = "page_key cannot be empty."
            raise ValueError(msg)
        if self.page_number < 1:
            msg = f"page_number must be >= 1, got {self.page_number}."
            raise ValueError(msg)
        shadowed = sorted(name for name in self.extras if name in _FIELD_NAMES)
        if shadowed:
            msg = f"extra field(s) shadow context fields: {', '.join(shadowed)}."
            raise ValueError(msg)
        object.__setattr__(self, "page_key", key)
        object.__setattr__(self, "extras", MappingProxyType(dict(self.extras)))

    def is_current_page(self, key: object) -> bool:
        return canonical_key(key) == self.page_key

    @property
    def destination(self) -> str:
        return self.page_key

    @property
    def is_weekly_page(self) -> bool:
        return self.week_num is not None or self.page_key.startswith(WEEK_PAGE_PREFIX)

    def __getitem__(self, key: str) -> Any:
        if key in _FIELD_NAMES and key != "extras":
            return getattr(self, key)
        return self.extras[key]

    def __contains__(self, key: object) -> bool:
        return (key in _FIELD_NAMES and key != "extras") or key in self.extras

    def get(self, key: str, default: Any = None) -> Any:
        try:
            return self[key]
        except KeyError:
            return default

    def to_dict(self) -> dict[str, Any]:
        data = {name: getattr(self, name) for name in _FIELD_NAMES if name != "extras"}
        data.update(self.extras)
        return data


_FIELD_NAMES = frozenset(item.name for item in fields(RenderContext))
