"""Loading of verbs contributed by other packages."""

from __future__ import annotations

import functools
import importlib
import importlib.metadata
import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from types import ModuleType
from typing import Any

from .verbs import VerbRegistry

PLUGIN_API_VERSION = 1
DEFAULT_ENTRY_POINT_GROUP = "gridplanner.verbs"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PluginSource:
    """A plugin module or entry point waiting to be imported."""

    label: str
    load: Callable[[], Any]


def plugin_sources(
    module_paths: Iterable[str] = (),
    entry_point_group: str = DEFAULT_ENTRY_POINT_GROUP,
) -> list[PluginSource]:
    sources = [
        PluginSource(label=path, load=functools.partial(importlib.import_module, path))
        for path in module_paths
    ]
    sources.extend(
        PluginSource(label=f"{entry_point.name} ({entry_point.value})", load=entry_point.load)
        for entry_point in importlib.metadata.entry_points(group=entry_point_group)
    )
    return sources


def registration_hook(plugin: Any) -> Callable[[VerbRegistry], None]:
    """Return the callable that registers a plugin's verbs.

    A module must define ``register_verbs(registry)`` and may pin
    ``PLUGIN_API_VERSION``; an entry point may also name the function directly.
    """
    if not isinstance(plugin, ModuleType):
        if callable(plugin):
            return plugin
        msg = "plugin entry point must resolve to a module or callable."
        raise ValueError(msg)

    api_version = getattr(plugin, "PLUGIN_API_VERSION", PLUGIN_API_VERSION)
    if api_version != PLUGIN_API_VERSION:
        msg = (
            f"module '{plugin.__name__}' targets plugin API version {api_version}, "
            f"expected {PLUGIN_API_VERSION}."
        )
        raise ValueError(msg)
    hook = getattr(plugin, "register_verbs", None)
    if not callable(hook):
        msg = f"module '{plugin.__name__}' does not define register_verbs(registry)."
        raise ValueError(msg)
    return hook


def install_plugin(registry: VerbRegistry, source: PluginSource) -> tuple[str, ...]:
    """Register every verb of one plugin, or none of them if any clashes."""
    staged = VerbRegistry()
    registration_hook(source.load())(staged)
    for name in staged.names():
        if name in registry:
            msg = f"verb '{name}' is already registered."
            raise ValueError(msg)
    registry.register_many(staged.get(name) for name in staged.names())
    return staged.names()


def load_verb_plugins(
    *,
    registry: VerbRegistry,
    module_paths: Iterable[str] = (),
    entry_point_group: str = DEFAULT_ENTRY_POINT_GROUP,
) -> tuple[str, ...]:
    """Install plugins from modules and entry points; return one warning per failure."""
    warnings: list[str] = []
    for source in plugin_sources(module_paths, entry_point_group):
        try:
            names = install_plugin(registry, source)
        except Exception as exc:  # noqa: BLE001
            warnings.append(f"warning: failed to load verb plugin '{source.label}': {exc}")
            continue
        logger.debug("Loaded verb plugin %s: %s", source.label, ", ".join(names) or "no verbs")
    return tuple(warnings)
