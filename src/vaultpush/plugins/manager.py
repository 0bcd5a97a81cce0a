"""Load push extensions and fan events out to them.

Extensions come from two places: the ``vaultpush.plugins`` entry-point
group of installed distributions, and ``*.py`` files in the vault's local
plugin directory. Each class carrying ``@hookimpl`` methods is instantiated
once and registered as ``<source>:<ClassName>``.
"""

from __future__ import annotations

import importlib.util
import inspect
import logging
import sys
from importlib.metadata import entry_points
from pathlib import Path
from types import ModuleType
from typing import Any

import pluggy

from vaultpush.plugins.hookspecs import PROJECT_NAME, PushEvents

ENTRY_POINT_GROUP = "vaultpush.plugins"

logger = logging.getLogger(__name__)


class PushHooks:
    """A pluggy manager restricted to the push events."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(PushEvents)

    def load(self, local_dir: Path | None = None) -> list[str]:
        """Register installed and local extensions; return all names."""
        for ep in entry_points(group=ENTRY_POINT_GROUP):
            try:
                target = ep.load()
            except Exception:
                logger.warning("Cannot import extension %s", ep.value, exc_info=True)
                continue
            self._register_object(target, ep.name)

        if local_dir is not None and local_dir.is_dir():
            for path in sorted(local_dir.glob("*.py")):
                if not path.name.startswith("_"):
                    self._load_file(path)
        return self.names()

    def register(self, plugin: object, name: str) -> None:
        self._pm.register(plugin, name=name)
        logger.debug("Registered extension %s", name)

    def names(self) -> list[str]:
        return [name for name, _plugin in self._pm.list_name_plugin()]

    def notify(self, event: str, **payload: Any) -> list[str]:
        """Call every implementation of *event*; return one warning per failure."""
        caller = getattr(self._pm.hook, event)
        warnings: list[str] = []
        for impl in caller.get_hookimpls():
            try:
                impl.function(**{arg: payload[arg] for arg in impl.argnames})
            except Exception:
                logger.warning("Extension %s failed on %s", impl.plugin_name, event, exc_info=True)
                warnings.append(f"Plugin {impl.plugin_name} failed on {event}")
        return warnings

    def _load_file(self, path: Path) -> None:
        module_name = f"_vaultpush_ext_{path.stem}"
        try:
            spec = importlib.util.spec_from_file_location(module_name, path)
            if spec is None or spec.loader is None:
                raise ImportError(f"no loader for {path}")
            module = importlib.util.module_from_spec(spec)
            sys.modules[module_name] = module
            spec.loader.exec_module(module)
        except Exception:
            sys.modules.pop(module_name, None)
            logger.warning("Cannot load extension file %s", path, exc_info=True)
            return
        for cls in self._hook_classes(module):
            self._register_object(cls, f"{path.stem}:{cls.__name__}")

    def _hook_classes(self, module: ModuleType) -> list[type]:
        return [
            cls
            for _name, cls in inspect.getmembers(module, inspect.isclass)
            if cls.__module__ == module.__name__ and self._implements_hooks(cls)
        ]

    def _implements_hooks(self, cls: type) -> bool:
        return any(self._pm.parse_hookimpl_opts(cls, attr) for attr in dir(cls))

    def _register_object(self, target: Any, name: str) -> None:
        """Register *target*, instantiating it first when it is a class."""
        try:
            plugin = target() if inspect.isclass(target) else target
            self.register(plugin, name)
        except Exception:
            logger.warning("Cannot register extension %s", name, exc_info=True)
