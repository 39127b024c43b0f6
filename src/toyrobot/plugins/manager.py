"""Plugin discovery and command collection.

Discovery: ``toyrobot.plugins`` entry points via pluggy, plus plugins
registered directly with :meth:`PluginManager.register_plugin`.
"""

from __future__ import annotations

import inspect
import logging

import pluggy

from toyrobot.commands.registry import Command
from toyrobot.plugins.hookspecs import PROJECT_NAME, ToyRobotHookSpec

ENTRY_POINT_GROUP = "toyrobot.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Loads plugins and gathers the commands they contribute."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(ToyRobotHookSpec)

    def discover_and_load(self) -> list[str]:
        """Load entry-point plugins; return the names of all registered plugins."""
        count = self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        logger.debug("Loaded %d entry-point plugin(s)", count)
        self._instantiate_classes()
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        self._pm.unregister(plugin)

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def collect_commands(self) -> list[Command]:
        """Gather commands from every plugin, skipping broken contributions."""
        commands: list[Command] = []
        for plugin in self._pm.get_plugins():
            plugin_name = self._pm.get_name(plugin) or plugin.__class__.__name__
            hook = getattr(plugin, "register_commands", None)
            if hook is None:
                continue
            try:
                contributed = hook()
            except Exception:
                logger.warning(
                    "Failed to collect commands from plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue
            if contributed is None:
                continue
            for command in contributed:
                if not isinstance(command, Command):
                    logger.warning(
                        "Plugin %s returned a non-Command entry: %r",
                        plugin_name,
                        command,
                    )
                    continue
                commands.append(command)
        return commands

    def _instantiate_classes(self) -> None:
        """Replace plugin classes registered by entry points with instances.

        Hook calls against a class object leave ``self`` unbound.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
                continue
            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)
            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue
            self._pm.register(instance, name=plugin_name)
