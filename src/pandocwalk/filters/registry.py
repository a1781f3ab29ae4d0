#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/pandocwalk/filters/registry.py
"""Filter registry for built-in and plugin filter discovery.

Built-in filters are registered on first access. Third-party filters are
discovered from the ``pandocwalk.filters`` entry point group; an entry point
may resolve to a ``FilterMetadata`` or to a plain action factory.

Examples
--------
Get an action:

    >>> from pandocwalk.filters import filter_registry
    >>> action = filter_registry.get_action("leanpub", default_format="html")

List all filters:

    >>> for name in filter_registry.list_filters():
    ...     print(name, "-", filter_registry.get_metadata(name).description)

"""

from __future__ import annotations

import importlib.metadata
import logging
from typing import Any, Optional

from pandocwalk.ast.nodes import Action
from pandocwalk.constants import FILTER_ENTRY_POINT_GROUP
from pandocwalk.filters.metadata import FilterMetadata

logger = logging.getLogger(__name__)


class FilterRegistry:
    """Singleton registry of named filters.

    The preferred way to access the registry is the global
    ``filter_registry`` instance.

    """

    _instance: Optional[FilterRegistry] = None
    _filters: dict[str, FilterMetadata]
    _initialized: bool

    def __new__(cls) -> FilterRegistry:
        """Create or return singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._filters = {}
            cls._instance._initialized = False
        return cls._instance

    def _ensure_initialized(self) -> None:
        """Register built-ins and run plugin discovery once."""
        if not self._initialized:
            self._initialized = True
            self._register_builtins()
            self.discover_plugins()

    def _register_builtins(self) -> None:
        from pandocwalk.filters._builtin_metadata import BUILTIN_FILTERS

        for metadata in BUILTIN_FILTERS:
            self.register(metadata)

    def register(self, metadata: FilterMetadata) -> None:
        """Register a filter with its metadata.

        If a filter with the same name is already registered, it is
        overwritten and a warning is logged.

        """
        if metadata.name in self._filters:
            logger.warning(f"Filter '{metadata.name}' already registered, overwriting")

        self._filters[metadata.name] = metadata
        logger.debug(f"Registered filter: {metadata.name}")

    def unregister(self, name: str) -> bool:
        """Unregister a filter.

        Returns
        -------
        bool
            True if filter was unregistered, False if not found

        """
        if name in self._filters:
            del self._filters[name]
            logger.debug(f"Unregistered filter: {name}")
            return True
        return False

    def get_metadata(self, name: str) -> FilterMetadata:
        """Get metadata for a filter.

        Raises
        ------
        KeyError
            If filter is not registered

        """
        self._ensure_initialized()

        if name not in self._filters:
            raise KeyError(f"Filter '{name}' not registered")

        return self._filters[name]

    def get_action(self, name: str, **kwargs: Any) -> Action:
        """Build the action of a filter by name.

        Parameters
        ----------
        name : str
            Filter name
        **kwargs
            Options passed to the filter factory

        Raises
        ------
        KeyError
            If filter is not registered
        ValueError
            If options are invalid

        """
        metadata = self.get_metadata(name)
        return metadata.create_action(**kwargs)

    def has_filter(self, name: str) -> bool:
        """Check if a filter is registered."""
        self._ensure_initialized()
        return name in self._filters

    def list_filters(self, tags: Optional[list[str]] = None) -> list[str]:
        """List registered filter names, sorted alphabetically.

        Parameters
        ----------
        tags : list[str], optional
            Only return filters with at least one of these tags

        """
        self._ensure_initialized()

        if tags is None:
            return sorted(self._filters.keys())

        return sorted(name for name, metadata in self._filters.items() if any(tag in metadata.tags for tag in tags))

    def discover_plugins(self) -> int:
        """Discover and register filters from entry points.

        Returns
        -------
        int
            Number of filters discovered and registered

        """
        discovered_count = 0

        for ep in importlib.metadata.entry_points().select(group=FILTER_ENTRY_POINT_GROUP):
            try:
                loaded = ep.load()
            except Exception as e:
                logger.warning(f"Failed to load filter entry point '{ep.name}': {e}")
                continue

            if isinstance(loaded, FilterMetadata):
                metadata = loaded
            elif callable(loaded):
                metadata = FilterMetadata(name=ep.name, description=loaded.__doc__ or "", factory=loaded)
            else:
                logger.warning(f"Entry point '{ep.name}' is neither FilterMetadata nor callable, skipping")
                continue

            self.register(metadata)
            discovered_count += 1
            logger.debug(f"Discovered filter from entry point: {ep.name}")

        logger.debug(f"Discovered {discovered_count} filter(s) from entry points")
        return discovered_count

    def clear(self) -> None:
        """Clear all registered filters.

        This is primarily useful for testing; built-ins are registered again
        on next access.

        """
        self._filters.clear()
        self._initialized = False
        logger.debug("Cleared filter registry")


# Global registry instance (preferred access pattern)
filter_registry = FilterRegistry()

__all__ = [
    "FilterRegistry",
    "filter_registry",
]
