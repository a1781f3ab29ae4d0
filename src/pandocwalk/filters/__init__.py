#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/pandocwalk/filters/__init__.py
"""Built-in filters and the filter registry.

Each filter module exposes ``make_action(**options)``, returning an action
for the walk engine, and a ``main()`` console script that runs it as a
pandoc JSON filter.

Built-in filters:

- titlecase: title-case every word of the text
- manuscript: manuscript formatting for fiction publishers
- leanpub: leanpub block emulation

Third-party packages can add filters through the ``pandocwalk.filters``
entry point group:

.. code-block:: toml

    [project.entry-points."pandocwalk.filters"]
    shout = "my_package.filters:SHOUT_METADATA"

Examples
--------
    >>> from pandocwalk.filters import filter_registry
    >>> filter_registry.list_filters()
    ['leanpub', 'manuscript', 'titlecase']

"""

from __future__ import annotations

from pandocwalk.filters.metadata import FilterMetadata, ParameterSpec
from pandocwalk.filters.registry import FilterRegistry, filter_registry

__all__ = [
    "FilterMetadata",
    "FilterRegistry",
    "ParameterSpec",
    "filter_registry",
]
