#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/pandocwalk/filters/metadata.py
"""Metadata classes for filter registration.

A filter is published as a ``FilterMetadata`` describing its name, what it
does, and the factory that builds its action. Third-party packages expose
one through the ``pandocwalk.filters`` entry point group.

Examples
--------
Define a filter with metadata:

    >>> from pandocwalk.filters import FilterMetadata, ParameterSpec
    >>>
    >>> def make_action(prefix: str = "> "):
    ...     def action(key, value, format, meta):
    ...         if key == "Str":
    ...             return prefix + value
    ...     return action
    >>>
    >>> METADATA = FilterMetadata(
    ...     name="prefix",
    ...     description="Prefix every word",
    ...     factory=make_action,
    ...     parameters={"prefix": ParameterSpec(type=str, default="> ", help="Text to prepend")},
    ... )

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Type

from pandocwalk.ast.nodes import Action

logger = logging.getLogger(__name__)


@dataclass
class ParameterSpec:
    """Specification for a filter parameter.

    Parameters
    ----------
    type : type
        Python type of the parameter (e.g., int, str, bool)
    default : Any, optional
        Default value if parameter is not provided
    help : str, optional
        Help text describing the parameter
    choices : list, optional
        List of valid choices for this parameter

    """

    type: Type
    default: Any = None
    help: str = ""
    choices: Optional[list[Any]] = None

    def validate(self, value: Any) -> bool:
        """Validate a parameter value.

        Raises
        ------
        ValueError
            If value has the wrong type or is not one of the choices

        """
        # bool is an int subclass, reject it explicitly for int parameters
        if not isinstance(value, self.type) or (self.type is int and isinstance(value, bool)):
            raise ValueError(f"Expected type {self.type.__name__}, got {type(value).__name__}")

        if self.choices is not None and value not in self.choices:
            raise ValueError(f"Value must be one of {self.choices}, got {value}")

        return True


@dataclass
class FilterMetadata:
    """Metadata for a filter.

    Parameters
    ----------
    name : str
        Unique identifier for the filter (e.g., "titlecase")
    description : str
        Human-readable description of what the filter does
    factory : callable
        Builds the filter action from keyword options
    parameters : dict[str, ParameterSpec], default = empty dict
        Keyword options accepted by the factory
    tags : list[str], default = empty list
        Tags for categorization

    """

    name: str
    description: str
    factory: Callable[..., Action]
    parameters: dict[str, ParameterSpec] = field(default_factory=dict)
    tags: list[str] = field(default_factory=list)

    def create_action(self, **kwargs: Any) -> Action:
        """Build the filter action with the given options.

        Unknown options are logged and ignored.

        Returns
        -------
        callable
            ``action(key, value, format, meta)``

        Raises
        ------
        ValueError
            If an option fails validation

        """
        validated_params = {}

        for param_name, param_spec in self.parameters.items():
            if param_name in kwargs:
                value = kwargs[param_name]
                try:
                    param_spec.validate(value)
                except ValueError as e:
                    raise ValueError(f"Invalid value for '{self.name}' option '{param_name}': {e}") from e
                validated_params[param_name] = value
            elif param_spec.default is not None:
                validated_params[param_name] = param_spec.default

        unknown_params = set(kwargs.keys()) - set(self.parameters.keys())
        if unknown_params:
            logger.warning(
                f"Filter '{self.name}' received unknown option(s): {', '.join(sorted(unknown_params))}. "
                f"These will be ignored. Valid options are: {', '.join(sorted(self.parameters.keys())) or 'none'}"
            )

        return self.factory(**validated_params)


__all__ = [
    "FilterMetadata",
    "ParameterSpec",
]
