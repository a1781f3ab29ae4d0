#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/pandocwalk/filters/_builtin_metadata.py
"""Metadata definitions for built-in filters."""

from __future__ import annotations

from pandocwalk.filters import leanpub, manuscript, titlecase
from pandocwalk.filters.metadata import FilterMetadata, ParameterSpec

TITLECASE_METADATA = FilterMetadata(
    name="titlecase",
    description="Title-case every word of the document text",
    factory=titlecase.make_action,
    tags=["text"],
)

MANUSCRIPT_METADATA = FilterMetadata(
    name="manuscript",
    description="Manuscript format for fiction publishers: drop images, unlink links, capitalize chapter headers",
    factory=manuscript.make_action,
    parameters={
        "header_level": ParameterSpec(
            type=int,
            default=2,
            help="Level of the headers whose words are capitalized",
        ),
    },
    tags=["images", "links", "headers"],
)

LEANPUB_METADATA = FilterMetadata(
    name="leanpub",
    description="Emulate leanpub blocks (D>, E>, X>, I>, Q>, T>, W>) with raw latex, html or epub markup",
    factory=leanpub.make_action,
    parameters={
        "default_format": ParameterSpec(
            type=str,
            default="latex",
            help="Output format assumed when pandoc passes none",
        ),
    },
    tags=["blocks"],
)

BUILTIN_FILTERS = [
    TITLECASE_METADATA,
    MANUSCRIPT_METADATA,
    LEANPUB_METADATA,
]
