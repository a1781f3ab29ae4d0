#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for pandocwalk.

Constants are organized by category:
1. Wire Format - Keys of the pandoc JSON node encoding
2. Configuration - Config file names and environment variables
3. Command Line - Exit codes and defaults
"""

from __future__ import annotations

# =============================================================================
# Wire Format
# =============================================================================

TAG_KEY = "t"
CONTENT_KEY = "c"

# Legacy array form: [{"unMeta": {...}}, block, ...]
LEGACY_META_KEY = "unMeta"

# Object form: {"pandoc-api-version": [...], "meta": {...}, "blocks": [...]}
META_KEY = "meta"
BLOCKS_KEY = "blocks"

# Characters escaped in serialized output so the JSON is safe to embed in HTML
HTML_UNSAFE_JSON_ESCAPES = {
    "<": "\\u003C",
    ">": "\\u003E",
    "&": "\\u0026",
}

# =============================================================================
# Configuration
# =============================================================================

CONFIG_FILENAMES = [".pandocwalk.toml", ".pandocwalk.yaml", ".pandocwalk.yml", ".pandocwalk.json"]
PYPROJECT_FILENAME = "pyproject.toml"
PYPROJECT_TOOL_SECTION = "pandocwalk"

ENV_CONFIG_PATH = "PANDOCWALK_CONFIG"

# Entry point group scanned for third-party filters
FILTER_ENTRY_POINT_GROUP = "pandocwalk.filters"

# =============================================================================
# Command Line
# =============================================================================

EXIT_SUCCESS = 0
EXIT_FILTER_ERROR = 1
EXIT_VALIDATION_ERROR = 2
EXIT_INPUT_ERROR = 3

DEFAULT_LOG_LEVEL = "WARNING"
