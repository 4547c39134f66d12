"""
Command Layout Constants Module

Centralized constants for the command block layout tool.

Usage:
    from cmdlayout.constants import DEFAULT_BOX_SIZE, COLOR_CONDITIONAL
"""

from typing import Tuple

# =============================================================================
# Chain Files
# =============================================================================

COMMENT_PREFIX = "#"
CONDITIONAL_PREFIX = "?"

# =============================================================================
# Placement Defaults
# =============================================================================

# Bounding box used when none is given (min inclusive, max exclusive)
DEFAULT_BOX_MIN = (0, 0, 0)
DEFAULT_BOX_SIZE = 16

# Primary, secondary, tertiary
DEFAULT_ORIENTATION = "+x+z+y"

# =============================================================================
# Preview Geometry
# =============================================================================

BLOCK_SIZE = 1.0
# Facing marker: a small box pushed against the face the block points to
MARKER_SIZE = 0.4
MARKER_DEPTH = 0.2

# =============================================================================
# Preview Colors (RGBA)
# =============================================================================

ColorTuple = Tuple[int, int, int, int]

COLOR_FIRST = (214, 124, 44, 255)        # Impulse block orange
COLOR_CHAIN = (74, 160, 120, 255)        # Chain block green
COLOR_CONDITIONAL = (60, 120, 200, 255)  # Conditional blue
COLOR_NOP = (160, 160, 160, 255)         # Filler gray
COLOR_MARKER = (30, 30, 30, 255)
