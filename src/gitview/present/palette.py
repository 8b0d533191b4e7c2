"""Colour tables shared by the presentation helpers.

Values are CSS colours or Tailwind class names; the rendering layer decides
how to apply them.
"""

# =============================================================================
# Activity heatmap (commit counts)
# =============================================================================

HEAT_EMPTY = "var(--muted)"
HEAT_LOW = "#bbf7d0"
HEAT_MEDIUM = "#4ade80"
HEAT_HIGH = "#16a34a"
HEAT_MAX = "#166534"

# =============================================================================
# Blame view
# =============================================================================

AUTHOR_COLORS: tuple[str, ...] = (
    "bg-blue-500",
    "bg-green-500",
    "bg-purple-500",
    "bg-orange-500",
    "bg-pink-500",
    "bg-teal-500",
    "bg-red-500",
    "bg-yellow-500",
    "bg-indigo-500",
    "bg-cyan-500",
    "bg-lime-500",
    "bg-amber-500",
)

BLAME_AGE_UNIFORM = "bg-blue-400/30"
"""All lines share one timestamp, so age carries no information."""

BLAME_AGE_NEWEST = "bg-red-400/40"
BLAME_AGE_RECENT = "bg-orange-400/35"
BLAME_AGE_MIDDLE = "bg-yellow-400/30"
BLAME_AGE_OLDER = "bg-green-400/25"
BLAME_AGE_OLDEST = "bg-blue-400/20"

# =============================================================================
# Commit graph
# =============================================================================

LANE_COLORS: tuple[str, ...] = (
    "#4CAF50",  # Green
    "#2196F3",  # Blue
    "#FF9800",  # Orange
    "#9C27B0",  # Purple
    "#F44336",  # Red
    "#00BCD4",  # Cyan
    "#E91E63",  # Pink
    "#795548",  # Brown
)

# =============================================================================
# File status
# =============================================================================

STATUS_COLOR_UNTRACKED = "text-muted-foreground"
STATUS_COLOR_ADDED = "text-green-600"
STATUS_COLOR_DELETED = "text-red-600"
STATUS_COLOR_CHANGED = "text-yellow-600"
