"""Presentation lookups: heat buckets, palettes and status labels."""

from gitview.present.heat import (
    get_author_color,
    get_blame_age_color,
    get_heat_color,
    get_lane_color,
)
from gitview.present.status import get_status_color, get_status_label

__all__ = [
    "get_author_color",
    "get_blame_age_color",
    "get_heat_color",
    "get_lane_color",
    "get_status_color",
    "get_status_label",
]
