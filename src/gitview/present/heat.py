"""Bucketing of counts and ages into heat colours."""

from __future__ import annotations

from gitview.present import palette


def get_heat_color(count: int, max_count: int) -> str:
    """Colour for an activity-heatmap cell holding ``count`` commits."""
    if count == 0:
        return palette.HEAT_EMPTY
    ratio = count / max(max_count, 1)
    if ratio > 0.75:
        return palette.HEAT_MAX
    if ratio > 0.5:
        return palette.HEAT_HIGH
    if ratio > 0.25:
        return palette.HEAT_MEDIUM
    return palette.HEAT_LOW


def get_author_color(author_index: int) -> str:
    """Band colour for the n-th distinct author; wraps around the palette."""
    return palette.AUTHOR_COLORS[author_index % len(palette.AUTHOR_COLORS)]


def get_blame_age_color(timestamp: float, min_ts: float, max_ts: float) -> str:
    """Background for a blame line by its age between the oldest and newest."""
    if max_ts == min_ts:
        return palette.BLAME_AGE_UNIFORM
    ratio = (timestamp - min_ts) / (max_ts - min_ts)
    if ratio > 0.8:
        return palette.BLAME_AGE_NEWEST
    if ratio > 0.6:
        return palette.BLAME_AGE_RECENT
    if ratio > 0.4:
        return palette.BLAME_AGE_MIDDLE
    if ratio > 0.2:
        return palette.BLAME_AGE_OLDER
    return palette.BLAME_AGE_OLDEST


def get_lane_color(lane: int) -> str:
    return palette.LANE_COLORS[lane % len(palette.LANE_COLORS)]
