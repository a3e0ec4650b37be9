"""Planar line geometry: lines, interval regions and sub-lines."""

from .vector import Vector2D
from .intervals import DEFAULT_TOLERANCE, Interval, IntervalsSet, Location
from .line import Line
from .subline import Segment, SubLine

__all__ = [
    'Vector2D',
    'DEFAULT_TOLERANCE',
    'Interval',
    'IntervalsSet',
    'Location',
    'Line',
    'Segment',
    'SubLine'
]
