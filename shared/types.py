"""Shared type definitions for the donut chart project."""
from typing import NamedTuple

class Point(NamedTuple):
    x: float; y: float
