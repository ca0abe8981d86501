from __future__ import annotations
from dataclasses import dataclass, field
from typing import List


@dataclass
class Point:
    x: float
    y: float
    source: str = "mouse"


@dataclass
class FrameData:
    timestamp: int
    # discrete presses since the previous frame, in logical screen coords
    taps: List[Point] = field(default_factory=list)
