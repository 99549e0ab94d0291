from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Point:
    x: float
    y: float


@dataclass
class FrameData:
    timestamp: float
    # latest pointer position (surface coords), None unless it moved since the previous frame
    pointer: Optional[Point] = None
    # click / tap-release positions delivered since the previous frame, oldest first
    confirms: List[Point] = field(default_factory=list)
