"""
Pydantic data models for overlay placement and dial geometry.
"""
from __future__ import annotations
from pydantic import BaseModel, Field
from typing import Optional, Tuple

Point = Tuple[int, int]

class Region(BaseModel):
    """Rectangle in pixel coordinates (top-left origin)."""
    x: int
    y: int
    width: int = Field(gt=0)
    height: int = Field(gt=0)

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def fits(self, frame_width: int, frame_height: int) -> bool:
        return self.x >= 0 and self.y >= 0 and self.right <= frame_width and self.bottom <= frame_height

    def slices(self) -> tuple[slice, slice]:
        """(rows, cols) slices for indexing an HxWxC array."""
        return slice(self.y, self.bottom), slice(self.x, self.right)

class OverlaySlot(BaseModel):
    """
    A named overlay position, stacked relative to earlier slots.

    above: name of the slot this one sits on top of (adds its rows offset + height)
    left_of: name of the slot this one sits beside (adds its cols offset + width)
    """
    name: str
    opacity: float = Field(ge=0.0, le=1.0)
    above: Optional[str] = None
    left_of: Optional[str] = None

class PlacedOverlay(BaseModel):
    slot: OverlaySlot
    region: Region
    last_cols: int = 0
    last_rows: int = 0

class DialTick(BaseModel):
    angle: int
    inner: Point
    outer: Point
    label_pos: Optional[Point] = None
