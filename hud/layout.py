"""
Overlay layout: an ordered list of named slots stacked from the bottom-right corner.

Each slot's offsets come from the slots it references:
- above=<name>:   last_rows = that slot's last_rows + its height
- left_of=<name>: last_cols = that slot's last_cols + its width
"""
from __future__ import annotations
import logging
from typing import Dict, List, Mapping, Sequence

from hud.blend import anchored_region
from hud.config import Settings
from hud.models import OverlaySlot, PlacedOverlay

logger = logging.getLogger(__name__)

MISSION_PLAN = "mission_plan"
FLIGHT_DIRECTOR = "flight_director"
HISTOGRAM = "histogram"


class LayoutError(ValueError):
    """Slot references an unknown slot, or a placed region leaves the frame."""


def default_slots(settings: Settings) -> List[OverlaySlot]:
    """Mission plan at the corner, flight director above it, histogram left of the flight director."""
    return [
        OverlaySlot(name=MISSION_PLAN, opacity=settings.MISSION_PLAN_OPACITY),
        OverlaySlot(name=FLIGHT_DIRECTOR, opacity=settings.FLIGHT_DIRECTOR_OPACITY,
                    above=MISSION_PLAN),
        OverlaySlot(name=HISTOGRAM, opacity=settings.HISTOGRAM_OPACITY,
                    above=MISSION_PLAN, left_of=FLIGHT_DIRECTOR),
    ]


def plan_layout(frame_shape: Sequence[int],
                slots: Sequence[OverlaySlot],
                sizes: Mapping[str, Sequence[int]],
                strict: bool = True) -> List[PlacedOverlay]:
    """
    Resolve slots (in order) to concrete regions.

    Args:
        frame_shape: destination shape (H, W[, C])
        slots: ordered slots; references must point to earlier slots
        sizes: slot name -> overlay shape (h, w[, C])
        strict: raise LayoutError when a region falls outside the frame

    Returns:
        Placed overlays in blend order.
    """
    placed: Dict[str, PlacedOverlay] = {}
    H, W = int(frame_shape[0]), int(frame_shape[1])

    for slot in slots:
        if slot.name in placed:
            raise LayoutError(f"duplicate slot name '{slot.name}'")
        if slot.name not in sizes:
            raise LayoutError(f"no overlay size for slot '{slot.name}'")
        last_rows = 0
        last_cols = 0
        if slot.above is not None:
            below = placed.get(slot.above)
            if below is None:
                raise LayoutError(f"slot '{slot.name}' stacks above unknown slot '{slot.above}'")
            last_rows = below.last_rows + below.region.height
        if slot.left_of is not None:
            beside = placed.get(slot.left_of)
            if beside is None:
                raise LayoutError(f"slot '{slot.name}' sits left of unknown slot '{slot.left_of}'")
            last_cols = beside.last_cols + beside.region.width

        region = anchored_region(frame_shape, sizes[slot.name], last_cols, last_rows)
        if strict and not region.fits(W, H):
            raise LayoutError(
                f"slot '{slot.name}' at x={region.x} y={region.y} "
                f"({region.width}x{region.height}) does not fit {W}x{H}"
            )
        logger.debug(f"[layout] {slot.name} -> x={region.x} y={region.y} w={region.width} h={region.height}")
        placed[slot.name] = PlacedOverlay(slot=slot, region=region, last_cols=last_cols, last_rows=last_rows)

    return list(placed.values())
