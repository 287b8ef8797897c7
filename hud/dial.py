"""
Dial gauge (0-120 degrees) drawn on an elliptical arc.
"""
from __future__ import annotations
import math
from typing import List, Tuple

import cv2
import numpy as np

from hud.models import DialTick, Point

# http://www.tydac.ch/color/
DIAL_COLOR = (110, 117, 63)
TICK_MARGIN = 15
LABEL_MARGIN = 20
MAX_ANGLE = 120
TICK_STEP = 10
LABEL_STEP = 30


def get_tick(theta: float, a: int, b: int, origin: Point, margin: int = TICK_MARGIN) -> Tuple[Point, Point]:
    """
    Points at angle `theta` (radians) on two ellipses:
    (a cos t, b sin t) and ((a+margin) cos t, (b+margin) sin t), offset by `origin`.
    """
    ox, oy = origin
    inner = (int(ox + a * math.cos(theta)), int(oy + b * math.sin(theta)))
    outer = (int(ox + (a + margin) * math.cos(theta)), int(oy + (b + margin) * math.sin(theta)))
    return inner, outer


def dial_ticks(origin: Point, a: int, b: int) -> List[DialTick]:
    """Tick geometry for 0..120 degrees every 10; labels every 30."""
    if a <= 0 or b <= 0:
        raise ValueError(f"dial radii must be positive, got a={a} b={b}")
    ox, oy = origin
    ticks: List[DialTick] = []
    for angle in range(0, MAX_ANGLE + 1, TICK_STEP):
        # negated so the arc sweeps upward on screen
        theta = math.radians(-angle)
        inner, outer = get_tick(theta, a, b, origin)
        label_pos = None
        if angle % LABEL_STEP == 0:
            label_pos = (int(ox + (a + LABEL_MARGIN) * math.cos(theta)),
                         int(oy + (b + LABEL_MARGIN) * math.sin(theta)))
        ticks.append(DialTick(angle=angle, inner=inner, outer=outer, label_pos=label_pos))
    return ticks


def embed_dial(dst: np.ndarray,
               origin: Point,
               a: int,
               b: int,
               indicator_angle: int = 60,
               color: Tuple[int, int, int] = DIAL_COLOR) -> None:
    """
    Draw the dial into `dst` in place.

    Args:
        dst: BGR image
        origin: dial centre (x, y)
        a: horizontal radius
        b: vertical radius
        indicator_angle: tick angle the needle points at
        color: BGR color for ticks, labels and needle
    """
    origin = (int(origin[0]), int(origin[1]))
    for tick in dial_ticks(origin, a, b):
        cv2.line(dst, tick.inner, tick.outer, color, 2, cv2.LINE_AA)
        if tick.label_pos is not None:
            cv2.putText(dst, str(tick.angle), tick.label_pos,
                        cv2.FONT_HERSHEY_PLAIN, 1, color, 1, cv2.LINE_4)
        if tick.angle == indicator_angle:
            cv2.line(dst, origin, tick.inner, color, 2, cv2.LINE_8)
