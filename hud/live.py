# hud/live.py
"""
Live HUD compositor.

Per captured frame:
- mirror horizontally and resize to FRAME_WIDTH x FRAME_HEIGHT
- render the RGB histogram panel (with timestamp caption)
- blend mission plan, flight director and histogram panel in layout order
- draw the dial gauge
- show the frame; Escape quits
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Dict, List, Optional, Sequence

import cv2
import numpy as np

from hud.assets import OverlayAssets, load_overlay_assets
from hud.blend import blend_image
from hud.config import Settings
from hud.dial import embed_dial
from hud.histogram import HistogramPanel
from hud.layout import (FLIGHT_DIRECTOR, HISTOGRAM, MISSION_PLAN, LayoutError,
                        default_slots, plan_layout)
from hud.models import PlacedOverlay

logger = logging.getLogger(__name__)

ESC_KEY = 27

EXIT_OK = 0
EXIT_CAMERA_UNAVAILABLE = 1
EXIT_BAD_ASSETS = 2
EXIT_CAPTURE_LOST = 3
EXIT_BAD_INPUT = 4


def to_bgr(frame: np.ndarray) -> np.ndarray:
    """Grayscale and BGRA captures become 3-channel BGR; BGR passes through."""
    if frame.ndim == 2 or (frame.ndim == 3 and frame.shape[2] == 1):
        return cv2.cvtColor(frame, cv2.COLOR_GRAY2BGR)
    if frame.ndim == 3 and frame.shape[2] == 4:
        return cv2.cvtColor(frame, cv2.COLOR_BGRA2BGR)
    return frame


def make_panel(settings: Settings) -> HistogramPanel:
    return HistogramPanel(width=settings.HIST_WIDTH, height=settings.HIST_HEIGHT)


def plan_overlays(settings: Settings,
                  assets: OverlayAssets,
                  panel: HistogramPanel) -> List[PlacedOverlay]:
    """
    Resolve the default slots against the target frame size.

    Raises LayoutError if an overlay overflows the frame or the dial radii are not positive.
    """
    if settings.DIAL_RADIUS_X <= 0 or settings.DIAL_RADIUS_Y <= 0:
        raise LayoutError(
            f"dial radii must be positive, got {settings.DIAL_RADIUS_X}x{settings.DIAL_RADIUS_Y}"
        )
    sizes = {
        MISSION_PLAN: assets.mission_plan.shape,
        FLIGHT_DIRECTOR: assets.flight_director.shape,
        HISTOGRAM: panel.shape,
    }
    return plan_layout((settings.FRAME_HEIGHT, settings.FRAME_WIDTH), default_slots(settings), sizes)


def compose_frame(frame: np.ndarray,
                  assets: OverlayAssets,
                  settings: Settings,
                  panel: Optional[HistogramPanel] = None,
                  layout: Optional[Sequence[PlacedOverlay]] = None,
                  now: Optional[datetime] = None) -> np.ndarray:
    """
    Build one composited HUD frame from a raw capture.

    Args:
        frame: capture (any size; grayscale, BGR or BGRA)
        assets: loaded overlay images
        settings: runtime settings
        panel: histogram panel (created from settings if None)
        layout: placed overlays (planned from settings if None)
        now: timestamp for the histogram caption (wall clock if None)

    Returns:
        New FRAME_HEIGHT x FRAME_WIDTH BGR image; `frame` is left untouched.
    """
    panel = panel or make_panel(settings)
    layout = layout if layout is not None else plan_overlays(settings, assets, panel)

    dst = cv2.flip(to_bgr(frame), 1)
    dst = cv2.resize(dst, (settings.FRAME_WIDTH, settings.FRAME_HEIGHT))

    images: Dict[str, np.ndarray] = {
        MISSION_PLAN: assets.mission_plan,
        FLIGHT_DIRECTOR: assets.flight_director,
        HISTOGRAM: panel.render(dst, now),
    }
    for placed in layout:
        blend_image(dst, images[placed.slot.name], roi=placed.region, opacity=placed.slot.opacity)

    origin = (settings.DIAL_ORIGIN_X, dst.shape[0] - settings.DIAL_ORIGIN_FROM_BOTTOM)
    embed_dial(dst, origin, settings.DIAL_RADIUS_X, settings.DIAL_RADIUS_Y,
               indicator_angle=settings.DIAL_INDICATOR_ANGLE)
    return dst


def run_live_overlay(settings: Settings, camera_index: Optional[int] = None) -> int:
    """
    Open the camera, composite the HUD onto every frame and show it until Escape.

    Failed reads are skipped; after MAX_FAILED_READS in a row the loop gives up.

    Returns:
        EXIT_OK on Escape, EXIT_CAPTURE_LOST if the camera stopped delivering frames.

    Raises:
        RuntimeError: camera could not be opened.
        FileNotFoundError / ValueError: overlay asset missing or unreadable.
        LayoutError: overlays do not fit the target frame, or the dial radii are not positive.
    """
    cam_idx = settings.CAMERA_INDEX if camera_index is None else camera_index
    cap = cv2.VideoCapture(cam_idx)
    if not cap.isOpened():
        raise RuntimeError(f"Could not open camera index {cam_idx}")

    title = settings.WINDOW_TITLE
    window_open = False
    try:
        assets = load_overlay_assets(settings)
        panel = make_panel(settings)
        layout = plan_overlays(settings, assets, panel)

        cv2.namedWindow(title, cv2.WINDOW_AUTOSIZE)
        window_open = True
        cv2.moveWindow(title, settings.WINDOW_X, settings.WINDOW_Y)
        logger.info(f"[live] camera={cam_idx} frame={settings.FRAME_WIDTH}x{settings.FRAME_HEIGHT} (Esc to quit)")

        failed_reads = 0
        frames = 0
        while True:
            ok, frame = cap.read()
            if not ok or frame is None:
                failed_reads += 1
                logger.warning(f"[live] frame read failed ({failed_reads}/{settings.MAX_FAILED_READS})")
                if failed_reads >= settings.MAX_FAILED_READS:
                    logger.error(f"[live] camera {cam_idx} stopped delivering frames")
                    return EXIT_CAPTURE_LOST
            else:
                failed_reads = 0
                annotated = compose_frame(frame, assets, settings, panel=panel, layout=layout)
                cv2.imshow(title, annotated)
                frames += 1

            if (cv2.waitKey(settings.KEY_POLL_MS) & 0xFF) == ESC_KEY:
                logger.info(f"[live] escape pressed after {frames} frames")
                break
        return EXIT_OK
    finally:
        cap.release()
        if window_open:
            cv2.destroyAllWindows()
