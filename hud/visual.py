"""Offline HUD annotation of recorded video.

- annotate_video: read a video, composite the HUD onto every frame, write an MJPG video
"""
from __future__ import annotations
import logging
import os
from typing import Optional

import cv2

from hud.assets import OverlayAssets
from hud.config import Settings
from hud.live import compose_frame, make_panel, plan_overlays

logger = logging.getLogger(__name__)


def annotate_video(input_path: str,
                   output_path: str,
                   assets: OverlayAssets,
                   settings: Settings,
                   max_frames: Optional[int] = None) -> str:
    """
    Composite the HUD onto every frame of a recorded video.

    Output frames are FRAME_WIDTH x FRAME_HEIGHT, written with MJPG at the source FPS.
    Returns the path to the annotated video.
    """
    if not os.path.exists(input_path):
        raise FileNotFoundError(f"Video not found: {input_path}")

    panel = make_panel(settings)
    layout = plan_overlays(settings, assets, panel)

    cap = cv2.VideoCapture(input_path)
    if not cap.isOpened():
        raise RuntimeError(f"Could not open video: {input_path}")

    fourcc = cv2.VideoWriter_fourcc(*"MJPG")
    fps = cap.get(cv2.CAP_PROP_FPS) or 25.0
    writer = cv2.VideoWriter(output_path, fourcc, fps, (settings.FRAME_WIDTH, settings.FRAME_HEIGHT))

    idx = 0
    try:
        while max_frames is None or idx < max_frames:
            ret, frame = cap.read()
            if not ret:
                break
            writer.write(compose_frame(frame, assets, settings, panel=panel, layout=layout))
            idx += 1
    finally:
        cap.release()
        writer.release()

    logger.debug(f"[visual] annotate_video wrote {idx} frames -> {output_path}")
    return output_path
