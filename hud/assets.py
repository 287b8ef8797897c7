"""
Overlay asset loading (flight director + mission plan images).
"""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass

import cv2
import numpy as np

from hud.config import Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OverlayAssets:
    flight_director: np.ndarray
    mission_plan: np.ndarray


def load_image(path: str) -> np.ndarray:
    """
    Load a BGR image from disk.

    Raises:
        FileNotFoundError: file missing.
        ValueError: OpenCV could not decode the file.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Overlay asset not found: {path}")
    img = cv2.imread(path, cv2.IMREAD_COLOR)
    if img is None or img.size == 0:
        raise ValueError(f"Could not decode overlay asset: {path}")
    logger.debug(f"[assets] loaded {path} shape={img.shape}")
    return img


def load_overlay_assets(settings: Settings) -> OverlayAssets:
    return OverlayAssets(
        flight_director=load_image(settings.PFD_PATH),
        mission_plan=load_image(settings.MISSION_PLAN_PATH),
    )
