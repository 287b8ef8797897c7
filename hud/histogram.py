"""
Live RGB histogram panel with a timestamp caption.
"""
from __future__ import annotations
from datetime import datetime
from typing import List, Optional, Tuple

import cv2
import numpy as np

CHANNEL_COLORS: Tuple[Tuple[int, int, int], ...] = ((255, 0, 0), (0, 255, 0), (0, 0, 255))  # B, G, R
BOX_COLOR = (0, 0, 255)
TEXT_COLOR = (0, 255, 0)


def current_time_and_date(now: Optional[datetime] = None) -> str:
    """Local wall-clock time as 'YYYY-MM-DD HH:MM:SS'."""
    return (now or datetime.now()).strftime("%Y-%m-%d %H:%M:%S")


def display_text(img: np.ndarray, text: str) -> None:
    """Draw `text` centred in `img` with a bounding box and a baseline rule beneath it."""
    font_face = cv2.FONT_HERSHEY_PLAIN
    font_scale = 1
    thickness = 1
    (text_w, text_h), baseline = cv2.getTextSize(text, font_face, font_scale, thickness)
    baseline += thickness

    h, w = img.shape[:2]
    org_x = (w - text_w) // 2
    org_y = (h + text_h) // 2

    cv2.rectangle(img, (org_x, org_y + baseline), (org_x + text_w, org_y - text_h), BOX_COLOR)
    cv2.line(img, (org_x, org_y + thickness), (org_x + text_w, org_y + thickness), BOX_COLOR)
    cv2.putText(img, text, (org_x, org_y), font_face, font_scale, TEXT_COLOR, thickness, cv2.LINE_AA)


class HistogramPanel:
    """Fixed-size panel; only the size survives between frames."""
    def __init__(self, width: int = 200, height: int = 50, bins: int = 256):
        if width <= 0 or height <= 0 or bins < 2:
            raise ValueError(f"invalid histogram panel {width}x{height} bins={bins}")
        self.width = int(width)
        self.height = int(height)
        self.bins = int(bins)

    @property
    def shape(self) -> Tuple[int, int, int]:
        return self.height, self.width, 3

    def compute(self, image: np.ndarray) -> List[np.ndarray]:
        """
        Per-channel histograms normalized to [0, panel height].

        Returns:
            One float32 array of length `bins` per channel (B, G, R order for BGR frames).
        """
        planes = cv2.split(image)
        hists: List[np.ndarray] = []
        for plane in planes:
            hist = cv2.calcHist([plane], [0], None, [self.bins], [0, 256])
            hist = cv2.normalize(hist, None, 0, self.height, cv2.NORM_MINMAX)
            hists.append(hist.reshape(-1))
        return hists

    def _bin_x(self, i: int) -> int:
        return int(round(i * self.width / float(self.bins)))

    def render(self, image: np.ndarray, now: Optional[datetime] = None) -> np.ndarray:
        """Build a fresh panel for `image`: three histogram polylines plus the time caption."""
        panel = np.zeros(self.shape, dtype=np.uint8)
        for hist, color in zip(self.compute(image), CHANNEL_COLORS):
            for i in range(1, self.bins):
                p0 = (self._bin_x(i - 1), self.height - int(round(float(hist[i - 1]))))
                p1 = (self._bin_x(i), self.height - int(round(float(hist[i]))))
                cv2.line(panel, p0, p1, color, 2, cv2.LINE_8)
        display_text(panel, current_time_and_date(now))
        return panel
