"""
Alpha blending of overlay images onto regions of a frame.

- anchored_region: region for an overlay anchored at the bottom-right corner, shifted by offsets
- blend_image: composite an overlay into a frame region in place (cv2.addWeighted)
"""
from __future__ import annotations
import cv2
import numpy as np
from typing import Optional, Sequence

from hud.models import Region


def anchored_region(frame_shape: Sequence[int],
                    overlay_shape: Sequence[int],
                    last_cols: int = 0,
                    last_rows: int = 0) -> Region:
    """
    Region whose bottom-right corner sits `last_cols` left and `last_rows` up
    from the frame's bottom-right corner. Size equals the overlay size.

    Args:
        frame_shape: destination shape (H, W[, C])
        overlay_shape: overlay shape (h, w[, C])
        last_cols: pixels to shift left
        last_rows: pixels to shift up
    """
    H, W = int(frame_shape[0]), int(frame_shape[1])
    h, w = int(overlay_shape[0]), int(overlay_shape[1])
    return Region(x=W - w - last_cols, y=H - h - last_rows, width=w, height=h)


def blend_image(dst: np.ndarray,
                overlay: np.ndarray,
                roi: Optional[Region] = None,
                opacity: float = 0.2,
                last_cols: int = 0,
                last_rows: int = 0) -> None:
    """
    Blend `overlay` into `dst` in place: dst = dst*opacity + overlay*(1-opacity).

    When `roi` is None the region is anchored bottom-right (see anchored_region).

    Raises:
        ValueError: opacity outside [0, 1], region outside `dst`,
            overlay size different from the region, or channel mismatch.
    """
    if not 0.0 <= opacity <= 1.0:
        raise ValueError(f"opacity must be within [0, 1], got {opacity}")

    region = roi if roi is not None else anchored_region(dst.shape, overlay.shape, last_cols, last_rows)
    H, W = dst.shape[:2]
    if not region.fits(W, H):
        raise ValueError(
            f"region x={region.x} y={region.y} w={region.width} h={region.height} "
            f"outside destination {W}x{H}"
        )
    if overlay.shape[:2] != (region.height, region.width):
        raise ValueError(
            f"overlay size {overlay.shape[1]}x{overlay.shape[0]} "
            f"does not match region {region.width}x{region.height}"
        )
    if dst.ndim != overlay.ndim or (dst.ndim == 3 and dst.shape[2] != overlay.shape[2]):
        raise ValueError(f"channel mismatch: dst {dst.shape} vs overlay {overlay.shape}")

    rows, cols = region.slices()
    dst[rows, cols] = cv2.addWeighted(dst[rows, cols], opacity, overlay, 1.0 - opacity, 0.0)
