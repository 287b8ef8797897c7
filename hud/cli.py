"""
CLI: run the live HUD overlay, or composite the HUD onto a recorded video.
"""
from __future__ import annotations
import argparse, logging
from typing import Optional, Sequence

from hud.assets import load_overlay_assets
from hud.config import Settings
from hud.live import (EXIT_BAD_ASSETS, EXIT_BAD_INPUT, EXIT_CAMERA_UNAVAILABLE, EXIT_OK,
                      run_live_overlay)
from hud.visual import annotate_video

logger = logging.getLogger("hud.cli")

def run_live(settings: Settings, camera_index: Optional[int] = None) -> int:
    """Run the live loop and map startup failures to exit codes."""
    try:
        return run_live_overlay(settings, camera_index=camera_index)
    except RuntimeError as e:
        logger.error(f"[cli] {e}")
        return EXIT_CAMERA_UNAVAILABLE
    except (FileNotFoundError, ValueError) as e:
        # LayoutError is a ValueError
        logger.error(f"[cli] {e}")
        return EXIT_BAD_ASSETS

def run_offline(settings: Settings, video: str, out: str, max_frames: Optional[int] = None) -> int:
    try:
        assets = load_overlay_assets(settings)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"[cli] {e}")
        return EXIT_BAD_ASSETS
    try:
        result = annotate_video(video, out, assets, settings, max_frames=max_frames)
    except (FileNotFoundError, RuntimeError) as e:
        # input video missing or unreadable
        logger.error(f"[cli] {e}")
        return EXIT_BAD_INPUT
    except ValueError as e:
        logger.error(f"[cli] {e}")
        return EXIT_BAD_ASSETS
    logger.info(f"[cli] annotated video written to {result}")
    return EXIT_OK

def main(argv: Optional[Sequence[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Composite HUD overlays onto live or recorded video.")
    p.add_argument("--camera", type=int, default=None, help="Camera index (default: CAMERA_INDEX)")
    p.add_argument("--pfd", default=None, help="Flight-director image path")
    p.add_argument("--mission-plan", default=None, help="Mission-plan image path")
    p.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    p.add_argument("--video", default=None, help="Annotate this video file instead of the camera")
    p.add_argument("--out", default="output/hud.avi", help="Output path for --video")
    p.add_argument("--max-frames", type=int, default=None, help="Stop --video after N frames")
    args = p.parse_args(argv)

    overrides = {}
    if args.pfd:
        overrides["PFD_PATH"] = args.pfd
    if args.mission_plan:
        overrides["MISSION_PLAN_PATH"] = args.mission_plan
    if args.log_level:
        overrides["LOG_LEVEL"] = args.log_level
    settings = Settings(**overrides)
    logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL))

    if args.video:
        import os
        os.makedirs(os.path.dirname(args.out) or ".", exist_ok=True)
        return run_offline(settings, args.video, args.out, max_frames=args.max_frames)
    return run_live(settings, camera_index=args.camera)

if __name__ == "__main__":
    raise SystemExit(main())
