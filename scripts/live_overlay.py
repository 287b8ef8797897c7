"""Run the live HUD overlay.

Usage:
    python -m scripts.live_overlay

Asset paths and window placement come from environment variables (see hud/config.py).
Press Esc to quit the window.
"""
from hud.config import Settings
from hud.cli import run_live
import logging

if __name__ == '__main__':
    s = Settings()
    logging.basicConfig(level=getattr(logging, s.LOG_LEVEL))
    raise SystemExit(run_live(s))
