"""
Configuration for the HUD overlay.
"""
from pydantic import BaseModel, Field
import os

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

class Settings(BaseModel):
    """
    Runtime settings with environment-variable overrides.
    """
    CAMERA_INDEX: int = int(os.getenv("CAMERA_INDEX", "0"))
    PFD_PATH: str = os.getenv("PFD_PATH", "assets/pfd.bmp")
    MISSION_PLAN_PATH: str = os.getenv("MISSION_PLAN_PATH", "assets/missionplan.png")

    FRAME_WIDTH: int = Field(default=int(os.getenv("FRAME_WIDTH", "800")), gt=0)
    FRAME_HEIGHT: int = Field(default=int(os.getenv("FRAME_HEIGHT", "600")), gt=0)
    WINDOW_TITLE: str = os.getenv("WINDOW_TITLE", "Blended -P0W!")
    WINDOW_X: int = int(os.getenv("WINDOW_X", "-900"))
    WINDOW_Y: int = int(os.getenv("WINDOW_Y", "300"))
    KEY_POLL_MS: int = int(os.getenv("KEY_POLL_MS", "1"))

    HIST_WIDTH: int = Field(default=int(os.getenv("HIST_WIDTH", "200")), gt=0)
    HIST_HEIGHT: int = Field(default=int(os.getenv("HIST_HEIGHT", "50")), gt=0)

    MISSION_PLAN_OPACITY: float = float(os.getenv("MISSION_PLAN_OPACITY", "0.6"))
    FLIGHT_DIRECTOR_OPACITY: float = float(os.getenv("FLIGHT_DIRECTOR_OPACITY", "0.5"))
    HISTOGRAM_OPACITY: float = float(os.getenv("HISTOGRAM_OPACITY", "0.6"))

    DIAL_ORIGIN_X: int = int(os.getenv("DIAL_ORIGIN_X", "100"))
    DIAL_ORIGIN_FROM_BOTTOM: int = int(os.getenv("DIAL_ORIGIN_FROM_BOTTOM", "90"))
    DIAL_RADIUS_X: int = Field(default=int(os.getenv("DIAL_RADIUS_X", "100")), gt=0)
    DIAL_RADIUS_Y: int = Field(default=int(os.getenv("DIAL_RADIUS_Y", "90")), gt=0)
    DIAL_INDICATOR_ANGLE: int = int(os.getenv("DIAL_INDICATOR_ANGLE", "60"))

    MAX_FAILED_READS: int = Field(default=int(os.getenv("MAX_FAILED_READS", "30")), gt=0)
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    def __init__(self, **data):
        super().__init__(**data)
        # Normalize LOG_LEVEL: first word, upper-case, fall back to INFO
        level = ((self.LOG_LEVEL or "INFO").strip().split() or ["INFO"])[0].upper()
        if level not in _LEVELS:
            level = "INFO"
        object.__setattr__(self, "LOG_LEVEL", level)
