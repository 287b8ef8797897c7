import pytest
import cv2
import numpy as np

from hud.config import Settings

# Overlay sizes used across tests (h, w)
MISSION_PLAN_SHAPE = (150, 200, 3)
PFD_SHAPE = (120, 160, 3)

@pytest.fixture
def asset_paths(tmp_path):
    mission = np.zeros(MISSION_PLAN_SHAPE, dtype=np.uint8)
    mission[:] = (0, 0, 255)
    pfd = np.zeros(PFD_SHAPE, dtype=np.uint8)
    pfd[:] = (0, 255, 0)
    mission_path = tmp_path / "missionplan.png"
    pfd_path = tmp_path / "pfd.bmp"
    cv2.imwrite(str(mission_path), mission)
    cv2.imwrite(str(pfd_path), pfd)
    return str(pfd_path), str(mission_path)

@pytest.fixture
def settings(asset_paths):
    pfd_path, mission_path = asset_paths
    return Settings(PFD_PATH=pfd_path, MISSION_PLAN_PATH=mission_path,
                    FRAME_WIDTH=800, FRAME_HEIGHT=600, MAX_FAILED_READS=3)
