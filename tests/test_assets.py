import pytest
from hud.assets import load_image, load_overlay_assets
from conftest import MISSION_PLAN_SHAPE, PFD_SHAPE

def test_load_overlay_assets(settings):
    assets = load_overlay_assets(settings)
    assert assets.mission_plan.shape == MISSION_PLAN_SHAPE
    assert assets.flight_director.shape == PFD_SHAPE

def test_missing_asset(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_image(str(tmp_path / "missing.png"))

def test_corrupt_asset(tmp_path):
    bad = tmp_path / "bad.png"
    bad.write_bytes(b"not an image")
    with pytest.raises(ValueError):
        load_image(str(bad))
