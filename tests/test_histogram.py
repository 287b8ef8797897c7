from datetime import datetime
import numpy as np
import pytest
from hud.histogram import HistogramPanel, current_time_and_date, display_text

def test_current_time_and_date_format():
    assert current_time_and_date(datetime(2024, 1, 2, 3, 4, 5)) == "2024-01-02 03:04:05"
    assert len(current_time_and_date()) == len("YYYY-MM-DD HH:MM:SS")

def test_histograms_normalized_to_panel_height():
    rng = np.random.default_rng(2)
    frame = rng.integers(0, 256, (120, 160, 3), dtype=np.uint8)
    panel = HistogramPanel(width=200, height=50)
    hists = panel.compute(frame)
    assert len(hists) == 3
    for h in hists:
        assert h.shape == (256,)
        assert h.max() == pytest.approx(50, abs=1e-3)
        assert h.min() == pytest.approx(0, abs=1e-3)

def test_constant_channel_histogram():
    frame = np.zeros((40, 40, 3), dtype=np.uint8)
    frame[:, :, 2] = 128
    blue, green, red = HistogramPanel(height=50).compute(frame)
    assert blue[0] == pytest.approx(50) and blue[1:].max() == 0
    assert red[128] == pytest.approx(50) and red.sum() == pytest.approx(50)

def test_render_returns_fresh_panel():
    rng = np.random.default_rng(3)
    frame = rng.integers(0, 256, (120, 160, 3), dtype=np.uint8)
    panel = HistogramPanel(width=200, height=50)
    img1 = panel.render(frame, datetime(2024, 1, 2, 3, 4, 5))
    assert img1.shape == (50, 200, 3) and img1.dtype == np.uint8
    assert img1.sum() > 0
    img2 = panel.render(np.zeros_like(frame), datetime(2024, 1, 2, 3, 4, 5))
    assert img2 is not img1
    assert not np.array_equal(img1, img2)

def test_render_draws_polylines_per_channel(monkeypatch):
    import hud.histogram as histogram
    colors = []
    real_line = histogram.cv2.line
    def fake_line(img, p0, p1, color, *a, **k):
        colors.append(tuple(color))
        return real_line(img, p0, p1, color, *a, **k)
    monkeypatch.setattr(histogram.cv2, "line", fake_line)
    HistogramPanel(width=200, height=50).render(np.zeros((10, 10, 3), dtype=np.uint8))
    # 255 segments per channel + the caption baseline rule
    assert colors.count((255, 0, 0)) == 255
    assert colors.count((0, 255, 0)) == 255
    assert colors.count((0, 0, 255)) == 255 + 1

def test_display_text_draws_caption():
    img = np.zeros((50, 200, 3), dtype=np.uint8)
    display_text(img, "2024-01-02 03:04:05")
    assert img[:, :, 1].sum() > 0   # green text
    assert img[:, :, 2].sum() > 0   # red box + rule

def test_invalid_panel_size():
    with pytest.raises(ValueError):
        HistogramPanel(width=0, height=50)
