"""
Test suite for the debug server's shared state.
"""

import io

from PIL import Image

from eyegrid.debug.web_server import DebugState
from conftest import make_sim


class TestDebugState:
    """Test frame publishing, stats and queued resets."""

    def test_no_frame_yet(self):
        assert DebugState().get_jpeg() is None

    def test_published_frame_encodes_as_jpeg(self):
        state = DebugState()
        state.update_frame(Image.new("RGB", (64, 48), (255, 0, 0)))

        jpeg = state.get_jpeg()

        assert jpeg[:2] == b"\xff\xd8"
        assert Image.open(io.BytesIO(jpeg)).size == (64, 48)

    def test_frame_is_copied(self):
        state = DebugState()
        img = Image.new("RGB", (8, 8), (0, 0, 0))
        state.update_frame(img)
        img.putpixel((0, 0), (255, 255, 255))
        assert state.frame.getpixel((0, 0)) == (0, 0, 0)

    def test_reset_request_taken_once(self):
        state = DebugState()
        assert state.take_reset_request() is False
        state.request_reset()
        assert state.take_reset_request() is True
        assert state.take_reset_request() is False

    def test_stats_from_snapshot(self, config):
        state = DebugState()
        sim = make_sim(config)
        state.update_stats(sim.snapshot(), fps_render=59.94)

        stats = state.get_stats()

        assert stats["pairs"] == 6
        assert stats["eyes_remaining"] == 12
        assert stats["agent_mode"] == "IDLE"
        assert stats["fps_render"] == 59.9
