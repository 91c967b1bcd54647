import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))
sys.path.insert(0, str(ROOT / "packages" / "core"))

from pixeldemo_core.frame_loop import FrameLoop, animation_phase
from pixeldemo_core.screens import ScreenId
from pixeldemo_core.window import Key, MouseButton, MouseMode, round_position
from pixeldemo_renderer import Color


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class FakeWindow:
    def __init__(self, width: int = 500, height: int = 500) -> None:
        self.width = width
        self.height = height
        self.open = True
        self.escape = False
        self.left_down = False
        self.pos: tuple[float, float] | None = None
        self.presented = 0
        self.last_frame: list[int] = []

    def is_open(self) -> bool:
        return self.open

    def is_key_down(self, key: Key) -> bool:
        return key is Key.ESCAPE and self.escape

    def get_mouse_down(self, button: MouseButton) -> bool:
        return button is MouseButton.LEFT and self.left_down

    def get_mouse_pos(self, mode: MouseMode):
        if self.pos is None:
            return None
        x, y = self.pos
        if mode is MouseMode.DISCARD and not (0 <= x < self.width and 0 <= y < self.height):
            return None
        return self.pos

    def update_with_buffer(self, buffer) -> None:
        self.presented += 1
        self.last_frame = [int(v) for v in buffer.flat()]

    def set_target_fps(self, fps: int) -> None:
        pass


def click(loop: FrameLoop, window: FakeWindow, pos) -> bool:
    window.pos = pos
    window.left_down = True
    loop.step(window)
    window.left_down = False
    return loop.step(window)


class AnimationPhaseTests(unittest.TestCase):
    def test_phase_from_elapsed_ms(self):
        self.assertEqual(animation_phase(0), 0)
        self.assertEqual(animation_phase(89), 0)
        self.assertEqual(animation_phase(90), 1)
        self.assertEqual(animation_phase(9000), 100)
        self.assertEqual(animation_phase(255 * 90), 0)

    def test_round_position(self):
        self.assertEqual(round_position((10.4, 10.5)), (10, 11))
        self.assertEqual(round_position((0.0, 499.49)), (0, 499))


class FrameLoopTests(unittest.TestCase):
    def setUp(self):
        self.clock = FakeClock()
        self.loop = FrameLoop(500, 500, clock=self.clock)
        self.window = FakeWindow()

    def test_first_frame_renders_main_screen(self):
        self.assertTrue(self.loop.step(self.window))
        frame = self.window.last_frame
        self.assertEqual(self.window.presented, 1)
        self.assertEqual(frame[0], Color(0, 255, 255, 0).packed)
        self.assertEqual(frame[499], Color(0, 255, 0, 0).packed)
        self.assertEqual(frame[250 * 500 + 250], Color(255, 0, 0, 0).packed)

    def test_phase_follows_clock(self):
        self.clock.now = 9.0
        self.loop.step(self.window)
        self.assertEqual(self.loop.state.phase, 100)
        self.assertEqual(self.window.last_frame[499], Color(100, 255, 0, 0).packed)

    def test_options_then_back(self):
        self.assertTrue(click(self.loop, self.window, (20.2, 30.7)))
        self.assertEqual(self.loop.state.screen, ScreenId.OPTIONS)
        self.loop.step(self.window)
        # options button is no longer drawn
        self.assertEqual(self.window.last_frame[0], Color(255, 0, 0, 0).packed)

        self.assertTrue(click(self.loop, self.window, (470.0, 10.0)))
        self.assertEqual(self.loop.state.screen, ScreenId.MAIN)

    def test_exit_button_on_main_stops_before_present(self):
        self.loop.step(self.window)
        presented = self.window.presented
        self.assertFalse(click(self.loop, self.window, (470.0, 10.0)))
        self.assertFalse(self.loop.state.running)
        self.assertEqual(self.window.presented, presented + 1)
        self.assertFalse(self.loop.step(self.window))

    def test_click_outside_window_is_discarded(self):
        self.assertTrue(click(self.loop, self.window, (-5.0, 20.0)))
        self.assertEqual(self.loop.state.screen, ScreenId.MAIN)
        self.window.pos = None
        self.assertTrue(click(self.loop, self.window, None))
        self.assertEqual(self.loop.state.screen, ScreenId.MAIN)

    def test_held_button_does_not_click(self):
        self.window.pos = (20.0, 20.0)
        self.window.left_down = True
        for _ in range(3):
            self.assertTrue(self.loop.step(self.window))
        self.assertEqual(self.loop.state.screen, ScreenId.MAIN)

    def test_escape_stops_loop(self):
        self.window.escape = True
        self.assertFalse(self.loop.step(self.window))
        self.assertEqual(self.window.presented, 0)

    def test_closed_window_stops_loop(self):
        self.window.open = False
        self.loop.run(self.window)
        self.assertEqual(self.window.presented, 0)
        self.assertFalse(self.loop.state.running)

    def test_run_until_escape(self):
        window = self.window
        frames = {"n": 0}
        original = window.update_with_buffer

        def present(buffer):
            original(buffer)
            frames["n"] += 1
            if frames["n"] == 3:
                window.escape = True

        window.update_with_buffer = present
        self.loop.run(window)
        self.assertEqual(window.presented, 3)


if __name__ == "__main__":
    unittest.main()
