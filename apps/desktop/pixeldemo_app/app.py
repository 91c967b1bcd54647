"""Desktop runtime: Qt application, frame timer and shutdown handling."""

from __future__ import annotations

import os
import sys

from PySide6.QtCore import QObject, QTimer
from PySide6.QtWidgets import QApplication

from pixeldemo_core import AppConfig, FrameLoop, FrameStats, PixelDemoError, WindowCreationError, load_config
from pixeldemo_core.logging_setup import configure_logging, frame_extra, get_logger, install_crash_hooks

from .window import PixelWindow, create_window


class FrameRunner(QObject):
    """Drives FrameLoop.step from a QTimer at the window's target frame rate."""

    def __init__(self, window: PixelWindow, loop: FrameLoop, stats: FrameStats, report_every: int = 300) -> None:
        super().__init__()
        self.window = window
        self.loop = loop
        self.stats = stats
        self.report_every = max(1, report_every)
        self.exit_code = 0
        self.logger = get_logger()

        self._timer = QTimer(self)
        self._timer.timeout.connect(self.tick)

    def start(self) -> None:
        self._timer.start(self.window.frame_interval_ms)
        self.logger.info(
            f"frame loop started at {self.window.target_fps} fps",
            extra={"event": "frame_loop_started"},
        )

    def stop(self, exit_code: int = 0) -> None:
        self._timer.stop()
        self.exit_code = exit_code
        if self.window.is_open():
            self.window.close()
        app = QApplication.instance()
        if app is not None:
            app.exit(exit_code)

    def tick(self) -> None:
        try:
            keep_running = self.loop.step(self.window)
        except PixelDemoError as exc:
            self.logger.critical(str(exc), extra=frame_extra("fatal_error", self.loop.state.screen))
            self.stop(1)
            return

        if not keep_running:
            self.logger.info("frame loop finished", extra=frame_extra("frame_loop_finished", self.loop.state.screen))
            self.stop(0)
            return

        sample = self.stats.tick()
        if sample.frames % self.report_every == 0:
            self.logger.info(
                f"frames={sample.frames} fps={sample.fps:0.1f} screen={self.loop.state.screen.value}",
                extra=frame_extra("frame_stats", self.loop.state.screen, frames=sample.frames, fps=round(sample.fps, 1)),
            )
            if sample.below_target:
                self.logger.warning("frame rate below target", extra=frame_extra("below_fps_target", fps=round(sample.fps, 1)))


def run_gui(cfg: AppConfig | None = None) -> int:
    cfg = cfg or load_config()
    configure_logging(keep_files=cfg.logging.keep_files, console=cfg.logging.console, level=cfg.logging.level)
    install_crash_hooks()
    logger = get_logger()

    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")
    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("PixelDemo")

    try:
        window = create_window(cfg.window.title, cfg.window.width, cfg.window.height)
    except WindowCreationError as exc:
        logger.critical(str(exc), extra={"event": "window_creation_failed"})
        return 1
    window.set_target_fps(cfg.frame.target_fps)

    loop = FrameLoop(cfg.window.width, cfg.window.height, phase_divisor_ms=cfg.frame.phase_divisor_ms)
    runner = FrameRunner(window, loop, FrameStats(target_fps=cfg.frame.target_fps))
    runner.start()

    exit_code = app.exec()
    exit_code = runner.exit_code or int(exit_code)
    logger.info("app shutdown", extra={"event": "shutdown", "exit_code": int(exit_code)})
    return int(exit_code)
