"""Qt widget implementing the frame loop's window interface."""

from __future__ import annotations

from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QCloseEvent, QImage, QKeyEvent, QMouseEvent, QPainter, QPaintEvent
from PySide6.QtWidgets import QApplication, QWidget

from pixeldemo_core import Key, MouseButton, MouseMode, PresentError, WindowCreationError
from pixeldemo_renderer import FrameBuffer


_QT_BUTTONS = {
    Qt.MouseButton.LeftButton: MouseButton.LEFT,
    Qt.MouseButton.MiddleButton: MouseButton.MIDDLE,
    Qt.MouseButton.RightButton: MouseButton.RIGHT,
}

_QT_KEYS = {
    Key.ESCAPE: Qt.Key.Key_Escape,
}


class PixelWindow(QWidget):
    """Fixed-size window that shows a FrameBuffer and records input state for polling."""

    def __init__(self, title: str, width: int, height: int) -> None:
        super().__init__()
        self.buffer_width = width
        self.buffer_height = height
        self.target_fps = 60

        self._open = True
        self._keys: set[int] = set()
        self._buttons_down: set[MouseButton] = set()
        self._buttons_latched: set[MouseButton] = set()
        self._pos: QPointF | None = None
        self._image: QImage | None = None

        self.setWindowTitle(title)
        self.setFixedSize(width, height)
        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

    # Window interface

    def is_open(self) -> bool:
        return self._open

    def is_key_down(self, key: Key) -> bool:
        qt_key = _QT_KEYS.get(key)
        return qt_key is not None and int(qt_key) in self._keys

    def get_mouse_down(self, button: MouseButton) -> bool:
        # A press that was released before this poll still counts once.
        down = button in self._buttons_down or button in self._buttons_latched
        self._buttons_latched.discard(button)
        return down

    def get_mouse_pos(self, mode: MouseMode) -> tuple[float, float] | None:
        if self._pos is None:
            return None
        x, y = self._pos.x(), self._pos.y()
        inside = 0 <= x < self.buffer_width and 0 <= y < self.buffer_height
        if mode is MouseMode.DISCARD:
            return (x, y) if inside else None
        if mode is MouseMode.CLAMP:
            x = min(max(x, 0.0), float(self.buffer_width - 1))
            y = min(max(y, 0.0), float(self.buffer_height - 1))
        return x, y

    def update_with_buffer(self, buffer: FrameBuffer) -> None:
        if not self._open:
            raise PresentError("cannot present buffer: window is closed")
        if (buffer.width, buffer.height) != (self.buffer_width, self.buffer_height):
            raise PresentError(
                f"buffer size {buffer.width}x{buffer.height} does not match "
                f"window size {self.buffer_width}x{self.buffer_height}"
            )
        data = buffer.tobytes()
        self._image = QImage(data, buffer.width, buffer.height, buffer.width * 4, QImage.Format.Format_RGB32).copy()
        self.update()

    def set_target_fps(self, fps: int) -> None:
        self.target_fps = max(1, int(fps))

    @property
    def frame_interval_ms(self) -> int:
        return max(1, 1000 // self.target_fps)

    @property
    def image(self) -> QImage | None:
        return self._image

    # Qt events

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if not event.isAutoRepeat():
            self._keys.add(int(event.key()))
        super().keyPressEvent(event)

    def keyReleaseEvent(self, event: QKeyEvent) -> None:
        if not event.isAutoRepeat():
            self._keys.discard(int(event.key()))
        super().keyReleaseEvent(event)

    def mousePressEvent(self, event: QMouseEvent) -> None:
        button = _QT_BUTTONS.get(event.button())
        if button is not None:
            self._buttons_down.add(button)
            self._buttons_latched.add(button)
        self._pos = event.position()

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        button = _QT_BUTTONS.get(event.button())
        if button is not None:
            self._buttons_down.discard(button)
        self._pos = event.position()

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        self._pos = event.position()

    def leaveEvent(self, event) -> None:
        self._pos = None
        super().leaveEvent(event)

    def focusOutEvent(self, event) -> None:
        self._keys.clear()
        super().focusOutEvent(event)

    def closeEvent(self, event: QCloseEvent) -> None:
        self._open = False
        event.accept()

    def paintEvent(self, event: QPaintEvent) -> None:
        if self._image is None:
            return
        painter = QPainter(self)
        painter.drawImage(0, 0, self._image)
        painter.end()


def create_window(title: str, width: int, height: int) -> PixelWindow:
    if QApplication.instance() is None:
        raise WindowCreationError("a QApplication must exist before creating the window")
    window = PixelWindow(title, width, height)
    window.show()
    return window
