"""
window_center
~~~~~~~~~~~~~
Place the main window on screen and each modal dialog over its owner.
Call ``center_when_shown(widget)`` **before** ``show()`` / ``exec()``.
"""

from PySide6.QtCore import QObject, QEvent, QRect, QTimer
from PySide6.QtGui  import QGuiApplication
from PySide6.QtWidgets import QWidget


def _anchor_rect(widget: QWidget) -> QRect:
    """Owner window frame for dialogs, available screen area otherwise."""
    owner = widget.parentWidget()
    if owner is not None and owner.isVisible():
        return owner.window().frameGeometry()
    screen = widget.screen() or QGuiApplication.primaryScreen()
    return screen.availableGeometry()


class _FirstShowCentrer(QObject):
    """Moves its widget once, on the first Show event, then detaches."""

    def __init__(self, widget: QWidget) -> None:
        super().__init__(widget)
        self._widget = widget
        widget.installEventFilter(self)

    def eventFilter(self, obj, ev):
        if obj is self._widget and ev.type() == QEvent.Type.Show:
            # frame size is only final after the show event is processed
            QTimer.singleShot(0, self._move)
        return False

    def _move(self) -> None:
        frame = self._widget.frameGeometry()
        frame.moveCenter(_anchor_rect(self._widget).center())
        self._widget.move(frame.topLeft())

        self._widget.removeEventFilter(self)
        self.deleteLater()


def center_when_shown(widget: QWidget) -> None:
    _FirstShowCentrer(widget)
