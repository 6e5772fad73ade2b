"""Indeterminate progress indicator shown while a search is busy."""

from __future__ import annotations

from PySide6.QtWidgets import QProgressBar, QWidget

_SIZE = 22


class BusyIndicator(QProgressBar):
    """A small indeterminate bar, hidden unless active."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setRange(0, 0)
        self.setTextVisible(False)
        self.setFixedSize(_SIZE, _SIZE)
        self._active = False
        self.setVisible(False)

    @property
    def active(self) -> bool:
        return self._active

    def set_active(self, active: bool) -> None:
        self._active = active
        self.setVisible(active)
