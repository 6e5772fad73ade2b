"""Search line edit paired with a delayed busy indicator."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtWidgets import QHBoxLayout, QWidget

from searchline.config import Config
from searchline.core.busy_indicator import BusyIndicatorController
from searchline.ui.timers import qt_timer_factory
from searchline.ui.widgets.busy_indicator import BusyIndicator
from searchline.ui.widgets.search_line_edit import SearchLineEdit

if TYPE_CHECKING:
    from searchline.core.protocols import SearchBackend, TimerFactory


class SearchLineWidget(QWidget):
    """Horizontal search line + busy indicator."""

    def __init__(
        self,
        backend: SearchBackend,
        *,
        config: Config | None = None,
        timer_factory: TimerFactory | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        config = config or Config()
        timer_factory = timer_factory or qt_timer_factory(self)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self._edit = SearchLineEdit(
            backend, config=config, timer_factory=timer_factory, parent=self
        )
        layout.addWidget(self._edit)

        self._indicator = BusyIndicator(self)
        layout.addWidget(self._indicator)

        self._busy = BusyIndicatorController(timer_factory, delay_ms=config.busy_delay_ms)
        self._busy.attach(self._edit.coordinator)
        self._busy.active_changed.connect(self._indicator.set_active)

    def line_edit(self) -> SearchLineEdit:
        return self._edit

    @property
    def indicator(self) -> BusyIndicator:
        return self._indicator

    @property
    def busy_controller(self) -> BusyIndicatorController:
        return self._busy
