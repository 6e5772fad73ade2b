"""QLineEdit front-end of a SearchCoordinator."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtWidgets import QLineEdit, QWidget

from searchline.core.coordinator import SearchCoordinator
from searchline.models.search import PresentationState
from searchline.ui.theme import presentation_stylesheet
from searchline.ui.timers import qt_timer_factory

if TYPE_CHECKING:
    from searchline.config import Config
    from searchline.core.protocols import SearchBackend, TimerFactory


class SearchLineEdit(QLineEdit):
    """Line edit that feeds its text into a coordinator and renders its state."""

    def __init__(
        self,
        backend: SearchBackend,
        *,
        config: Config | None = None,
        timer_factory: TimerFactory | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setObjectName("SearchLineEdit")
        self.setClearButtonEnabled(True)

        self._coordinator = SearchCoordinator(
            backend,
            timer_factory or qt_timer_factory(self),
            config=config,
        )
        self._coordinator.presentation_changed.connect(self._apply_presentation)

        self.textChanged.connect(self._coordinator.on_text_changed)
        self.returnPressed.connect(self._on_return_pressed)

    @property
    def coordinator(self) -> SearchCoordinator:
        return self._coordinator

    def clear_text(self) -> None:
        self.clear()

    def _on_return_pressed(self) -> None:
        self._coordinator.on_submit(self.text())

    def _apply_presentation(self, state: PresentationState) -> None:
        self.setStyleSheet(presentation_stylesheet(state))
