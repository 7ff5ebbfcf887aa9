from __future__ import annotations

from PySide6.QtCore import QObject, QSettings, Signal, Slot

from app.pagekit.state.pagination_state import (
    DEFAULT_BOUNDARY_COUNT,
    DEFAULT_MIDDLE_COUNT,
    Page,
    PaginationState,
)


class PaginationBridge(QObject):
    """Exposes a PaginationState to Qt / QWebChannel hosts.

    The state stays framework agnostic; this object turns its callbacks into
    Signals and persists the layout parameters in QSettings.
    """

    selectedChanged = Signal(int)
    controlButtonClicked = Signal(str)  # Page value: first/previous/next/last
    pagesChanged = Signal(list)

    def __init__(self, settings: QSettings | None = None, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.settings = settings if settings is not None else QSettings("PageKit", "PageKit")

        self._state = PaginationState(
            boundary_count=int(self.settings.value("pagination/boundary_count", DEFAULT_BOUNDARY_COUNT)),
            middle_count=int(self.settings.value("pagination/middle_count", DEFAULT_MIDDLE_COUNT)),
        )
        self._state.on_selected_changed = self._on_selected_changed
        self._state.on_control_clicked = self._on_control_clicked

    @property
    def state(self) -> PaginationState:
        return self._state

    def _on_selected_changed(self, selected: int) -> None:
        self.selectedChanged.emit(selected)
        self.pagesChanged.emit(self._state.pages())

    def _on_control_clicked(self, page: Page) -> None:
        self.controlButtonClicked.emit(page.value)

    @Slot(result=list)
    def get_pages(self) -> list:
        return self._state.pages()

    @Slot(result=int)
    def get_selected(self) -> int:
        return self._state.selected

    @Slot(result=int)
    def get_count(self) -> int:
        return self._state.count

    @Slot(int)
    def set_selected(self, selected: int) -> None:
        self._state.selected = selected

    @Slot(int)
    def set_count(self, count: int) -> None:
        if max(1, count) == self._state.count:
            return
        before = self._state.selected
        self._state.count = count
        # A selection change already re-emitted the pages.
        if self._state.selected == before:
            self.pagesChanged.emit(self._state.pages())

    @Slot(str, result=int)
    def navigate(self, page: str) -> int:
        return self._state.navigate(page)

    @Slot(int, result=int)
    def navigate_to_index(self, index: int) -> int:
        return self._state.go_to_index(index)

    @Slot(int, int)
    def set_layout(self, boundary_count: int, middle_count: int) -> None:
        self._state.boundary_count = boundary_count
        self._state.middle_count = middle_count
        self.settings.setValue("pagination/boundary_count", self._state.boundary_count)
        self.settings.setValue("pagination/middle_count", self._state.middle_count)
        self.pagesChanged.emit(self._state.pages())
