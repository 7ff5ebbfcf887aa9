"""Navigation state for a single pagination bar.

One instance per widget. Every setter clamps instead of raising, so hosts can
feed raw UI values straight in.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, List, Optional

from app.pagekit.layout.sequence import generate_pagination

DEFAULT_BOUNDARY_COUNT = 2
DEFAULT_MIDDLE_COUNT = 3


class Page(str, Enum):
    """Control buttons of a pagination bar."""

    FIRST = "first"
    PREVIOUS = "previous"
    NEXT = "next"
    LAST = "last"

    @classmethod
    def _missing_(cls, value):
        # Also accept member names, e.g. "NEXT".
        if isinstance(value, str):
            return cls.__members__.get(value.upper())
        return None


class PaginationState:
    """Holds count/selected/layout and enforces the clamping rules.

    Owners can set two optional callbacks:
    - on_selected_changed(selected) after every actual change of `selected`
    - on_control_clicked(page) whenever first/previous/next/last is invoked
    """

    def __init__(
        self,
        *,
        count: int = 1,
        boundary_count: int = DEFAULT_BOUNDARY_COUNT,
        middle_count: int = DEFAULT_MIDDLE_COUNT,
    ) -> None:
        self._count = max(1, count)
        self._selected = 1
        self._boundary_count = max(1, boundary_count)
        self._middle_count = max(1, middle_count)
        self._initialized = False

        self.on_selected_changed: Optional[Callable[[int], None]] = None
        self.on_control_clicked: Optional[Callable[[Page], None]] = None

    @property
    def count(self) -> int:
        return self._count

    @count.setter
    def count(self, value: int) -> None:
        self._count = max(1, value)
        self.selected = max(1, min(self._selected, self._count))

    def set_count(self, value: int) -> None:
        self.count = value

    @property
    def selected(self) -> int:
        return self._selected

    @selected.setter
    def selected(self, value: int) -> None:
        if value == self._selected:
            return

        # The first write may arrive before `count` is known, so it is taken as-is.
        if not self._initialized:
            self._initialized = True
            new_value = value
        else:
            new_value = max(1, min(value, self._count))
            if new_value == self._selected:
                return

        self._selected = new_value
        if self.on_selected_changed is not None:
            self.on_selected_changed(new_value)

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def boundary_count(self) -> int:
        return self._boundary_count

    @boundary_count.setter
    def boundary_count(self, value: int) -> None:
        self._boundary_count = max(1, value)

    @property
    def middle_count(self) -> int:
        return self._middle_count

    @middle_count.setter
    def middle_count(self, value: int) -> None:
        self._middle_count = max(1, value)

    def navigate(self, page: Page | str) -> int:
        """Apply a control button and return the resulting selected page."""

        page = Page(page)
        if self.on_control_clicked is not None:
            self.on_control_clicked(page)

        if page is Page.FIRST:
            self.selected = 1
        elif page is Page.LAST:
            self.selected = max(1, self._count)
        elif page is Page.NEXT:
            self.selected = min(self._selected + 1, self._count)
        else:
            self.selected = max(1, self._selected - 1)
        return self._selected

    def go_to_first(self) -> int:
        return self.navigate(Page.FIRST)

    def go_to_last(self) -> int:
        return self.navigate(Page.LAST)

    def go_to_next(self) -> int:
        return self.navigate(Page.NEXT)

    def go_to_previous(self) -> int:
        return self.navigate(Page.PREVIOUS)

    def go_to_index(self, index: int) -> int:
        """Select a page by zero-based index."""
        self.selected = index + 1
        return self._selected

    def pages(self) -> List[int]:
        return generate_pagination(
            count=self._count,
            selected=self._selected,
            boundary_count=self._boundary_count,
            middle_count=self._middle_count,
        )
