"""Pagination sequence helpers.

This module is intentionally UI-framework agnostic.

Goal: given a page count, the selected page and two layout parameters,
compute the short list of markers a pagination bar shows, e.g.

    count=11, boundary_count=2, middle_count=3, selected=6
    => [1, 2, ELLIPSIS, 5, 6, 7, ELLIPSIS, 10, 11]

UI layers decide how a marker is drawn (button, "...", etc).
"""

from __future__ import annotations

from typing import List

# Never a valid page number.
ELLIPSIS = -1


def is_ellipsis(marker: int) -> bool:
    return marker == ELLIPSIS


def generate_pagination(
    *,
    count: int,
    selected: int,
    boundary_count: int,
    middle_count: int,
) -> List[int]:
    """Compute the ordered page markers for a pagination bar.

    Policy:
    - first and last pages are always shown
    - the selected page is always shown as a number
    - an ellipsis never hides exactly one page
    - all pages are shown when the compact form would not be shorter

    Inputs are clamped rather than rejected, so any ints are accepted.
    """

    count = max(1, count)
    boundary_count = max(1, boundary_count)
    middle_count = max(1, middle_count)
    selected = max(1, min(selected, count))

    length = 2 * boundary_count + middle_count + 2
    if count <= 4 or count <= length:
        return list(range(1, count + 1))

    pages = [0] * length
    half = middle_count // 2

    # Edges: [1, 2, ..., count - 1, count]
    for i in range(boundary_count):
        pages[i] = i + 1
        pages[length - i - 1] = count - i

    if selected <= boundary_count + half + 1:
        start = boundary_count + 2
    elif selected >= count - boundary_count - half:
        start = count - boundary_count - middle_count
    else:
        start = selected - half

    for i in range(middle_count):
        pages[boundary_count + 1 + i] = start + i

    # Delimiter slots: ellipsis, or a plain number when the window touches the edge.
    if boundary_count + half + 1 < selected:
        pages[boundary_count] = ELLIPSIS
    else:
        pages[boundary_count] = boundary_count + 1

    if count - boundary_count - half > selected:
        pages[length - boundary_count - 1] = ELLIPSIS
    else:
        pages[length - boundary_count - 1] = count - boundary_count

    # [.., 5, ELLIPSIS, 7, ..] => [.., 5, 6, 7, ..]
    for i in range(length - 2):
        if pages[i] + 2 == pages[i + 2]:
            pages[i + 1] = pages[i] + 1

    return pages
