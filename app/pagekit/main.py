from __future__ import annotations

import argparse
from typing import Iterable, List, Optional, Sequence

from app.pagekit.layout.sequence import is_ellipsis
from app.pagekit.state.pagination_state import (
    DEFAULT_BOUNDARY_COUNT,
    DEFAULT_MIDDLE_COUNT,
    Page,
    PaginationState,
)
from app.pagekit.utils.paging import item_range_for, page_count_for


def format_markers(markers: Iterable[int], selected: int) -> str:
    """Plain-text rendering, e.g. "1 2 ... 5 [6] 7 ... 10 11"."""
    parts = []
    for marker in markers:
        if is_ellipsis(marker):
            parts.append("...")
        elif marker == selected:
            parts.append(f"[{marker}]")
        else:
            parts.append(str(marker))
    return " ".join(parts)


def bootstrap_state(
    count: int = 1,
    selected: int = 1,
    boundary_count: int = DEFAULT_BOUNDARY_COUNT,
    middle_count: int = DEFAULT_MIDDLE_COUNT,
) -> PaginationState:
    state = PaginationState(
        count=count, boundary_count=boundary_count, middle_count=middle_count
    )
    # The state takes its first selected write unclamped; count is known here.
    state.selected = max(1, min(selected, state.count))
    return state


def format_item_range(selected: int, *, total_items: int, page_size: int) -> str:
    first, last = item_range_for(page=selected, page_size=page_size, total_items=total_items)
    if not first:
        return "No items"
    return f"Items {first}-{last} of {total_items}"


def run_cli_smoke(
    state: PaginationState,
    steps: Sequence[str] = (),
    *,
    total_items: Optional[int] = None,
    page_size: int = 25,
) -> List[str]:
    def show(prefix: str) -> None:
        lines.append(format_markers(state.pages(), state.selected))
        print(f"{prefix}{lines[-1]}")
        if total_items is not None:
            print(" " * len(prefix) + format_item_range(
                state.selected, total_items=total_items, page_size=page_size
            ))

    lines: List[str] = []
    print(f"Pages: {state.count} (boundary={state.boundary_count}, middle={state.middle_count})")
    show("")
    for step in steps:
        state.navigate(step)
        show(f"{step:>8}: ")
    return lines


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="PageKit pagination smoke runner")
    parser.add_argument("--count", type=int, default=None, help="Total number of pages")
    parser.add_argument("--items", type=int, default=None, help="Derive the page count from an item total")
    parser.add_argument("--page-size", type=int, default=25, help="Items per page (with --items)")
    parser.add_argument("--selected", type=int, default=1, help="Selected page (1-based)")
    parser.add_argument("--boundary-count", type=int, default=DEFAULT_BOUNDARY_COUNT)
    parser.add_argument("--middle-count", type=int, default=DEFAULT_MIDDLE_COUNT)
    parser.add_argument(
        "--navigate",
        action="append",
        default=[],
        choices=[p.value for p in Page],
        help="Control button to press after rendering; repeatable",
    )
    args = parser.parse_args(argv)

    if args.items is not None:
        if args.count is not None:
            parser.error("--count and --items are mutually exclusive")
        try:
            count = page_count_for(total_items=args.items, page_size=args.page_size)
        except ValueError as exc:
            parser.error(str(exc))
    else:
        count = args.count if args.count is not None else 1

    state = bootstrap_state(
        count=count,
        selected=args.selected,
        boundary_count=args.boundary_count,
        middle_count=args.middle_count,
    )
    run_cli_smoke(state, args.navigate, total_items=args.items, page_size=args.page_size)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
