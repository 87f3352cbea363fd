"""Room grid: one row per floor, top floor first, one cell per room."""

import streamlit as st
from typing import Iterable, Set

from models.inventory import Floor, RoomInventory

_CELL_STYLE = (
    "display:inline-block;width:52px;margin:2px;padding:6px 0;text-align:center;"
    "border-radius:4px;font-size:13px;color:white;background:{color};{outline}"
)
_AVAILABLE_COLOR = "#5CB85C"
_BOOKED_COLOR = "#D9534F"
_HIGHLIGHT_OUTLINE = "outline:3px solid #F5C542;"


def room_cell_html(number: int, booked: bool, highlighted: bool = False) -> str:
    status = "Booked" if booked else "Available"
    style = _CELL_STYLE.format(
        color=_BOOKED_COLOR if booked else _AVAILABLE_COLOR,
        outline=_HIGHLIGHT_OUTLINE if highlighted else "",
    )
    return f'<div style="{style}" title="Room {number} - {status}">{number}</div>'


def floor_row_html(floor: Floor, highlight: Set[int]) -> str:
    cells = "".join(room_cell_html(r.number, r.booked, r.number in highlight) for r in floor.rooms)
    return (
        f'<div style="display:flex;align-items:center;margin-bottom:4px;">'
        f'<div style="width:80px;font-weight:bold;">Floor {floor.floor_number}</div>'
        f"<div>{cells}</div></div>"
    )


def render_floor_grid(inventory: RoomInventory, highlight: Iterable[int] = ()):
    """Render every floor, floor 10 at the top. Highlighted rooms get an outline."""
    highlight = set(highlight)
    rows = [floor_row_html(f, highlight) for f in reversed(inventory.floors)]
    st.markdown("".join(rows), unsafe_allow_html=True)
    st.caption("🟩 Available   🟥 Booked   Lowest number = nearest the stairs/lift")
