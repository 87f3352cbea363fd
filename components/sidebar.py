"""Global sidebar: occupancy settings and a property snapshot."""

import streamlit as st
from dataclasses import dataclass
from typing import List, Optional
from data.session_store import get_inventory, get_rule_config, set_rule_config
from engine.spatial import get_property_summary
from config.defaults import DEFAULT_OCCUPANCY_PROBABILITY, DEMO_SEED, FLOOR_BUSY_THRESHOLD


@dataclass
class SidebarState:
    occupancy_probability: float
    seed: Optional[int]


def snapshot_captions(summary: dict) -> List[str]:
    """Sidebar lines for a property summary. Floor counts only appear when non-zero."""
    lines = [
        f"Rooms: {summary['total_rooms']}",
        f"Available: {summary['available_rooms']}",
        f"Occupancy: {summary['occupancy_pct']:.0%}",
    ]
    if summary["full_floors"]:
        lines.append(f"Full floors: {summary['full_floors']}")
    if summary["busy_floors"]:
        lines.append(f"Busy floors (>={FLOOR_BUSY_THRESHOLD:.0%}): {summary['busy_floors']}")
    return lines


def render_sidebar() -> SidebarState:
    """Render the global sidebar controls and return current state."""
    with st.sidebar:
        st.title("Hotel Reservations")
        st.divider()

        cfg = dict(get_rule_config())

        probability = st.slider(
            "Random occupancy probability",
            min_value=0.0,
            max_value=1.0,
            value=float(cfg.get("occupancy_probability", DEFAULT_OCCUPANCY_PROBABILITY)),
            step=0.05,
            key="sidebar_probability",
        )

        use_seed = st.checkbox(
            "Reproducible occupancy (seeded)",
            value=bool(cfg.get("use_seed", False)),
            key="sidebar_use_seed",
        )
        seed = None
        if use_seed:
            seed = int(st.number_input(
                "Seed",
                min_value=0,
                value=int(cfg.get("demo_seed", DEMO_SEED)),
                step=1,
                key="sidebar_seed",
            ))

        cfg.update({"occupancy_probability": probability, "use_seed": use_seed})
        if seed is not None:
            cfg["demo_seed"] = seed
        if cfg != get_rule_config():
            set_rule_config(cfg)

        st.divider()

        for line in snapshot_captions(get_property_summary(get_inventory())):
            st.caption(line)

    return SidebarState(
        occupancy_probability=probability,
        seed=seed,
    )
