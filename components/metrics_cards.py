"""Reusable KPI metric card widgets."""

import streamlit as st


def render_metric_row(metrics: list[dict]):
    """Render a row of metric cards. Each metric dict has a label and a value."""
    cols = st.columns(len(metrics))
    for col, m in zip(cols, metrics):
        with col:
            st.metric(label=m["label"], value=m["value"])


def render_outcome_card(message: str, ok: bool, level: str = "warning"):
    """Show a booking outcome: success, or a failure at the given level."""
    if ok:
        st.success(message, icon="✅")
    elif level == "error":
        st.error(message, icon="🔴")
    else:
        st.warning(message, icon="🟡")
