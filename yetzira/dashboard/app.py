"""Yetzira Dashboard -- Streamlit web UI.

A pure projection over ``DashboardProjection``: every page load fetches one
snapshot and renders the five tabs of the project dashboard from it.

Usage:
    streamlit run yetzira/dashboard/app.py
    # or via CLI:
    yetzira ui
"""

from __future__ import annotations

import logging
from pathlib import Path

try:
    import streamlit as st

    HAS_STREAMLIT = True
except ImportError:
    HAS_STREAMLIT = False

from yetzira.core.classifier import grid_tone
from yetzira.models.status import StatusCategory

logger = logging.getLogger(__name__)

# Category -> (background, foreground), the light badge palette of the web UI
_CATEGORY_COLORS: dict[StatusCategory, tuple[str, str]] = {
    StatusCategory.DANGER: ("#fee2e2", "#991b1b"),
    StatusCategory.WARNING: ("#fef9c3", "#854d0e"),
    StatusCategory.INFO: ("#dbeafe", "#1e40af"),
    StatusCategory.IN_PROGRESS: ("#ffedd5", "#9a3412"),
    StatusCategory.SUCCESS: ("#dcfce7", "#166534"),
    StatusCategory.NEUTRAL: ("#f3f4f6", "#1f2937"),
}


def badge_html(status: str, category: StatusCategory) -> str:
    """Inline HTML pill for a status label."""
    bg, fg = _CATEGORY_COLORS[category]
    return (
        f'<span style="background:{bg};color:{fg};padding:2px 10px;'
        f'border-radius:9999px;font-size:0.85em">{status or "?"}</span>'
    )


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------


def create_dashboard(store_path: Path | None = None) -> None:
    """Launch the Yetzira dashboard.

    Parameters
    ----------
    store_path:
        Path to the SQLite record store. Defaults to ``config.store_path``.
    """
    if not HAS_STREAMLIT:
        print("Streamlit is required for the dashboard.")
        print("Install with: pip install yetzira[dashboard]")
        return

    _run_dashboard(store_path)


# ---------------------------------------------------------------------------
# Internal dashboard runner
# ---------------------------------------------------------------------------


def _run_dashboard(store_path: Path | None = None) -> None:
    """Internal dashboard runner -- requires Streamlit."""
    from yetzira.config import config
    from yetzira.core.loader import SnapshotLoadError
    from yetzira.core.record_store import SqliteRecordStore
    from yetzira.monitor.projection import DashboardProjection

    st.set_page_config(
        page_title="Yetzira Towers",
        page_icon="\U0001f3d7",
        layout="wide",
    )

    st.title("Yetzira Towers")
    st.caption("Production management")

    store = SqliteRecordStore(store_path or config.store_path)
    projection = DashboardProjection(store, config.floors, config.facades)

    # One combined load; any failure shows the error and nothing else.
    try:
        view = projection.view()
    except SnapshotLoadError as exc:
        logger.error("Dashboard load failed: %s", exc)
        st.error(f"Could not load project data: {exc}")
        return

    overview, ship_map, logistics, production, project_map = st.tabs(
        [
            "\U0001f4c8 Overview",
            "\U0001f4cd Ship Map",
            "\U0001f6a2 Logistics",
            "\U0001f527 Production",
            "\U0001f3e2 Project Map",
        ]
    )

    with overview:
        _render_overview(view)
    with ship_map:
        _render_ship_map(view)
    with logistics:
        _render_logistics(view)
    with production:
        _render_production(view)
    with project_map:
        _render_project_map(view)


# ===================================================================
# Tabs
# ===================================================================


def _render_overview(view) -> None:
    m = view.metrics
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Overall progress", f"{m.overall_progress}%")
    col1.progress(m.overall_progress / 100)
    col2.metric("Completed", m.completed_units, help=f"of {m.total_units} units")
    col3.metric("In production", m.in_production_units)
    col4.metric("Ships en route", view.ships_en_route)

    st.subheader("Left until project completion")
    st.markdown(f"**Units remaining:** {m.remaining_units}")
    st.markdown(f"**Waiting for materials:** :red[{m.waiting_units} units]")

    if view.warnings:
        with st.expander(f"Data warnings ({len(view.warnings)})"):
            for warning in view.warnings:
                st.warning(warning)


def _render_ship_map(view) -> None:
    """Ships as points on the normalised 0-100 canvas."""
    st.header("Ship Map")
    if not view.ships:
        st.info("No ships.")
        return
    # x grows right-to-left, matching the RTL canvas the positions were drawn on
    st.scatter_chart(
        [
            {"x": 100 - ship.lng, "y": 100 - ship.lat, "ship": ship.name or ship.id or "?"}
            for ship in view.ships
        ],
        x="x",
        y="y",
        color="ship",
    )


def _render_logistics(view) -> None:
    st.header("Containers & Shipments")
    if not view.containers:
        st.info("No containers.")
    for cc in view.containers:
        c = cc.container
        st.markdown(
            f"**{c.id}** &nbsp; Ship: {c.ship or '-'} &nbsp; "
            f"{badge_html(c.status, cc.category)}",
            unsafe_allow_html=True,
        )


def _render_production(view) -> None:
    st.header("Work Types & Readiness")
    for cu in view.units:
        u = cu.unit
        st.markdown(
            f"**{u.id}** &nbsp; Floor {u.floor}, Facade {u.facade} "
            f"&bull; {u.quantity} units &nbsp; {badge_html(u.status, cu.category)}",
            unsafe_allow_html=True,
        )
        st.progress(u.progress / 100, text=f"Progress {u.progress}%")


def _render_project_map(view) -> None:
    st.header("Project Map (floors x facades)")
    header = "| Floor | " + " | ".join(f"Facade {f}" for f in view.grid.facades) + " |"
    divider = "|---" * (len(view.grid.facades) + 1) + "|"
    lines = [header, divider]
    for row in view.grid.rows:
        cells = []
        for cell in row.cells:
            if cell.unit is None:
                cells.append("&mdash;")
            else:
                tone = grid_tone(cell.unit.status)
                cells.append(
                    f"{badge_html(cell.unit.id, tone)}<br>{cell.unit.quantity} units"
                )
        lines.append(f"| **Floor {row.floor}** | " + " | ".join(cells) + " |")
    st.markdown("\n".join(lines), unsafe_allow_html=True)

    if view.grid.unplaced:
        st.warning(
            "Not on plan: "
            + ", ".join(
                f"{u.id} (floor {u.floor}, facade {u.facade})" for u in view.grid.unplaced
            )
        )


if HAS_STREAMLIT and __name__ == "__main__":
    _run_dashboard()
