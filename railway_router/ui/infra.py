"""Infrastructure utilities for Streamlit UI operations.

This module abstracts Streamlit-specific infrastructure (st.rerun, st.session_state)
to enable mockability in tests while keeping actions.py free of Streamlit calls.

Pattern: Panels import from this module. Tests patch these functions instead of
the places where st.rerun would be called directly.
"""

import logging

import streamlit as st

logger = logging.getLogger(__name__)


def trigger_rerun(scope: str = "app") -> None:
    """Trigger Streamlit rerun with optional scope.

    Mockable wrapper around st.rerun(). In tests, patch
    'railway_router.ui.infra.trigger_rerun' to prevent actual reruns
    (which raise StopExecution).

    Args:
        scope: Rerun scope - "app" for full rerun, "fragment" for partial.
    """
    st.rerun(scope=scope)


def get_widget_version() -> int:
    return st.session_state.get("widget_version", 0)


def bump_widget_version() -> None:
    """Increment widget_version so graph editing widgets are recreated.

    Link weight inputs are keyed by link and widget version. Without a fresh
    key, a removed and re-added link would show the stale widget value and
    write it back on the next run.
    """
    old_version = get_widget_version()
    new_version = old_version + 1
    st.session_state.widget_version = new_version
    logger.info(f"[UI] Bumped widget_version: {old_version} -> {new_version}")


def reload_ui(bump_widgets: bool = False) -> None:
    """Canonical way to refresh the page after an action.

    Args:
        bump_widgets: Also recreate graph editing widgets (after graph edits).
    """
    if bump_widgets:
        bump_widget_version()
    trigger_rerun()
