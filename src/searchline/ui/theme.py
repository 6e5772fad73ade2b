"""Theme colors and presentation-state stylesheets for the search input."""

from __future__ import annotations

from searchline.models.search import PresentationState

# ── Color palette ──

COLORS = {
    "negative_bg": "#FDECEA",
    "negative_text": "#C0392B",
}


def presentation_stylesheet(state: PresentationState) -> str:
    """Return the QLineEdit sheet for a presentation state.

    Normal falls back to the application palette, so its sheet is empty.
    """
    if state == PresentationState.NORMAL:
        return ""
    c = COLORS
    return (
        "QLineEdit { "
        f"background-color: {c['negative_bg']}; color: {c['negative_text']}; "
        "}"
    )
