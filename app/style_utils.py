"""Style utilities for consistent UI presentation."""
import html

import streamlit as st

COLORS = {
    "primary": "#2563EB",
    "positive": "#16A34A",
    "negative": "#DC2626",
    "neutral": "#6B7280",
    "panel": "#F9FAFB",
    "accent_panel": "#EFF6FF",
}

SENTIMENT_COLORS = {
    "Positive": COLORS["positive"],
    "Negative": COLORS["negative"],
    "Neutral": COLORS["neutral"],
}

CARD_COLORS = {
    "Total Responses": COLORS["primary"],
    **SENTIMENT_COLORS,
}


def format_percent(value: str) -> str:
    """Format an extracted percentage string for display."""
    return f"{value}%"


def render_text_panel(body: str, accent: bool = False):
    """Render model output as preformatted, wrapped text."""
    background = COLORS["accent_panel"] if accent else COLORS["panel"]
    border = f"border-left: 4px solid {COLORS['primary']};" if accent else ""
    st.markdown(
        f"""
<div style="background: {background}; {border} padding: 16px; border-radius: 8px;">
<pre style="white-space: pre-wrap; font-family: inherit; font-size: 0.9em; margin: 0;">{html.escape(body)}</pre>
</div>
        """,
        unsafe_allow_html=True,
    )
