"""Shared Textual theme definition for Dragboard."""

from __future__ import annotations

from textual.theme import Theme

DRAGBOARD_THEME = Theme(
    name="dragboard",
    primary="#e0567a",  # Rose - drop highlight and focused borders
    secondary="#6fa3d4",
    accent="#4ec9b0",
    foreground="#c5cdd9",
    background="#0d1117",  # Main board background
    surface="#161c2c",  # Column background
    panel="#1e2530",
    warning="#e6c07b",
    error="#e85535",
    success="#3fb58e",
    dark=True,
    variables={
        "border": "#2a3342",
        "border-blurred": "#2a334280",
        "text-muted": "#5c6773",
        "footer-key-foreground": "#5c6773",
        "footer-key-background": "transparent",
        "footer-description-foreground": "#5c677380",
    },
)
