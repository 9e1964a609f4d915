from dragboard.ui.screens.board import BoardScreen

__all__ = ["BoardScreen"]
