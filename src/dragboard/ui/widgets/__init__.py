from dragboard.ui.widgets.board import BoardView
from dragboard.ui.widgets.card import CardWidget
from dragboard.ui.widgets.column import ColumnHeader, ColumnWidget

__all__ = ["BoardView", "CardWidget", "ColumnHeader", "ColumnWidget"]
