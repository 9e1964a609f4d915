from dragboard.limits import DEBUG_BUILD, DRAG_ACTIVATION_DISTANCE
from dragboard.paths import get_config_path

DEFAULT_COLUMN_TITLE_TEMPLATE = "Column {n}"
DEFAULT_CARD_CONTENT_TEMPLATE = "Task {n}"

CARD_CONTENT_LINE_WIDTH = 28
COLUMN_TITLE_MAX_LENGTH = 24

DEFAULT_CONFIG_PATH = str(get_config_path())

DEMO_BOARD: dict[str, list[str]] = {
    "Todo": ["Sketch the board", "Wire drag events"],
    "Doing": ["Column reordering"],
    "Done": [],
}

__all__ = [
    "CARD_CONTENT_LINE_WIDTH",
    "COLUMN_TITLE_MAX_LENGTH",
    "DEBUG_BUILD",
    "DEFAULT_CARD_CONTENT_TEMPLATE",
    "DEFAULT_COLUMN_TITLE_TEMPLATE",
    "DEFAULT_CONFIG_PATH",
    "DEMO_BOARD",
    "DRAG_ACTIVATION_DISTANCE",
]
