from dragboard.core.models.entities import Card, Column, DomainModel, new_id
from dragboard.core.models.enums import DragKind, DragPhase, TaskPlacement

__all__ = ["Card", "Column", "DomainModel", "DragKind", "DragPhase", "TaskPlacement", "new_id"]
