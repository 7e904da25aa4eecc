"""Controllers operating on session state: roster edits, round generation, undo."""

from courtrotation.controllers import roster
from courtrotation.controllers.round_generator import generate_round
from courtrotation.controllers.undo_stack import UndoStack

__all__ = ["UndoStack", "generate_round", "roster"]
