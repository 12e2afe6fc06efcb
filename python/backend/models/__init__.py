from backend.models.burrow import Burrow, Layout
from backend.models.errors import DiagramError, SearchExhaustedError
from backend.models.piece import PieceType

__all__ = ["Burrow", "DiagramError", "Layout", "PieceType", "SearchExhaustedError"]
