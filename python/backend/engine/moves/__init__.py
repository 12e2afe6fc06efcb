from backend.engine.moves.generator import Move, MoveGenerator

__all__ = ["Move", "MoveGenerator"]
