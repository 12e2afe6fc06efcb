from backend.engine.diagram.parser import Diagram

__all__ = ["Diagram"]
