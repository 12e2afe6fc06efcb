from backend.engine.interner.interner import StateInterner

__all__ = ["StateInterner"]
