from backend.engine.searchstate.stats import SearchStats

__all__ = ["SearchStats"]
