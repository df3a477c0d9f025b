from .service import Platform, evaluate, evaluate_detailed

__all__ = ["Platform", "evaluate", "evaluate_detailed"]
