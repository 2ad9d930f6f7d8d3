from .session import Session, SessionState, suggest_word

__all__ = ["Session", "SessionState", "suggest_word"]
