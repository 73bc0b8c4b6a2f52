"""Game session module for playing a generated puzzle."""

from .session import GameSession, GameState, Move, HINTS_PER_GAME, format_time

__all__ = ["GameSession", "GameState", "Move", "HINTS_PER_GAME", "format_time"]
