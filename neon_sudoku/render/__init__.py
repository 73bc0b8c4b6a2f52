"""Rendering of game sessions to images."""

from .renderer import render_session

__all__ = ["render_session"]
