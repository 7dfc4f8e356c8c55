"""Slack Jeopardy: webhook de trivia con puntajes persistidos en Redis."""

__version__ = "0.1.0"
