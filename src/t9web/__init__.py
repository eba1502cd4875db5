"""Flask front end for the T9 suggestion engine.

Routes:
    GET /api/suggest?seq=2287   exact matches + completions as JSON
    GET /health                 readiness and dictionary size
    GET /                       small keypad page that calls the API
"""
from .web import app, main

__all__ = ["app", "main"]
