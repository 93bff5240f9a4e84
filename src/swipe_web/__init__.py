"""Flask front end for the swipe decoding engine."""
from .web import app, main

__all__ = ["app", "main"]
