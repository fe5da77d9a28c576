"""Middleware for the shortener web app."""

from .logging import LoggingMiddleware

__all__ = ["LoggingMiddleware"]
