"""Middleware for the URL shortener app."""

from .logging import RequestLoggingMiddleware

__all__ = ["RequestLoggingMiddleware"]
