"""Типизированный слой запросов к Docker Engine API."""

__version__ = "0.1.0"
