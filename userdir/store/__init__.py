"""Concurrency-safe in-memory storage of users."""

from .store import UserStore

__all__ = ["UserStore"]
