"""
Top-level package for the Event Platform API.

All functionality lives in submodules under ``app``.
"""

__all__ = []
