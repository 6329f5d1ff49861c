"""
Top‑level package for the AI PM Pulse API.

A news and resource directory for product managers following the AI
industry.  All functionality lives in submodules under ``app``.
"""

__all__ = []
