"""
Top‑level package for the Student Registry API.

All functionality lives in submodules under ``app``; import
``student_registry_api.app.main`` for the ASGI application.
"""

__all__ = []
