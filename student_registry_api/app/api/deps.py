"""
Shared FastAPI dependencies.
"""

from fastapi import Request

from student_registry_api.app.services.student_service import StudentStore


def get_student_store(request: Request) -> StudentStore:
    """Return the store created by ``create_app`` for this application."""
    return request.app.state.student_store
