"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers under a unified prefix.  When
new domains are introduced, update this file to include their routers.
"""

from fastapi import APIRouter

from .endpoints import students

router = APIRouter()

router.include_router(students.router, prefix="/students", tags=["students"])
