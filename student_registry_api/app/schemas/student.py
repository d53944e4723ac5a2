"""
Pydantic schemas for students.

A student only carries an integer ``id`` and a ``name``.  The create
schema keeps both fields optional so that an incomplete payload reaches
the store, which rejects it with a readable error message.
"""

from typing import Optional

from pydantic import BaseModel, Field


class StudentCreate(BaseModel):
    """Schema for creating a new student."""

    id: Optional[int] = Field(None, description="Identifier chosen by the client")
    name: Optional[str] = Field(None, description="Full name of the student")


class StudentRead(BaseModel):
    """Schema for reading a student."""

    id: int
    name: str


class ErrorResponse(BaseModel):
    """Body returned with every 4xx/5xx response."""

    error: str
