"""
Service layer for students.

``StudentStore`` keeps every student in memory for the lifetime of the
process.  The collection starts empty and is filled from the seed
client the first time anybody reads from or writes to it.  Only one
seed request is ever in flight: concurrent callers share the running
fetch and its outcome instead of starting their own.  If the request
fails the store stays unloaded and the next call tries again.

Created students are appended after the seed data.  Ids are not
checked for uniqueness; ``get`` returns the first match.
"""

from __future__ import annotations

import asyncio
import logging
from typing import List, Optional

from starlette.concurrency import run_in_threadpool

from student_registry_api.app.core.errors import StudentValidationError
from student_registry_api.app.schemas.student import StudentCreate, StudentRead
from student_registry_api.app.services.seed_client import SeedClient


logger = logging.getLogger(__name__)


class StudentStore:
    """In-memory, lazily seeded collection of students."""

    def __init__(self, seed_client: SeedClient) -> None:
        self._seed_client = seed_client
        self._students: List[StudentRead] = []
        self._loaded = False
        self._load_task: Optional[asyncio.Future] = None

    @property
    def loaded(self) -> bool:
        """Whether the seed data has been fetched."""
        return self._loaded

    async def load(self) -> None:
        """Fetch the seed data unless that already happened.

        Every caller that arrives while a fetch is running waits for that
        same fetch and gets its result, including its ``SeedFetchError``.
        The store is left untouched on failure and the next call after
        the failed fetch has settled starts a new one.
        """
        if self._loaded:
            return
        if self._load_task is None or self._load_task.done():
            self._load_task = asyncio.ensure_future(self._fetch_seed())
        task = self._load_task
        try:
            # Shielded so a cancelled request does not abort the shared fetch.
            await asyncio.shield(task)
        finally:
            if task.done() and self._load_task is task:
                self._load_task = None

    async def _fetch_seed(self) -> None:
        seed = await run_in_threadpool(self._seed_client.fetch_students)
        self._students = list(seed)
        self._loaded = True
        logger.info("Student store initialised with %d seed records", len(seed))

    async def list_students(self) -> List[StudentRead]:
        """Return all students, seed data first."""
        await self.load()
        return list(self._students)

    async def get_student(self, student_id: int) -> Optional[StudentRead]:
        """Return the student with ``student_id`` or ``None``."""
        await self.load()
        for student in self._students:
            if student.id == student_id:
                return student
        return None

    async def add_student(self, data: StudentCreate) -> StudentRead:
        """Validate ``data`` and append it to the collection.

        Both ``id`` and ``name`` must be present and truthy; a name made
        of whitespace only counts as missing.  Invalid payloads raise
        ``StudentValidationError`` and leave the store unchanged.
        """
        name = data.name.strip() if data.name else ""
        if not name or not data.id:
            raise StudentValidationError(
                f'Can not add an invalid student! Name: "{data.name}", id: "{data.id}"'
            )
        await self.load()
        student = StudentRead(id=data.id, name=name)
        self._students.append(student)
        logger.info("Added student %s", student.id)
        return student
