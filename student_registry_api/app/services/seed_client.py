"""
HTTP client for the remote seed data.

The seed data is the list of user records published by a placeholder
REST API.  Each record is reduced to a student (``id`` and ``name``).
The client uses the ``requests`` library and is therefore blocking;
the store runs it in the threadpool so the event loop is never held up.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

import requests

from student_registry_api.app.core.errors import SeedFetchError
from student_registry_api.app.schemas.student import StudentRead


logger = logging.getLogger(__name__)


class SeedClient:
    """Fetches the initial set of students from a remote API."""

    def __init__(
        self,
        *,
        url: str,
        timeout: float = 10,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the client.

        Args:
            url: Absolute URL returning a JSON array of user records.
            timeout: Seconds to wait for the remote API before giving up.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch_students(self) -> List[StudentRead]:
        """Download the user records and map them to students.

        Raises:
            SeedFetchError: on a transport error, a non-2xx status, a
                body that is not a JSON array, or a record without an
                ``id`` or ``name``.
        """
        try:
            logger.debug("Fetching seed data from %s", self.url)
            response = self.session.get(self.url, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            logger.error("Seed request failed (%s): %s", status, exc)
            raise SeedFetchError(f"remote API answered with status {status}") from exc
        except requests.JSONDecodeError as exc:
            logger.error("Seed response from %s is not valid JSON", self.url)
            raise SeedFetchError("remote API returned invalid JSON") from exc
        except requests.RequestException as exc:
            logger.error("Seed request failed: %s", exc)
            raise SeedFetchError(str(exc)) from exc

        students = self._to_students(data)
        logger.info("Fetched %d students from %s", len(students), self.url)
        return students

    @staticmethod
    def _to_students(data: Any) -> List[StudentRead]:
        if not isinstance(data, list):
            raise SeedFetchError("remote API did not return a list of users")
        students: List[StudentRead] = []
        for user in data:
            if not isinstance(user, dict) or user.get("id") is None or user.get("name") is None:
                raise SeedFetchError(f"malformed user record: {user!r}")
            try:
                students.append(StudentRead(id=user["id"], name=user["name"]))
            except ValueError as exc:
                raise SeedFetchError(f"malformed user record: {user!r}") from exc
        return students
