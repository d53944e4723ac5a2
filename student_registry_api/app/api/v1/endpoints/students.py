"""
Student endpoints for API v1.

These routes list students, fetch a single student by id and create new
students.  The collection itself lives in ``StudentStore``; handlers
only translate between HTTP and the store.  Listings are returned as
JSON unless the client asks for HTML, either through the ``Accept``
header or with ``?format=html``.
"""

from pathlib import Path
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from fastapi.templating import Jinja2Templates

from student_registry_api.app.api.deps import get_student_store
from student_registry_api.app.schemas.student import ErrorResponse, StudentCreate, StudentRead
from student_registry_api.app.services.student_service import StudentStore

TEMPLATES_PATH = Path(__file__).resolve().parents[3] / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_PATH))

router = APIRouter()


def _wants_html(request: Request, fmt: Optional[str]) -> bool:
    if fmt is not None:
        return fmt.lower() == "html"
    return "text/html" in request.headers.get("accept", "")


@router.get("", response_model=List[StudentRead])
async def list_students(
    request: Request,
    fmt: Optional[str] = Query(None, alias="format", description="``json`` or ``html``"),
    store: StudentStore = Depends(get_student_store),
):
    """Return every student.

    The first call fetches the seed data from the remote API.  Browsers
    get the full HTML page with a form for adding students.
    """
    students = await store.list_students()
    if _wants_html(request, fmt):
        return templates.TemplateResponse(request, "students.html", {"students": students})
    return students


@router.get("/html")
async def list_students_html(
    request: Request,
    store: StudentStore = Depends(get_student_store),
):
    """Render only the list items; the page script swaps them in after a create."""
    students = await store.list_students()
    return templates.TemplateResponse(request, "_student_list.html", {"students": students})


@router.get(
    "/{student_id}",
    response_model=StudentRead,
    responses={404: {"model": ErrorResponse}, 400: {"model": ErrorResponse}},
)
async def get_student(
    student_id: int,
    store: StudentStore = Depends(get_student_store),
) -> StudentRead:
    """Retrieve a single student by id.

    Returns HTTP 404 if no student has this id and HTTP 400 if the id
    is not an integer.
    """
    student = await store.get_student(student_id)
    if student is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Student not found")
    return student


@router.post(
    "",
    response_model=StudentRead,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_student(
    student_in: StudentCreate,
    response: Response,
    store: StudentStore = Depends(get_student_store),
) -> StudentRead:
    """Create a new student.

    ``id`` and ``name`` are both required.  The ``Location`` header of
    the response points at the new resource.
    """
    student = await store.add_student(student_in)
    response.headers["Location"] = f"/students/{student.id}"
    return student
