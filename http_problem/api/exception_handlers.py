"""Global exception handlers that render problems as HTTP responses."""

import logging
from http import HTTPStatus

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from fastapi.utils import is_body_allowed_for_status_code
from starlette.exceptions import HTTPException as StarletteHTTPException

from http_problem.core.config import settings
from http_problem.domain.status_code import Status, StatusCode
from http_problem.errors import ProblemError
from http_problem.schemas.problem import PROBLEM_JSON_MEDIA_TYPE, Problem

logger = logging.getLogger(__name__)


class ProblemResponse(JSONResponse):
    media_type = PROBLEM_JSON_MEDIA_TYPE


def status_from_framework(status_code: int | HTTPStatus) -> Status:
    """Convert a framework status code (``status.HTTP_*`` or ``HTTPStatus``) into the registry."""
    return StatusCode.from_number(int(status_code))


def _response_status(problem: Problem) -> int:
    # Only codes with a defined class can go on the status line.
    if problem.status is None or not 100 <= problem.status <= 599:
        return int(HTTPStatus.INTERNAL_SERVER_ERROR)
    return problem.status


def _reason_phrase(status_code: int) -> str | None:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return None


def _request_instance(request: Request) -> str | None:
    if not settings.instance_from_path:
        return None
    return request.url.path


def problem_response(
    problem: Problem,
    instance: str | None = None,
    headers: dict[str, str] | None = None,
) -> Response:
    """Return a problem+json response for ``problem``.

    ``instance`` is only used when the problem does not carry one already.
    Statuses that forbid a body (1xx, 204, 205, 304) get an empty response.
    """
    if problem.instance is None and instance is not None:
        problem = problem.set_instance(instance)

    status_code = _response_status(problem)
    if status_code >= 500:
        logger.error("Server error problem %s: %s", status_code, problem.to_json())
    else:
        logger.debug("Problem response %s: %s", status_code, problem.to_json())

    if not is_body_allowed_for_status_code(status_code):
        return Response(status_code=status_code, headers=headers)

    return ProblemResponse(status_code=status_code, content=problem.to_dict(), headers=headers)


def problem_error_handler(request: Request, exc: ProblemError) -> Response:
    return problem_response(exc.problem, _request_instance(request), exc.headers)


def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    try:
        status = status_from_framework(exc.status_code)
    except ValueError:
        logger.warning("HTTPException with invalid status %s", exc.status_code)
        status = StatusCode.INTERNAL_SERVER_ERROR
    problem = Problem.with_title_and_type_from_status(status)

    # Starlette fills detail with the reason phrase when none is given.
    detail = exc.detail
    if detail and str(detail) != _reason_phrase(exc.status_code) and str(detail) != problem.title:
        if not status.is_server_error() or settings.expose_server_error_detail:
            problem = problem.set_detail(str(detail))

    return problem_response(problem, _request_instance(request), exc.headers)


def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> Response:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        messages.append(f"{location}: {error.get('msg', 'invalid value')}")

    problem = Problem.with_title_and_type_from_status(StatusCode.UNPROCESSABLE_ENTITY)
    if messages:
        problem = problem.set_detail("; ".join(messages))

    return problem_response(problem, _request_instance(request))


def register_exception_handlers(app):
    """Register problem exception handlers on the FastAPI app."""
    app.add_exception_handler(ProblemError, problem_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
