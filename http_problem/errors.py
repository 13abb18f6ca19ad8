"""Exceptions that carry a problem to be rendered as the response body."""

from http_problem.domain.status_code import StatusCode
from http_problem.schemas.problem import Problem


class ProblemError(Exception):
    """Base exception carrying a Problem.

    Either pass a ready ``problem`` or a ``detail`` message; in the latter
    case the problem is derived from the class ``status``.
    """

    status: StatusCode = StatusCode.INTERNAL_SERVER_ERROR

    def __init__(
        self,
        detail: str | None = None,
        *,
        problem: Problem | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        if problem is None:
            problem = Problem.with_title_and_type_from_status(self.status)
        if detail is not None:
            problem = problem.set_detail(detail)
        self.problem = problem
        self.headers = headers
        super().__init__(problem.detail or problem.title)


class BadRequestError(ProblemError):
    """Raised when the request is malformed."""

    status = StatusCode.BAD_REQUEST


class UnauthorizedError(ProblemError):
    """Raised when the caller is not authenticated."""

    status = StatusCode.UNAUTHORIZED


class ForbiddenError(ProblemError):
    """Raised when the caller lacks permission for the requested action."""

    status = StatusCode.FORBIDDEN


class NotFoundError(ProblemError):
    """Raised when a requested resource does not exist."""

    status = StatusCode.NOT_FOUND


class ConflictError(ProblemError):
    """Raised when the request conflicts with the current state of the target resource."""

    status = StatusCode.CONFLICT


class UnprocessableEntityError(ProblemError):
    """Raised when the request is well-formed but its content cannot be processed."""

    status = StatusCode.UNPROCESSABLE_ENTITY
