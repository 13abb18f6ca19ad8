"""Problem details (RFC 7807) for HTTP APIs.

Example::

    from http_problem import Problem

    problem = (
        Problem.with_title_and_type_from_status(428)
        .set_detail("detailed explanation")
        .set_instance("/on/1234/do/something")
    )
    problem.to_dict()
"""

from http_problem.domain.status_code import StatusClass, StatusCode, Unregistered
from http_problem.schemas.problem import (
    PROBLEM_JSON_MEDIA_TYPE,
    PROBLEM_XML_MEDIA_TYPE,
    Problem,
)

__all__ = [
    "PROBLEM_JSON_MEDIA_TYPE",
    "PROBLEM_XML_MEDIA_TYPE",
    "Problem",
    "StatusClass",
    "StatusCode",
    "Unregistered",
]
