"""Registry of HTTP status codes and their canonical titles.

A status is either a named ``StatusCode`` member or an ``Unregistered`` value
wrapping any other 16-bit number. ``StatusCode.from_number`` is the single
entry point from raw integers and never fails for a value in [0, 65535].

The registry follows the IANA HTTP Status Code Registry, plus 418 which is
not in the register but is widely used.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from http_problem.schemas.problem import Problem

MIN_STATUS = 0
MAX_STATUS = 65535

UNREGISTERED_CLIENT_ERROR = "<Unregistered Client Error>"
UNREGISTERED_SERVER_ERROR = "<Unregistered Server Error>"
UNREGISTERED_STATUS_CODE = "<Unregistered Status Code>"


def _check_range(code: int) -> int:
    number = operator.index(code)
    if not MIN_STATUS <= number <= MAX_STATUS:
        raise ValueError(
            f"Status code must be between {MIN_STATUS} and {MAX_STATUS}, got {number}"
        )
    return number


class StatusClass(Enum):
    """The class of a status code, given by its first digit."""

    INFORMATIONAL = 1
    SUCCESS = 2
    REDIRECTION = 3
    CLIENT_ERROR = 4
    SERVER_ERROR = 5

    @classmethod
    def of(cls, code: int) -> StatusClass | None:
        """Class of ``code``, or None when it lies outside [100, 599]."""
        if not 100 <= code <= 599:
            return None
        return cls(code // 100)

    def default_code(self) -> StatusCode:
        """The ``x00`` code a client should assume for an unknown code of this class.

        For example a 123 should be handled like 100 Continue.
        """
        return _BY_NUMBER[self.value * 100]


class _StatusBehavior:
    """Operations shared by named and unregistered statuses."""

    __slots__ = ()

    def status_class(self) -> StatusClass | None:
        return StatusClass.of(self.to_number())

    def is_client_error(self) -> bool:
        return self.status_class() is StatusClass.CLIENT_ERROR

    def is_server_error(self) -> bool:
        return self.status_class() is StatusClass.SERVER_ERROR

    def to_problem(self) -> Problem:
        """Build a Problem whose title and status come from this code."""
        from http_problem.schemas.problem import Problem

        return Problem.with_title_from_status(self)


class StatusCode(_StatusBehavior, Enum):
    """Named HTTP status codes."""

    CONTINUE = (100, "Continue")
    SWITCHING_PROTOCOLS = (101, "Switching Protocols")
    PROCESSING = (102, "Processing")
    OK = (200, "Ok")
    CREATED = (201, "Created")
    ACCEPTED = (202, "Accepted")
    NON_AUTHORITATIVE_INFORMATION = (203, "Non Authoritative Information")
    NO_CONTENT = (204, "No Content")
    RESET_CONTENT = (205, "Reset Content")
    PARTIAL_CONTENT = (206, "Partial Content")
    MULTI_STATUS = (207, "Multi Status")
    ALREADY_REPORTED = (208, "Already Reported")
    IM_USED = (226, "Im Used")
    MULTIPLE_CHOICES = (300, "Multiple Choices")
    MOVED_PERMANENTLY = (301, "Moved Permanently")
    FOUND = (302, "Found")
    SEE_OTHER = (303, "See Other")
    NOT_MODIFIED = (304, "Not Modified")
    USE_PROXY = (305, "Use Proxy")
    TEMPORARY_REDIRECT = (307, "Temporary Redirect")
    PERMANENT_REDIRECT = (308, "Permanent Redirect")
    BAD_REQUEST = (400, "Bad Request")
    UNAUTHORIZED = (401, "Unauthorized")
    PAYMENT_REQUIRED = (402, "Payment Required")
    FORBIDDEN = (403, "Forbidden")
    NOT_FOUND = (404, "Not Found")
    METHOD_NOT_ALLOWED = (405, "Method Not Allowed")
    NOT_ACCEPTABLE = (406, "Not Acceptable")
    PROXY_AUTHENTICATION_REQUIRED = (407, "Proxy Authentication Required")
    REQUEST_TIMEOUT = (408, "Request Timeout")
    CONFLICT = (409, "Conflict")
    GONE = (410, "Gone")
    LENGTH_REQUIRED = (411, "Length Required")
    PRECONDITION_FAILED = (412, "Precondition Failed")
    PAYLOAD_TOO_LARGE = (413, "Payload Too Large")
    URI_TOO_LONG = (414, "Uri Too Long")
    UNSUPPORTED_MEDIA_TYPE = (415, "Unsupported Media Type")
    RANGE_NOT_SATISFIABLE = (416, "Range Not Satisfiable")
    EXPECTATION_FAILED = (417, "Expectation Failed")
    IM_A_TEAPOT = (418, "Im A Teapot")
    MISDIRECTED_REQUEST = (421, "Misdirected Request")
    UNPROCESSABLE_ENTITY = (422, "Unprocessable Entity")
    LOCKED = (423, "Locked")
    FAILED_DEPENDENCY = (424, "Failed Dependency")
    UPGRADE_REQUIRED = (426, "Upgrade Required")
    PRECONDITION_REQUIRED = (428, "Precondition Required")
    TOO_MANY_REQUESTS = (429, "Too Many Requests")
    REQUEST_HEADER_FIELDS_TOO_LARGE = (431, "Request Header Fields Too Large")
    UNAVAILABLE_FOR_LEGAL_REASONS = (451, "Unavailable For Legal Reasons")
    INTERNAL_SERVER_ERROR = (500, "Internal Server Error")
    NOT_IMPLEMENTED = (501, "Not Implemented")
    BAD_GATEWAY = (502, "Bad Gateway")
    SERVICE_UNAVAILABLE = (503, "Service Unavailable")
    GATEWAY_TIMEOUT = (504, "Gateway Timeout")
    HTTP_VERSION_NOT_SUPPORTED = (505, "HTTP Version Not Supported")
    VARIANT_ALSO_NEGOTIATES = (506, "Variant Also Negotiates")
    INSUFFICIENT_STORAGE = (507, "Insufficient Storage")
    LOOP_DETECTED = (508, "Loop Detected")
    NOT_EXTENDED = (510, "Not Extended")
    NETWORK_AUTHENTICATION_REQUIRED = (511, "Network Authentication Required")

    def __init__(self, code: int, title: str) -> None:
        self._code = code
        self._title = title

    def title(self) -> str:
        return self._title

    def to_number(self) -> int:
        return self._code

    def __str__(self) -> str:
        return f"{self._code} {self._title}"

    @classmethod
    def from_number(cls, code: int) -> Status:
        """Resolve ``code`` to its named member, or wrap it as ``Unregistered``.

        Accepts any integer type, including ``http.HTTPStatus`` members and
        the framework's ``status.HTTP_*`` constants.

        Raises:
            ValueError: If ``code`` does not fit in 16 bits.
        """
        number = _check_range(code)
        named = _BY_NUMBER.get(number)
        if named is not None:
            return named
        return Unregistered(number)


@dataclass(frozen=True, slots=True)
class Unregistered(_StatusBehavior):
    """A status code with no named member in the registry.

    Its title is a placeholder chosen by the class of the code.
    """

    code: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "code", _check_range(self.code))

    def title(self) -> str:
        if self.code // 100 == 4:
            return UNREGISTERED_CLIENT_ERROR
        if self.code // 100 == 5:
            return UNREGISTERED_SERVER_ERROR
        return UNREGISTERED_STATUS_CODE

    def to_number(self) -> int:
        return self.code

    def __str__(self) -> str:
        return f"{self.code} {self.title()}"


Status = Union[StatusCode, Unregistered]

# Inverse of StatusCode's number column.
_BY_NUMBER: dict[int, StatusCode] = {member.to_number(): member for member in StatusCode}


def resolve_status(status: Status | int) -> Status:
    """Normalize a status given as a registry value or a raw integer."""
    if isinstance(status, (StatusCode, Unregistered)):
        return status
    return StatusCode.from_number(status)
