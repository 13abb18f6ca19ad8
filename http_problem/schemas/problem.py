"""Problem details schema for HTTP API error bodies (RFC 7807)."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from http_problem.core.config import settings
from http_problem.domain.status_code import MAX_STATUS, MIN_STATUS, Status, resolve_status

# The recommended media type when serialized to JSON
PROBLEM_JSON_MEDIA_TYPE = "application/problem+json"

# The recommended media type when serialized to XML
PROBLEM_XML_MEDIA_TYPE = "application/problem+xml"

ABOUT_BLANK = "about:blank"


class Problem(BaseModel):
    """Description of a problem that can be returned by an HTTP API.

    Instances are immutable. The ``set_*`` methods return an updated copy so
    they can be chained::

        problem = (
            Problem.with_title_and_type_from_status(428)
            .set_detail("detailed explanation")
            .set_instance("/on/1234/do/something")
        )

    Serialized, absent optional members are left out entirely::

        {
            "type": "https://httpstatuses.com/428",
            "status": 428,
            "title": "Precondition Required",
            "detail": "detailed explanation",
            "instance": "/on/1234/do/something"
        }
    """

    type_url: str | None = Field(
        default=None,
        alias="type",
        description='URI reference identifying the problem type; "about:blank" when absent',
    )
    status: int | None = Field(
        default=None,
        ge=MIN_STATUS,
        le=MAX_STATUS,
        description="HTTP status code generated by the origin server for this occurrence",
    )
    title: str = Field(..., description="Short, human-readable summary of the problem type")
    detail: str | None = Field(
        default=None, description="Human-readable explanation specific to this occurrence"
    )
    instance: str | None = Field(
        default=None, description="URI reference identifying the specific occurrence"
    )

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "type": "https://example.com/probs/out-of-credit",
                "title": "You do not have enough credit.",
                "detail": "Your current balance is 30, but that costs 50.",
                "instance": "/account/12345/msgs/abc",
            }
        },
    )

    @classmethod
    def new(cls, title: Any) -> Problem:
        """Create a problem with the given title and nothing else."""
        return cls(title=str(title))

    @classmethod
    def with_title_and_type_from_status(cls, status: Status | int) -> Problem:
        """Create a problem whose title, status and type URI derive from ``status``.

        ``with_title_and_type_from_status(503)`` has the type
        ``https://httpstatuses.com/503`` and the title "Service Unavailable".
        """
        status = resolve_status(status)
        code = status.to_number()
        return cls(type_url=settings.type_url_for(code), status=code, title=status.title())

    @classmethod
    def with_title_from_status(cls, status: Status | int) -> Problem:
        """Create a problem whose title and status derive from ``status``."""
        status = resolve_status(status)
        return cls(status=status.to_number(), title=status.title())

    def set_type_url(self, type_url: Any) -> Problem:
        return self.model_copy(update={"type_url": str(type_url)})

    def set_status(self, status: Status | int) -> Problem:
        return self.model_copy(update={"status": resolve_status(status).to_number()})

    def set_title(self, title: Any) -> Problem:
        return self.model_copy(update={"title": str(title)})

    def set_detail(self, detail: Any) -> Problem:
        return self.model_copy(update={"detail": str(detail)})

    def set_instance(self, instance: Any) -> Problem:
        return self.model_copy(update={"instance": str(instance)})

    def status_code(self) -> Status | None:
        """The registry entry for ``status``, if one is set."""
        if self.status is None:
            return None
        return resolve_status(self.status)

    def effective_type_url(self) -> str:
        return self.type_url if self.type_url is not None else ABOUT_BLANK

    def to_dict(self) -> dict[str, Any]:
        """Wire representation, with absent members omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Problem:
        """Parse a wire object.

        Raises:
            pydantic.ValidationError: If the object is not a valid problem.
        """
        return cls.model_validate(data)

    @classmethod
    def from_json(cls, data: str | bytes) -> Problem:
        return cls.model_validate_json(data)
