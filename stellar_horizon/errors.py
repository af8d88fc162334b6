# stellar_horizon/errors.py
"""Error hierarchy raised by builders, the dispatcher and the transport."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, ValidationError


class HorizonError(Exception):
    """Base class for every error raised by this package."""


class ConstructionError(HorizonError, ValueError):
    """A builder setter or constructor received a value Horizon would reject."""


class TransportError(HorizonError):
    """The HTTP call did not complete; the original exception is chained."""

    def __init__(self, url: str, message: str):
        super().__init__(f"{message} ({url})")
        self.url = url


class Problem(BaseModel):
    """
    Horizon problem document (RFC 7807).

    Horizon adds resource specific members under ``extras``; unknown top-level
    members are kept as model extras.
    """
    model_config = ConfigDict(extra="allow", frozen=True)

    type: Optional[str] = None
    title: Optional[str] = None
    status: Optional[int] = None
    detail: Optional[str] = None
    extras: Optional[dict[str, Any]] = None


class ApiError(HorizonError):
    """Horizon answered with a non-success status."""

    def __init__(self, status: int, problem: Problem, body: bytes = b""):
        title = problem.title or "Horizon request failed"
        super().__init__(f"{status}: {title}")
        self.status = status
        self.problem = problem
        self.body = body

    @classmethod
    def from_response(cls, status: int, body: bytes) -> "ApiError":
        """Build the error from a raw response, keeping the body when it is not a problem document."""
        try:
            problem = Problem.model_validate_json(body)
        except ValidationError:
            problem = Problem(status=status, detail=body.decode("utf-8", errors="replace") or None)
        return cls(status, problem, body)

    @property
    def is_not_found(self) -> bool:
        return self.status == 404

    @property
    def is_rate_limited(self) -> bool:
        return self.status == 429


class DecodeError(HorizonError):
    """The response body did not match the expected record shape."""

    def __init__(self, resource: str, field: Optional[str], message: str):
        location = f"{resource}.{field}" if field else resource
        super().__init__(f"cannot decode {location}: {message}")
        self.resource = resource
        self.field = field

    @classmethod
    def from_validation_error(cls, resource: str, exc: ValidationError) -> "DecodeError":
        """Name the first failing field of a pydantic validation error."""
        errors = exc.errors()
        if not errors:
            return cls(resource, None, str(exc))
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or None
        return cls(resource, field, first.get("msg", str(exc)))
