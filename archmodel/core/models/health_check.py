"""
HTTP health check — a passive check definition attached to an instance.

The interval and timeout describe an external monitoring process; nothing
in this package ever polls the URL.
"""

from __future__ import annotations

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    ValidationError,
    field_validator,
)

from archmodel.core.models.errors import InvalidArgumentError
from archmodel.core.models.validation import is_blank, is_url

DEFAULT_INTERVAL = 60
DEFAULT_TIMEOUT = 0


class HttpHealthCheck(BaseModel):
    """A named HTTP check.

    Attributes:
        name:     What the check verifies.
        url:      Absolute URL to poll.
        interval: Seconds between polls (>= 0).
        timeout:  Seconds before a poll is considered failed (>= 0).
        headers:  Extra request headers.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    url: str
    interval: StrictInt = DEFAULT_INTERVAL
    timeout: StrictInt = DEFAULT_TIMEOUT
    headers: dict[str, str] = Field(default_factory=dict)

    @field_validator("name", mode="before")
    @classmethod
    def _check_name(cls, value: Any) -> Any:
        if is_blank(value):
            raise ValueError("The name must not be null or empty.")
        return value

    @field_validator("url", mode="before")
    @classmethod
    def _check_url(cls, value: Any) -> Any:
        if is_blank(value):
            raise ValueError("The URL must not be null or empty.")
        if not is_url(value):
            raise ValueError(f"{value} is not a valid URL.")
        return value

    @field_validator("interval", mode="before")
    @classmethod
    def _check_interval(cls, value: Any) -> Any:
        if not _is_non_negative_int(value):
            raise ValueError("The polling interval must be zero or a positive integer.")
        return value

    @field_validator("timeout", mode="before")
    @classmethod
    def _check_timeout(cls, value: Any) -> Any:
        if not _is_non_negative_int(value):
            raise ValueError("The timeout must be zero or a positive integer.")
        return value

    @classmethod
    def create(
        cls,
        name: str | None,
        url: str | None,
        interval: int = DEFAULT_INTERVAL,
        timeout: int = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
    ) -> HttpHealthCheck:
        """Build a validated health check.

        Raises:
            InvalidArgumentError: With the message of the first invalid
                field, checked in the order name, url, interval, timeout.
        """
        try:
            return cls(
                name=name,
                url=url,
                interval=interval,
                timeout=timeout,
                headers=headers or {},
            )
        except ValidationError as e:
            raise InvalidArgumentError(_first_error_message(e)) from e

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()


def _is_non_negative_int(value: Any) -> bool:
    # bool is an int subclass; True is not a valid interval.
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _first_error_message(exc: ValidationError) -> str:
    """The message of the first failing field, without pydantic's prefix."""
    first = exc.errors()[0]
    cause = first.get("ctx", {}).get("error")
    if cause is not None:
        return str(cause)
    return f"{'.'.join(str(p) for p in first['loc'])}: {first['msg']}"
