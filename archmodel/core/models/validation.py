"""
Argument checks shared across the model.
"""

from __future__ import annotations

from pydantic import AnyUrl, TypeAdapter, ValidationError

from archmodel.core.models.errors import InvalidArgumentError

_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def is_blank(value: object) -> bool:
    """True for None, or a value that is empty once trimmed."""
    return value is None or not str(value).strip()


def is_url(value: str | None) -> bool:
    """Check that a string is an absolute, scheme-qualified URL.

    Bare hostnames such as ``localhost`` have no scheme and are rejected.
    So is ``localhost:8080``, which parses as scheme ``localhost`` with no
    host: a ``scheme://host`` authority is required.
    """
    if is_blank(value):
        return False
    try:
        parsed = _URL_ADAPTER.validate_python(value)
    except ValidationError:
        return False
    return bool(parsed.host)


def require_name(name: str | None) -> str:
    """Return the name unchanged, or raise if it is blank."""
    if is_blank(name):
        raise InvalidArgumentError("The name must not be null or empty.")
    return name


def require_positive_instances(value: int) -> int:
    """Return a deployment node instance count, or raise if not >= 1."""
    if not isinstance(value, int) or isinstance(value, bool) or value < 1:
        raise InvalidArgumentError("Number of instances must be a positive integer.")
    return value
