"""
Request parameter binding.

Each route declares a static table of ``FieldBinding`` rows naming where
every handler parameter comes from. ``bind_parameters`` walks the table
and reads each value from its single declared source; there is no
precedence between sources and no introspection of handler signatures.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Sequence

from starlette.requests import Request

from app.exceptions import ParameterBindingException

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class BindingSource(str, Enum):
    """Request locations a parameter can be bound from."""

    ROUTE = "route"
    QUERY = "query"
    HEADER = "header"


def parse_int(value: str) -> int:
    """
    Parse a base-10 integer, rejecting whitespace and non-ASCII digits.

    Raises:
        ValueError: If the value is not an integer literal
    """
    if not _INTEGER_PATTERN.fullmatch(value):
        raise ValueError(f"'{value}' is not a valid integer")
    return int(value)


def parse_str(value: str) -> str:
    return value


@dataclass(frozen=True)
class FieldBinding:
    """
    One row of a route's binding table.

    Attributes:
        field_name: Key the bound value is stored under
        source: Request location to read from
        source_key: Path segment, query parameter or header name
        required: Fail the request when the value is absent
        parser: Converts the raw string into the parameter's type
    """

    field_name: str
    source: BindingSource
    source_key: str
    required: bool = False
    parser: Callable[[str], Any] = parse_str


# GET /employees/{id}
GET_BY_ROUTE_BINDINGS = (
    FieldBinding("id", BindingSource.ROUTE, "id", required=True, parser=parse_int),
    FieldBinding("name", BindingSource.QUERY, "name"),
    FieldBinding("position", BindingSource.HEADER, "Position"),
)

# GET /employees (identity header variant)
GET_BY_HEADER_BINDINGS = (
    FieldBinding(
        "id", BindingSource.HEADER, "identity", required=True, parser=parse_int
    ),
)

# DELETE /employees/{id}, evaluated before DELETE_BINDINGS
AUTHORIZATION_BINDINGS = (
    FieldBinding("authorization", BindingSource.HEADER, "Authorization"),
)

DELETE_BINDINGS = (
    FieldBinding("id", BindingSource.ROUTE, "id", required=True, parser=parse_int),
)


def _read_raw(request: Request, binding: FieldBinding) -> Optional[str]:
    if binding.source is BindingSource.ROUTE:
        value = request.path_params.get(binding.source_key)
        return None if value is None else str(value)
    if binding.source is BindingSource.QUERY:
        return request.query_params.get(binding.source_key)
    # Header lookup is case-insensitive
    return request.headers.get(binding.source_key)


def bind_parameters(
    request: Request, bindings: Sequence[FieldBinding]
) -> Dict[str, Any]:
    """
    Bind request values according to a route's binding table.

    Args:
        request: Incoming request
        bindings: The route's binding table

    Returns:
        Mapping of field name to bound value. Absent optional values
        are bound as an empty string.

    Raises:
        ParameterBindingException: If a required value is absent or any
            present value is rejected by its parser
    """
    params: Dict[str, Any] = {}

    for binding in bindings:
        raw = _read_raw(request, binding)

        if raw is None:
            if binding.required:
                raise ParameterBindingException(
                    binding.field_name,
                    binding.source.value,
                    binding.source_key,
                    "value is required",
                )
            params[binding.field_name] = ""
            continue

        try:
            params[binding.field_name] = binding.parser(raw)
        except ValueError as e:
            raise ParameterBindingException(
                binding.field_name,
                binding.source.value,
                binding.source_key,
                str(e),
            ) from e

    return params
