"""
Tests for request parameter binding.

Requests are built directly from ASGI scopes so each source can be
exercised in isolation from routing.
"""

from typing import Dict, Optional

import pytest
from starlette.requests import Request

from app.binding import (AUTHORIZATION_BINDINGS, DELETE_BINDINGS,
                         GET_BY_HEADER_BINDINGS, GET_BY_ROUTE_BINDINGS,
                         BindingSource, FieldBinding, bind_parameters,
                         parse_int)
from app.exceptions import ParameterBindingException


def make_request(
    path_params: Optional[Dict[str, str]] = None,
    query_string: bytes = b"",
    headers: Optional[Dict[str, str]] = None,
) -> Request:
    """Build a request from a minimal HTTP scope."""
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/",
        "query_string": query_string,
        "headers": [
            (key.lower().encode("latin-1"), value.encode("latin-1"))
            for key, value in (headers or {}).items()
        ],
        "path_params": path_params or {},
    }
    return Request(scope)


class TestParseInt:
    """Test integer parsing."""

    @pytest.mark.parametrize(
        "raw, expected", [("1", 1), ("42", 42), ("-3", -3), ("+7", 7), ("007", 7)]
    )
    def test_valid(self, raw, expected):
        assert parse_int(raw) == expected

    @pytest.mark.parametrize("raw", ["", "abc", "1.5", " 1", "1 ", "1\n", "٣", "0x10"])
    def test_invalid(self, raw):
        with pytest.raises(ValueError):
            parse_int(raw)


class TestRouteBinding:
    """Test binding from path segments."""

    def test_binds_integer_id(self):
        params = bind_parameters(make_request({"id": "2"}), DELETE_BINDINGS)
        assert params == {"id": 2}

    def test_missing_segment_fails(self):
        with pytest.raises(ParameterBindingException) as exc_info:
            bind_parameters(make_request(), DELETE_BINDINGS)

        exc = exc_info.value
        assert exc.field_name == "id"
        assert exc.source == "route"
        assert exc.source_key == "id"
        assert "required" in exc.reason

    def test_non_integer_segment_fails(self):
        with pytest.raises(ParameterBindingException) as exc_info:
            bind_parameters(make_request({"id": "abc"}), DELETE_BINDINGS)

        assert "abc" in str(exc_info.value)


class TestQueryAndHeaderBinding:
    """Test binding from query strings and headers."""

    def test_all_sources(self):
        request = make_request(
            {"id": "1"}, query_string=b"name=Johnny", headers={"Position": "Lead"}
        )

        params = bind_parameters(request, GET_BY_ROUTE_BINDINGS)

        assert params == {"id": 1, "name": "Johnny", "position": "Lead"}

    def test_absent_optional_values_bind_empty(self):
        params = bind_parameters(make_request({"id": "1"}), GET_BY_ROUTE_BINDINGS)
        assert params == {"id": 1, "name": "", "position": ""}

    def test_query_value_is_url_decoded(self):
        request = make_request({"id": "1"}, query_string=b"name=John%20Q")
        assert bind_parameters(request, GET_BY_ROUTE_BINDINGS)["name"] == "John Q"

    def test_header_name_is_case_insensitive(self):
        request = make_request({"id": "1"}, headers={"POSITION": "Lead"})
        assert bind_parameters(request, GET_BY_ROUTE_BINDINGS)["position"] == "Lead"

    def test_identity_header(self):
        request = make_request(headers={"identity": "3"})
        assert bind_parameters(request, GET_BY_HEADER_BINDINGS) == {"id": 3}

    def test_identity_header_required(self):
        with pytest.raises(ParameterBindingException) as exc_info:
            bind_parameters(make_request(), GET_BY_HEADER_BINDINGS)
        assert exc_info.value.source == "header"

    def test_identity_header_must_be_integer(self):
        with pytest.raises(ParameterBindingException):
            bind_parameters(make_request(headers={"identity": "two"}), GET_BY_HEADER_BINDINGS)

    def test_authorization_absent_binds_empty(self):
        assert bind_parameters(make_request(), AUTHORIZATION_BINDINGS) == {
            "authorization": ""
        }

    def test_route_value_not_read_from_query(self):
        request = make_request(query_string=b"id=1")
        with pytest.raises(ParameterBindingException):
            bind_parameters(request, DELETE_BINDINGS)


class TestCustomTables:
    """Test ad-hoc binding tables."""

    def test_custom_parser(self):
        table = (
            FieldBinding("limit", BindingSource.QUERY, "limit", parser=parse_int),
        )
        assert bind_parameters(make_request(query_string=b"limit=5"), table) == {
            "limit": 5
        }

    def test_required_query_value(self):
        table = (FieldBinding("q", BindingSource.QUERY, "q", required=True),)
        with pytest.raises(ParameterBindingException) as exc_info:
            bind_parameters(make_request(), table)
        assert exc_info.value.source == "query"

    def test_empty_table(self):
        assert bind_parameters(make_request(), ()) == {}
