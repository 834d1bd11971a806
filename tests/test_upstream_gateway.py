"""
Tests for the upstream employee gateway adapter.

The upstream is simulated with httpx.MockTransport; no network calls.
"""

import json

import httpx
import pytest

from app.domain.employees.entities import Employee
from app.domain.employees.errors import (
    EmployeeNotFoundError,
    InvalidEmployeeInputError,
    UnexpectedUpstreamResponseError,
    UpstreamUnavailableError,
)
from app.infrastructure.employees.upstream_gateway import UpstreamEmployeeGateway
from upstream_fakes import EMPLOYEES_PATH, employee_doc, envelope

LLOYD = employee_doc("1", "Lloyd Graham", 116_571, 58, "x", "a@b.com")


@pytest.fixture
def gateway_for(make_upstream_client):
    def build(handler) -> UpstreamEmployeeGateway:
        return UpstreamEmployeeGateway(make_upstream_client(handler), EMPLOYEES_PATH)

    return build


class TestFetchAll:
    """Tests for GET on the employee collection."""

    def test_decodes_envelope_and_documents(self, gateway_for) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=envelope([LLOYD]))

        employees = gateway_for(handler).fetch_all()

        assert employees == [
            Employee(
                id="1",
                name="Lloyd Graham",
                salary=116_571,
                age=58,
                title="x",
                email="a@b.com",
            )
        ]
        assert seen[0].method == "GET"
        assert seen[0].url.path == EMPLOYEES_PATH

    def test_null_data_is_empty_collection(self, gateway_for) -> None:
        gateway = gateway_for(lambda request: httpx.Response(200, json=envelope(None)))
        assert gateway.fetch_all() == []

    def test_numeric_ids_are_coerced_to_strings(self, gateway_for) -> None:
        doc = {**LLOYD, "id": 7}
        gateway = gateway_for(lambda request: httpx.Response(200, json=envelope([doc])))
        assert gateway.fetch_all()[0].id == "7"

    @pytest.mark.parametrize("code", [500, 503, 429])
    def test_server_errors_are_unavailable(self, gateway_for, code: int) -> None:
        gateway = gateway_for(lambda request: httpx.Response(code))
        with pytest.raises(UpstreamUnavailableError):
            gateway.fetch_all()

    def test_transport_error_is_unavailable(self, gateway_for) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(UpstreamUnavailableError) as excinfo:
            gateway_for(handler).fetch_all()
        assert excinfo.value.reason == "ConnectError"

    def test_malformed_body_is_unexpected(self, gateway_for) -> None:
        gateway = gateway_for(lambda request: httpx.Response(200, text="<html>"))
        with pytest.raises(UnexpectedUpstreamResponseError):
            gateway.fetch_all()

    def test_other_client_error_is_unexpected(self, gateway_for) -> None:
        gateway = gateway_for(lambda request: httpx.Response(403))
        with pytest.raises(UnexpectedUpstreamResponseError):
            gateway.fetch_all()


class TestFetchById:
    """Tests for GET on a single employee."""

    def test_returns_record_for_requested_id(self, gateway_for) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == f"{EMPLOYEES_PATH}/1"
            return httpx.Response(200, json=envelope(LLOYD))

        assert gateway_for(handler).fetch_by_id("1").id == "1"

    def test_upstream_404_is_not_found(self, gateway_for) -> None:
        gateway = gateway_for(lambda request: httpx.Response(404))
        with pytest.raises(EmployeeNotFoundError):
            gateway.fetch_by_id("nonexistent")

    def test_null_data_is_not_found(self, gateway_for) -> None:
        gateway = gateway_for(lambda request: httpx.Response(200, json=envelope(None)))
        with pytest.raises(EmployeeNotFoundError):
            gateway.fetch_by_id("1")

    def test_null_name_is_not_found(self, gateway_for) -> None:
        doc = {**LLOYD, "employee_name": None}
        gateway = gateway_for(lambda request: httpx.Response(200, json=envelope(doc)))
        with pytest.raises(EmployeeNotFoundError):
            gateway.fetch_by_id("1")

    def test_id_is_escaped_into_one_path_segment(self, gateway_for) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.raw_path == f"{EMPLOYEES_PATH}/a%3Fb".encode()
            return httpx.Response(404)

        with pytest.raises(EmployeeNotFoundError):
            gateway_for(handler).fetch_by_id("a?b")

    def test_timeout_is_unavailable(self, gateway_for) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(UpstreamUnavailableError):
            gateway_for(handler).fetch_by_id("1")


class TestCreate:
    """Tests for POST on the employee collection."""

    def test_posts_payload_and_returns_created(self, gateway_for) -> None:
        payload = {"name": "Jane Doe", "salary": 90_000, "age": 31, "title": "PM"}
        bodies: list[dict] = []

        def handler(request: httpx.Request) -> httpx.Response:
            bodies.append(json.loads(request.content))
            return httpx.Response(
                200, json=envelope(employee_doc("new", "Jane Doe", 90_000, 31, "PM"))
            )

        created = gateway_for(handler).create(payload)

        assert bodies == [payload]
        assert created.id == "new"

    def test_upstream_400_is_invalid_input(self, gateway_for) -> None:
        gateway = gateway_for(
            lambda request: httpx.Response(400, json=envelope(None, "Bad salary"))
        )
        with pytest.raises(InvalidEmployeeInputError) as excinfo:
            gateway.create({"name": "x"})
        assert excinfo.value.problems == ["Bad salary"]

    def test_missing_data_is_unexpected(self, gateway_for) -> None:
        gateway = gateway_for(lambda request: httpx.Response(200, json=envelope(None)))
        with pytest.raises(UnexpectedUpstreamResponseError):
            gateway.create({"name": "x"})


class TestDeleteByName:
    """Tests for DELETE on the employee collection."""

    def test_sends_name_in_body(self, gateway_for) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=envelope(True))

        outcome = gateway_for(handler).delete_by_name("Lloyd Graham")

        assert seen[0].method == "DELETE"
        assert seen[0].url.path == EMPLOYEES_PATH
        assert json.loads(seen[0].content) == {"name": "Lloyd Graham"}
        assert outcome.deleted is True
        assert outcome.status_code == 200

    def test_non_2xx_is_reported_not_raised(self, gateway_for) -> None:
        gateway = gateway_for(
            lambda request: httpx.Response(500, json=envelope(None, "Boom"))
        )
        outcome = gateway.delete_by_name("x")
        assert outcome.status_code == 500
        assert outcome.status_text == "Boom"
        assert outcome.deleted is None

    def test_empty_body_gives_bare_outcome(self, gateway_for) -> None:
        outcome = gateway_for(lambda request: httpx.Response(204)).delete_by_name("x")
        assert outcome.status_code == 204
        assert outcome.deleted is None
        assert outcome.status_text is None

    def test_transport_error_is_unavailable(self, gateway_for) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("down", request=request)

        with pytest.raises(UpstreamUnavailableError):
            gateway_for(handler).delete_by_name("x")
