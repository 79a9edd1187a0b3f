"""Integration tests for standardized error responses."""

import pytest

pytestmark = pytest.mark.integration


def _assert_standard(data):
    assert "type" in data
    assert "errors" in data
    assert isinstance(data["errors"], list)
    assert data["errors"]
    for error in data["errors"]:
        assert {"code", "detail", "attr"} <= set(error)


class TestStandardizedErrors:
    def test_not_found_has_standard_format(self, api_client):
        response = api_client.get("/api/v1/customers/999/")
        assert response.status_code == 404
        data = response.json()
        _assert_standard(data)
        assert data["type"] == "client_error"

    def test_conflict_has_standard_format(self, api_client, make_customer):
        make_customer()
        response = api_client.post(
            "/api/v1/customers/", {"cpf": "12345678901", "name": "Ana"}, format="json"
        )
        assert response.status_code == 409
        _assert_standard(response.json())

    def test_malformed_json_has_standard_format(self, api_client):
        response = api_client.post(
            "/api/v1/customers/", data="{", content_type="application/json"
        )
        assert response.status_code == 400
        _assert_standard(response.json())

    def test_validation_error_lists_every_field(self, api_client):
        response = api_client.post(
            "/api/v1/customers/",
            {"cpf": "1", "name": "", "address": {"state": "PRX"}},
            format="json",
        )
        assert response.status_code == 400
        data = response.json()
        _assert_standard(data)
        assert data["type"] == "validation_error"
        attrs = {error["attr"] for error in data["errors"]}
        assert {"cpf", "name", "address.state", "address.city"} <= attrs
