import logging
import uuid

import pytest

pytestmark = pytest.mark.integration


class TestCorrelationIdMiddleware:
    def test_echoes_provided_request_id(self, api_client_with_correlation):
        client, cid = api_client_with_correlation
        response = client.get("/api/v1/customers/count/")
        assert response["X-Request-ID"] == cid

    def test_generates_uuid4_when_absent(self, client):
        request_id = client.get("/health")["X-Request-ID"]
        assert str(uuid.UUID(request_id, version=4)) == request_id

    def test_error_responses_carry_request_id(self, api_client_with_correlation):
        client, cid = api_client_with_correlation
        response = client.get("/api/v1/customers/999/")
        assert response.status_code == 404
        assert response["X-Request-ID"] == cid

    def test_domain_logs_carry_correlation_id(self, api_client_with_correlation, caplog):
        client, cid = api_client_with_correlation
        with caplog.at_level(logging.INFO):
            client.post(
                "/api/v1/customers/", {"cpf": "12345678901", "name": "Ana"}, format="json"
            )
        created = [r.getMessage() for r in caplog.records if "customer.created" in r.getMessage()]
        assert created
        assert cid in created[0]
