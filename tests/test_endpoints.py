"""
API Endpoint Tests

Tests for all FastAPI endpoints using pytest and httpx.
Run with: pytest tests/test_endpoints.py -v
"""
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))


class TestHealthEndpoint:
    """Test /api/v1/health endpoint."""

    def test_health_check(self, client):
        """Health endpoint should return 200."""
        response = client.get("/api/v1/health")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "ok"
        assert "version" in data
        assert len(data["current_date"]) == 10

    def test_request_id_header(self, client):
        """Every response carries X-Request-ID."""
        response = client.get("/api/v1/health")
        assert response.headers.get("X-Request-ID")

    def test_request_id_propagated(self, client):
        """An incoming X-Request-ID is echoed back."""
        response = client.get("/api/v1/health", headers={"X-Request-ID": "abc-123"})
        assert response.headers["X-Request-ID"] == "abc-123"


class TestAPIInfo:
    """Test /api endpoint."""

    def test_api_info(self, client):
        """API info should return metadata."""
        response = client.get("/api")
        assert response.status_code == 200

        data = response.json()
        assert data["name"] == "UA Document Utilities API"
        assert "version" in data


class TestDateEndpoints:
    """Test /api/v1/dates/* endpoints."""

    def test_parse_month_year(self, client):
        """MM.YYYY resolves to the first of the month."""
        response = client.post("/api/v1/dates/parse", json={"date": "01.2024"})
        assert response.status_code == 200

        data = response.json()
        assert data["is_valid"] is True
        assert data["date"] == "01.01.2024"
        assert data["postgres_date"] == "2024-01-01"
        assert data["day"] == "01"
        assert data["month_genitive"] == "січня"
        assert data["year"] == "2024"

    def test_parse_invalid_is_not_an_error(self, client):
        """Trailing garbage is reported as invalid with 200."""
        response = client.post("/api/v1/dates/parse", json={"date": "22.06.2022,"})
        assert response.status_code == 200

        data = response.json()
        assert data["is_valid"] is False
        assert data["date"] is None

    def test_parse_missing_field(self, client):
        """Should return 422 without a date."""
        response = client.post("/api/v1/dates/parse", json={})
        assert response.status_code == 422

    def test_week(self, client):
        response = client.post("/api/v1/dates/week", json={"date": "26.02.2022"})
        assert response.status_code == 200

        data = response.json()
        assert data["week_start"] == "21.02.2022"
        assert data["week_end"] == "27.02.2022"

    def test_week_bad_date(self, client):
        """Unparseable date maps to DATE_FORMAT_ERROR."""
        response = client.post("/api/v1/dates/week", json={"date": "31.02.2022"})
        assert response.status_code == 400

        data = response.json()
        assert data["status"] == "error"
        assert data["code"] == "DATE_FORMAT_ERROR"
        assert "31.02.2022" in data["message"]

    def test_shift_month_clamps(self, client):
        """31 January plus one month is the last day of February."""
        response = client.post(
            "/api/v1/dates/shift",
            json={"date": "31.01.2024", "months": 1}
        )
        assert response.status_code == 200
        assert response.json()["result"] == "29.02.2024"

    def test_shift_days(self, client):
        response = client.post(
            "/api/v1/dates/shift",
            json={"date": "30.12.2023", "days": 3}
        )
        assert response.json()["result"] == "02.01.2024"

    def test_between(self, client):
        response = client.post(
            "/api/v1/dates/between",
            json={"date_begin": "01.01.2024", "date_end": "31.01.2024"}
        )
        assert response.status_code == 200
        assert response.json()["days"] == 30

    def test_between_empty_date(self, client):
        """An empty date yields the -1 marker."""
        response = client.post(
            "/api/v1/dates/between",
            json={"date_begin": "", "date_end": "31.01.2024"}
        )
        assert response.json()["days"] == -1

    def test_compare(self, client):
        response = client.post(
            "/api/v1/dates/compare",
            json={"first": "27.04.2024 14:46:29", "second": "27.04.2024 14:46:30"}
        )
        assert response.status_code == 200
        assert response.json()["result"] == -1

    def test_compare_requires_seconds(self, client):
        response = client.post(
            "/api/v1/dates/compare",
            json={"first": "27.04.2024 14:46", "second": "27.04.2024 14:46:30"}
        )
        assert response.status_code == 400
        assert response.json()["code"] == "DATE_FORMAT_ERROR"


class TestRnokppEndpoints:
    """Test /api/v1/rnokpp/* endpoints."""

    def test_validate(self, client, sample_rnokpp_male):
        response = client.post("/api/v1/rnokpp/validate", json={"code": sample_rnokpp_male["code"]})
        assert response.status_code == 200
        assert response.json()["is_valid"] is True

    def test_validate_malformed(self, client):
        """Malformed codes are invalid, not rejected."""
        response = client.post("/api/v1/rnokpp/validate", json={"code": "12345"})
        assert response.status_code == 200
        assert response.json()["is_valid"] is False

    def test_parse(self, client, sample_rnokpp_female):
        response = client.post("/api/v1/rnokpp/parse", json={"code": sample_rnokpp_female["code"]})
        assert response.status_code == 200

        data = response.json()
        assert data["is_valid"] is True
        assert data["date_of_birth"] == sample_rnokpp_female["date_of_birth"]
        assert data["gender"] == "Female"

    def test_parse_bad_checksum(self, client):
        response = client.post("/api/v1/rnokpp/parse", json={"code": "3456789015"})
        assert response.status_code == 200
        assert response.json()["is_valid"] is False

    @pytest.mark.parametrize("payload", [{"code": "12345"}, {}])
    def test_parse_malformed(self, client, payload):
        response = client.post("/api/v1/rnokpp/parse", json=payload)
        assert response.status_code == 422

        data = response.json()
        assert data["code"] == "VALIDATION_ERROR"
        assert data["details"]["field"] == "rnokpp"


class TestFormattingEndpoints:
    """Test /api/v1/phone/format and /api/v1/names/format."""

    def test_phone(self, client):
        response = client.post("/api/v1/phone/format", json={"phone_number": "050 123-45-67"})
        assert response.status_code == 200
        assert response.json()["formatted"] == "+380501234567"

    def test_phone_unchanged(self, client):
        response = client.post("/api/v1/phone/format", json={"phone_number": "12345"})
        assert response.json()["formatted"] == "12345"

    def test_names(self, client):
        response = client.post(
            "/api/v1/names/format",
            json={"first_name": "іван", "fathers_name": "МИХАЙЛОВИЧ", "last_name": "василишин"}
        )
        assert response.status_code == 200

        data = response.json()
        assert data["full_name"] == "Василишин Іван Михайлович"
        assert data["short_name"] == "Іван ВАСИЛИШИН"
        assert data["shortest_name"] == "І. Василишин"
        assert data["abbreviated"] == "Василишин І.М."


class TestAPIKeyAuth:
    """Test X-API-Key enforcement."""

    def test_missing_key(self, secured_client):
        response = secured_client.post("/api/v1/dates/parse", json={"date": "01.2024"})
        assert response.status_code == 401

        data = response.json()
        assert data["code"] == "UNAUTHORIZED"
        assert data["message"] == "Missing X-API-Key header"

    def test_wrong_key(self, secured_client):
        response = secured_client.post(
            "/api/v1/dates/parse",
            json={"date": "01.2024"},
            headers={"X-API-Key": "nope"}
        )
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid API key"

    def test_valid_key(self, secured_client):
        response = secured_client.post(
            "/api/v1/dates/parse",
            json={"date": "01.2024"},
            headers={"X-API-Key": "test-key"}
        )
        assert response.status_code == 200

    def test_health_is_public(self, secured_client):
        response = secured_client.get("/api/v1/health")
        assert response.status_code == 200

    def test_unauthorized_has_request_id(self, secured_client):
        """Request ID middleware wraps auth."""
        response = secured_client.post("/api/v1/rnokpp/validate", json={"code": "3456789014"})
        assert response.status_code == 401
        assert response.headers.get("X-Request-ID")
