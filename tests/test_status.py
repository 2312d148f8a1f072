"""Tests for status code validation."""

import pytest

from core.domain.models import Response, StatusClass
from core.domain.status import classify_status, validate_response
from core.errors import ClientError, HttpStatusError, ServerError


class TestClassifyStatus:
    """Tests for classify_status."""

    @pytest.mark.parametrize("code", [200, 201, 204, 299])
    def test_success_range(self, code):
        assert classify_status(code) is StatusClass.SUCCESS

    @pytest.mark.parametrize("code", [400, 404, 418, 499])
    def test_client_error_range(self, code):
        assert classify_status(code) is StatusClass.CLIENT_ERROR

    @pytest.mark.parametrize("code", [500, 502, 503, 599])
    def test_server_error_range(self, code):
        assert classify_status(code) is StatusClass.SERVER_ERROR

    @pytest.mark.parametrize("code", [100, 199, 301, 304, 399, 600, 0])
    def test_other_codes(self, code):
        assert classify_status(code) is StatusClass.OTHER


class TestValidateResponse:
    """Tests for validate_response."""

    def test_success_passes_through(self):
        response = Response(status_code=200, body=b"ok")
        assert validate_response(response) is response

    def test_redirect_is_not_an_error(self):
        response = Response(status_code=302)
        assert validate_response(response) is response

    def test_client_error_halts(self):
        with pytest.raises(ClientError) as exc_info:
            validate_response(Response(status_code=404))
        assert exc_info.value.status_code == 404
        assert "client error: 404" in str(exc_info.value)

    def test_server_error_halts(self):
        with pytest.raises(ServerError) as exc_info:
            validate_response(Response(status_code=503))
        assert exc_info.value.status_code == 503
        assert "server error: 503" in str(exc_info.value)

    def test_both_errors_share_a_base(self):
        for code in (400, 599):
            with pytest.raises(HttpStatusError):
                validate_response(Response(status_code=code))
