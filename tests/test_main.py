"""
Tests for the command-line interface.
"""

import json
import logging
from unittest.mock import AsyncMock, patch

import pytest

from axion.clients.response import AxionResponse
from axion.main import AxionCLI, main


@pytest.fixture
def mock_call():
    """Patch AxionClient.call so no session or network is used."""
    with patch("axion.main.AxionClient.call", new_callable=AsyncMock) as mocked, \
            patch("axion.main.AxionClient.open", new_callable=AsyncMock), \
            patch("axion.main.AxionClient.close", new_callable=AsyncMock):
        yield mocked


class TestCLI:
    """Test AxionCLI."""

    def test_list_endpoints(self, capsys):
        assert main(["--list"]) == 0

        out = capsys.readouterr().out
        assert "stocks_prices(ticker, *, from_date=None, to_date=None, frame=None)" in out
        assert "GET /filings/{ticker}/forms/{form}" in out

    def test_endpoint_required(self):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2

    def test_success_prints_json(self, capsys, mock_call):
        mock_call.return_value = AxionResponse(status=200, data={"symbol": "AAPL", "price": 123.45})

        assert main(["stocks_quote", "AAPL"]) == 0

        assert json.loads(capsys.readouterr().out) == {"symbol": "AAPL", "price": 123.45}
        mock_call.assert_awaited_once_with("stocks_quote", "AAPL")

    def test_params_forwarded(self, mock_call):
        mock_call.return_value = AxionResponse(status=200, data=[])

        main([
            "stocks_prices", "AAPL",
            "--param", "from_date=2024-01-01",
            "--param", "frame=daily",
        ])

        mock_call.assert_awaited_once_with(
            "stocks_prices", "AAPL", from_date="2024-01-01", frame="daily",
        )

    def test_http_error_exit_code(self, capsys, mock_call):
        mock_call.return_value = AxionResponse(status=404, error="ticker not found")

        assert main(["stocks_quote", "XXXX"]) == 1
        assert "Error (HTTP 404): ticker not found" in capsys.readouterr().err

    def test_transport_error_exit_code(self, capsys, mock_call):
        mock_call.return_value = AxionResponse.transport_failure("Request timed out.")

        assert main(["stocks_quote", "AAPL"]) == 1
        assert "Error (transport): Request timed out." in capsys.readouterr().err

    def test_empty_response(self, capsys, mock_call):
        mock_call.return_value = AxionResponse(status=204)

        assert main(["news_general"]) == 0
        assert capsys.readouterr().out == ""

    def test_invalid_arguments_skip_request(self, capsys, mock_call):
        assert main(["stocks_quote"]) == 2
        assert main(["no_such_endpoint"]) == 2
        assert main(["stocks_prices", "AAPL", "--param", "limit=5"]) == 2

        assert "Invalid request" in capsys.readouterr().err
        mock_call.assert_not_awaited()

    def test_malformed_param(self):
        with pytest.raises(SystemExit):
            main(["stocks_quote", "AAPL", "--param", "novalue"])

    def test_api_key_and_timeout_options(self):
        cli = AxionCLI()
        cli.args = cli.parser.parse_args(["stocks_quote", "AAPL", "--api-key", "cli-key", "--timeout", "7"])

        config = cli._build_config()

        assert config.api_key == "cli-key"
        assert config.timeout == 7.0

    def test_package_logger_configured(self, tmp_path):
        """Request tracing from axion.clients.* reaches configured handlers."""
        with patch("axion.config.LoggingConfig.LOG_DIR", tmp_path):
            assert main(["--list"]) == 0

        api_logger = logging.getLogger("axion")
        assert api_logger.handlers
        assert logging.getLogger("axion.clients.executor").parent is api_logger
        assert logging.getLogger("axion.main").parent is api_logger
