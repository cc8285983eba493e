"""
Axion API Client - CLI Entry Point.

Command-line interface for calling a single Axion API endpoint and printing
the JSON result.

Usage:
    # Current quote
    python -m axion.main stocks_quote AAPL

    # Historical prices with query parameters
    python -m axion.main stocks_prices AAPL --param from_date=2024-01-01 --param frame=daily

    # Required query argument
    python -m axion.main econ_search "consumer price index"

    # Catalog listing
    python -m axion.main --list

Example:
    >>> python -m axion.main crypto_quote BTC-USD
    {
      "symbol": "BTC-USD",
      ...
    }
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, Optional, Sequence

from axion.clients.client import AxionClient, AxionClientConfig
from axion.clients.endpoints import ENDPOINTS, get_endpoint
from axion.clients.response import AxionResponse
from axion.config import AppConfig
from axion.utils.exceptions import AxionError
from axion.utils.logger import get_api_logger

# Named explicitly so `python -m axion.main` also logs under the package logger
logger = logging.getLogger("axion.main")


def _parse_param(raw: str) -> tuple[str, str]:
    if "=" not in raw:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got '{raw}'")
    key, value = raw.split("=", 1)
    return key.strip(), value


class AxionCLI:
    """
    Command-line interface for the Axion API client.

    Features:
        - Any catalog endpoint by name
        - Query parameters as --param KEY=VALUE
        - API key from --api-key or AXION_API_KEY
        - JSON output on stdout, errors on stderr
    """

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()
        self.args = None

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create and configure argument parser.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="axion",
            description="Call an Axion financial-data API endpoint and print the JSON result.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  python -m axion.main stocks_quote AAPL
  python -m axion.main stocks_prices AAPL --param from_date=2024-01-01
  python -m axion.main filings_form AAPL 10-K --param year=2024
  python -m axion.main --list

Configuration:
  Set environment variables in .env file:
    - AXION_API_KEY: Axion API key (optional, unauthenticated if unset)
    - AXION_REQUEST_TIMEOUT: Request timeout in seconds (default: 30)
            """,
        )

        parser.add_argument(
            "endpoint",
            nargs="?",
            help="Endpoint name (see --list)",
        )
        parser.add_argument(
            "args",
            nargs="*",
            help="Path identifiers and required arguments, in order",
            metavar="ARG",
        )
        parser.add_argument(
            "--param",
            action="append",
            type=_parse_param,
            default=[],
            help="Optional parameter as KEY=VALUE (repeatable)",
            metavar="KEY=VALUE",
        )
        parser.add_argument(
            "--api-key",
            help="API key (overrides AXION_API_KEY)",
        )
        parser.add_argument(
            "--timeout",
            type=float,
            help="Request timeout in seconds",
        )
        parser.add_argument(
            "--list",
            action="store_true",
            help="List available endpoints and exit",
        )

        return parser

    def list_endpoints(self) -> None:
        """Print every catalog endpoint with its signature and path."""
        for endpoint in ENDPOINTS:
            print(f"{endpoint.signature():<70} GET /{endpoint.path}")

    def _build_config(self) -> AxionClientConfig:
        config = AxionClientConfig.from_env()
        if self.args.api_key:
            config.api_key = self.args.api_key
        if self.args.timeout is not None:
            config.timeout = self.args.timeout
        return config

    async def run_endpoint(self) -> AxionResponse:
        """Execute the requested endpoint.

        Returns:
            Response from the API
        """
        endpoint = get_endpoint(self.args.endpoint)
        kwargs: dict[str, Any] = dict(self.args.param)

        # Validate before opening a session
        endpoint.render(*self.args.args, **kwargs)

        async with AxionClient(config=self._build_config()) as client:
            return await client.call(endpoint.name, *self.args.args, **kwargs)

    def print_response(self, response: AxionResponse) -> int:
        """
        Print a response and compute the exit code.

        Args:
            response: Response to display

        Returns:
            Process exit code (0 on success)
        """
        if response.error:
            status = f"HTTP {response.status}" if response.status is not None else "transport"
            print(f"Error ({status}): {response.error}", file=sys.stderr)
            return 1

        if response.data is None:
            logger.info(f"Empty response (HTTP {response.status})")
            return 0

        print(json.dumps(response.data, indent=2, ensure_ascii=False))
        return 0

    def run(self, argv: Optional[Sequence[str]] = None) -> int:
        """
        Main entry point for CLI execution.

        Args:
            argv: Argument list (defaults to sys.argv[1:])

        Returns:
            Process exit code
        """
        self.args = self.parser.parse_args(argv)
        get_api_logger()

        if self.args.list:
            self.list_endpoints()
            return 0

        if not self.args.endpoint:
            self.parser.error("an endpoint name is required (use --list to see them)")

        valid, errors = AppConfig.validate()
        if not valid:
            for error in errors:
                logger.debug(f"Configuration note: {error}")

        try:
            response = asyncio.run(self.run_endpoint())
        except (KeyError, TypeError, ValueError) as e:
            print(f"Invalid request: {e}", file=sys.stderr)
            return 2
        except AxionError as e:
            logger.error(f"Client error: {e}")
            return 1

        return self.print_response(response)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the CLI and return its exit code."""
    return AxionCLI().run(argv)


if __name__ == "__main__":
    sys.exit(main())
