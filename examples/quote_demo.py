"""
Axion Client Demo

Demonstrates usage of AxionClient for fetching financial data from the
Axion API.

Run this script to see examples of:
- Fetching a single quote and reading fields from the document
- Fetching historical prices with query parameters
- Handling HTTP errors without exceptions
- Opting in to exceptions with raise_for_error()

Set AXION_API_KEY in the environment or a .env file first.
"""

import asyncio

from axion import APIError, AxionClient, AxionResponse, TransportError


def print_stock_info(response: AxionResponse) -> None:
    """Print selected fields of a quote document."""
    if response.error or not isinstance(response.data, dict):
        print("No valid JSON data to parse")
        return

    quote = response.data
    print("Stock Information:")
    for field in ("symbol", "name"):
        if isinstance(quote.get(field), str):
            print(f"  {field.title()}: {quote[field]}")
    for field, label in (("price", "Price"), ("change", "Change")):
        if isinstance(quote.get(field), (int, float)):
            print(f"  {label}: ${quote[field]:.2f}")
    if isinstance(quote.get("changePercent"), (int, float)):
        print(f"  Change %: {quote['changePercent']:.2f}%")


async def demo_single_quote(client: AxionClient) -> None:
    """Demonstrate fetching a single quote."""
    print("\n=== Single Quote Demo ===")
    response = await client.stocks_quote("AAPL")

    if response.error:
        print(f"Error: {response.error}")
        return

    print_stock_info(response)

    print("All fields in response:")
    for key, value in (response.data or {}).items():
        shown = value if isinstance(value, (str, int, float, bool)) else "[complex type]"
        print(f"  {key}: {shown}")


async def demo_historical_prices(client: AxionClient) -> None:
    """Demonstrate fetching price history with optional parameters."""
    print("\n=== Historical Prices Demo ===")
    response = await client.stocks_prices(
        "MSFT", from_date="2024-01-01", to_date="2024-01-31", frame="daily",
    )

    if response.error:
        print(f"Error ({response.status}): {response.error}")
    elif response.data is not None:
        print(f"Received {len(response.data)} price rows")
    else:
        print("Empty response")


async def demo_error_handling(client: AxionClient) -> None:
    """Demonstrate both error-handling styles."""
    print("\n=== Error Handling Demo ===")
    response = await client.stocks_quote("NOT-A-TICKER")
    print(f"Status: {response.status}, error: {response.error}")

    try:
        (await client.filings_form("AAPL", "10-K", year=2024)).raise_for_error()
        print("Filings fetched")
    except TransportError as e:
        print(f"Network problem: {e}")
    except APIError as e:
        print(f"API error {e.status_code}: {e.message}")


async def main() -> None:
    """Run all demos."""
    print("=" * 60)
    print("Axion Client Demo")
    print("=" * 60)

    async with AxionClient.from_env() as client:
        await demo_single_quote(client)
        await demo_historical_prices(client)
        await demo_error_handling(client)

        print(f"\nClient stats: {client.get_stats()}")


if __name__ == "__main__":
    asyncio.run(main())
