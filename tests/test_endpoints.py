"""
Unit tests for the endpoint catalog.
"""

import pytest

from axion.clients.endpoints import (
    ENDPOINTS,
    Endpoint,
    Param,
    get_endpoint,
    list_endpoints,
)


class TestCatalog:
    """Test catalog contents."""

    def test_names_are_unique(self):
        names = list_endpoints()
        assert len(names) == len(set(names))

    def test_catalog_size(self):
        assert len(ENDPOINTS) >= 75

    def test_names_are_identifiers(self):
        for name in list_endpoints():
            assert name.isidentifier(), name

    def test_paths_are_relative(self):
        for endpoint in ENDPOINTS:
            assert not endpoint.path.startswith("/"), endpoint.name
            assert "?" not in endpoint.path, endpoint.name

    @pytest.mark.parametrize("name,path", [
        ("stocks_quote", "stocks/{ticker}"),
        ("stocks_prices", "stocks/{ticker}/prices"),
        ("supply_chain_peers", "supply-chain/{ticker}/peers"),
        ("profiles_earnings_trend", "profiles/{ticker}/trend/earnings"),
        ("profiles_institution_ownership", "profiles/{ticker}/institution"),
        ("filings_form", "filings/{ticker}/forms/{form}"),
        ("financials_net_income", "financials/{ticker}/net-income"),
        ("credit_ratings", "credit/ratings/{entity_id}"),
        ("news_general", "news"),
    ])
    def test_known_paths(self, name, path):
        assert get_endpoint(name).path == path

    def test_unknown_endpoint(self):
        with pytest.raises(KeyError, match="stocks_ticker"):
            get_endpoint("stocks_ticker")


class TestRender:
    """Test Endpoint.render()."""

    def test_path_only(self):
        assert get_endpoint("profiles_info").render("AAPL") == ("profiles/AAPL/info", None)

    def test_no_arguments(self):
        assert get_endpoint("news_general").render() == ("news", None)

    def test_optional_params_in_declared_order(self):
        path, query = get_endpoint("stocks_prices").render(
            "AAPL", frame="daily", from_date="2024-01-01",
        )

        assert path == "stocks/AAPL/prices"
        assert query == "from=2024-01-01&frame=daily"

    def test_all_params_absent_gives_no_query(self):
        assert get_endpoint("stocks_tickers").render() == ("stocks/tickers", None)
        assert get_endpoint("stocks_tickers").render(country=None) == ("stocks/tickers", None)

    def test_identifiers_substituted_verbatim(self):
        path, _ = get_endpoint("filings_form").render("BRK.B", "10-K/A")
        assert path == "filings/BRK.B/forms/10-K/A"

    def test_required_query_param(self):
        path, query = get_endpoint("econ_search").render("inflation rate")

        assert path == "econ/search"
        assert query == "query=inflation%20rate"

    def test_required_query_param_by_keyword(self):
        assert get_endpoint("credit_search").render(query="Apple") == ("credit/search", "query=Apple")

    def test_crypto_type_param(self):
        assert get_endpoint("crypto_tickers").render(asset_type="coin") == ("crypto/tickers", "type=coin")

    @pytest.mark.parametrize("periods,expected", [
        (4, "periods=4"),
        ("8", "periods=8"),
        (0, None),
        (-1, None),
        (None, None),
    ])
    def test_positive_int_param(self, periods, expected):
        _, query = get_endpoint("financials_revenue").render("AAPL", periods=periods)
        assert query == expected

    def test_int_param_keeps_zero(self):
        _, query = get_endpoint("econ_calendar").render(
            from_date="2024-01-01", country="US", min_importance=0, category="inflation",
        )
        assert query == "from=2024-01-01&country=US&minImportance=0&category=inflation"

    @pytest.mark.parametrize("importance,expected", [
        (-1, "country=US"),
        ("-3", "country=US"),
        (3, "country=US&minImportance=3"),
    ])
    def test_negative_importance_omitted(self, importance, expected):
        _, query = get_endpoint("econ_calendar").render(country="US", min_importance=importance)
        assert query == expected

    def test_filings_search(self):
        _, query = get_endpoint("filings_search").render(
            year=2024, quarter=2, form="10-Q", ticker="MSFT", limit=10,
        )
        assert query == "year=2024&quarter=2&form=10-Q&ticker=MSFT&limit=10"

    def test_earnings_report(self):
        path, query = get_endpoint("earnings_report").render("NVDA", year=2025, quarter=1)

        assert path == "earnings/NVDA/report"
        assert query == "year=2025&quarter=1"

    def test_path_arg_by_keyword(self):
        assert get_endpoint("stocks_quote").render(ticker="MSFT") == ("stocks/MSFT", None)


class TestRenderErrors:
    """Test argument validation."""

    def test_missing_path_argument(self):
        with pytest.raises(TypeError, match="missing required argument"):
            get_endpoint("stocks_quote").render()

    def test_missing_required_query(self):
        with pytest.raises(TypeError, match="query"):
            get_endpoint("econ_search").render()

    def test_too_many_positional(self):
        with pytest.raises(TypeError, match="positional"):
            get_endpoint("stocks_quote").render("AAPL", "MSFT")

    def test_unknown_keyword(self):
        with pytest.raises(TypeError, match="unexpected keyword argument 'limit'"):
            get_endpoint("stocks_prices").render("AAPL", limit=5)

    def test_duplicate_argument(self):
        with pytest.raises(TypeError, match="multiple values"):
            get_endpoint("stocks_quote").render("AAPL", ticker="MSFT")

    def test_bad_integer(self):
        with pytest.raises(ValueError):
            get_endpoint("filings_list").render("AAPL", limit="ten")


class TestEndpointModel:
    """Test Endpoint helpers on an ad-hoc definition."""

    def test_fields_and_signature(self):
        endpoint = Endpoint(
            "things_list",
            "things/{group}/{item}",
            (Param("q", "q", required=True), Param("limit", "limit", "positive_int")),
        )

        assert endpoint.path_fields == ("group", "item")
        assert endpoint.positional == ("group", "item", "q")
        assert endpoint.signature() == "things_list(group, item, q, *, limit=None)"
        assert endpoint.render("a", "b", "x", limit=3) == ("things/a/b", "q=x&limit=3")
