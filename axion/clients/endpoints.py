"""
Axion API endpoint catalog.

Each endpoint is a path template plus the query parameters it accepts.
AxionClient generates one coroutine method per entry in ENDPOINTS, so adding
an endpoint means adding a row here.
"""

from dataclasses import dataclass
from string import Formatter
from typing import Any, Optional

from .query import build_query


@dataclass(frozen=True)
class Param:
    """Query parameter accepted by an endpoint.

    Attributes:
        name: Python keyword argument name
        key: Query string key sent to the API
        kind: "str", "non_negative_int" (negative values are omitted, 0 is
            sent) or "positive_int" (values <= 0 are omitted)
        required: Required parameters are taken positionally after the
            path placeholders
    """

    name: str
    key: str
    kind: str = "str"
    required: bool = False

    def encode(self, value: Any) -> Any:
        """Normalize a caller value; None means "omit from the query"."""
        if value is None:
            return None
        if self.kind == "non_negative_int":
            number = int(value)
            return number if number >= 0 else None
        if self.kind == "positive_int":
            number = int(value)
            return number if number > 0 else None
        return value


@dataclass(frozen=True)
class Endpoint:
    """One (path template, parameter set) pair.

    Path placeholders are substituted verbatim: identifiers are neither
    validated nor escaped.
    """

    name: str
    path: str
    params: tuple[Param, ...] = ()
    description: str = ""

    @property
    def path_fields(self) -> tuple[str, ...]:
        return tuple(
            field for _, field, _, _ in Formatter().parse(self.path) if field
        )

    @property
    def positional(self) -> tuple[str, ...]:
        """Argument names accepted positionally, in order."""
        return self.path_fields + tuple(p.name for p in self.params if p.required)

    def signature(self) -> str:
        """Human-readable call signature, e.g. ``stocks_prices(ticker, *, from_date=None, ...)``."""
        args = list(self.positional)
        optional = [f"{p.name}=None" for p in self.params if not p.required]
        if optional:
            args.append("*")
            args.extend(optional)
        return f"{self.name}({', '.join(args)})"

    def render(self, *args: Any, **kwargs: Any) -> tuple[str, Optional[str]]:
        """Build the request path and query string for this endpoint.

        Args:
            *args: Path placeholders, then required parameters, in order
            **kwargs: Any argument by name

        Returns:
            Tuple of (path, query); query is None when no parameter is set

        Raises:
            TypeError: Wrong number of arguments, unknown keyword, or a
                missing required argument
        """
        positional = self.positional
        if len(args) > len(positional):
            raise TypeError(
                f"{self.name}() takes {len(positional)} positional arguments "
                f"but {len(args)} were given"
            )

        values: dict[str, Any] = dict(zip(positional, args))
        known = set(positional) | {p.name for p in self.params}
        for key, value in kwargs.items():
            if key not in known:
                raise TypeError(f"{self.name}() got an unexpected keyword argument '{key}'")
            if key in values:
                raise TypeError(f"{self.name}() got multiple values for argument '{key}'")
            values[key] = value

        missing = [name for name in positional if values.get(name) is None]
        if missing:
            raise TypeError(
                f"{self.name}() missing required argument(s): {', '.join(missing)}"
            )

        path = self.path.format(**{field: values[field] for field in self.path_fields})
        query = build_query(
            (param.key, param.encode(values.get(param.name))) for param in self.params
        )
        return path, query


# Shared parameter sets
_PRICES = (
    Param("from_date", "from"),
    Param("to_date", "to"),
    Param("frame", "frame"),
)
_COUNTRY_EXCHANGE = (Param("country", "country"), Param("exchange", "exchange"))
_EXCHANGE = (Param("exchange", "exchange"),)
_QUERY = (Param("query", "query", required=True),)
_PERIODS = (Param("periods", "periods", "positive_int"),)
_YEAR_QUARTER = (
    Param("year", "year", "positive_int"),
    Param("quarter", "quarter", "positive_int"),
)
_LIMIT = (Param("limit", "limit", "positive_int"),)


def _market(family: str, ticker_params: tuple[Param, ...]) -> tuple[Endpoint, ...]:
    return (
        Endpoint(f"{family}_tickers", f"{family}/tickers", ticker_params,
                 f"List available {family} tickers."),
        Endpoint(f"{family}_quote", f"{family}/{{ticker}}", (),
                 f"Get the current {family} quote for a ticker."),
        Endpoint(f"{family}_prices", f"{family}/{{ticker}}/prices", _PRICES,
                 f"Get historical {family} prices for a ticker."),
    )


def _per_ticker(family: str, route: str, names: tuple[str, ...],
                params: tuple[Param, ...] = ()) -> tuple[Endpoint, ...]:
    """Endpoints shaped ``<route>/{ticker}/<segment>``; '-' in a name maps to '_'."""
    return tuple(
        Endpoint(f"{family}_{segment.replace('-', '_').replace('/', '_')}",
                 f"{route}/{{ticker}}/{segment}", params)
        for segment in names
    )


ENDPOINTS: tuple[Endpoint, ...] = (
    # Credit
    Endpoint("credit_search", "credit/search", _QUERY, "Search credit entities."),
    Endpoint("credit_ratings", "credit/ratings/{entity_id}", (),
             "Get credit ratings for an entity."),

    # ESG
    Endpoint("esg_data", "esg/{ticker}", (), "Get ESG scores for a ticker."),

    # ETFs
    *_per_ticker("etfs", "etfs", ("fund", "holdings", "exposure")),

    # Supply chain
    *_per_ticker("supply_chain", "supply-chain", ("customers", "peers", "suppliers")),

    # Markets
    *_market("stocks", _COUNTRY_EXCHANGE),
    *_market("crypto", (Param("asset_type", "type"),)),
    *_market("forex", _COUNTRY_EXCHANGE),
    *_market("futures", _EXCHANGE),
    *_market("indices", _EXCHANGE),

    # Economic data
    Endpoint("econ_search", "econ/search", _QUERY, "Search economic series."),
    Endpoint("econ_dataset", "econ/dataset/{series_id}", (),
             "Get observations for an economic series."),
    Endpoint(
        "econ_calendar",
        "econ/calendar",
        (
            Param("from_date", "from"),
            Param("to_date", "to"),
            Param("country", "country"),
            Param("min_importance", "minImportance", "non_negative_int"),
            Param("currency", "currency"),
            Param("category", "category"),
        ),
        "Get the economic events calendar.",
    ),

    # News
    Endpoint("news_general", "news", (), "Get general market news."),
    Endpoint("news_company", "news/{ticker}", (), "Get news for a company."),
    Endpoint("news_country", "news/country/{country}", (), "Get news for a country."),
    Endpoint("news_category", "news/category/{category}", (), "Get news for a category."),

    # Sentiment
    *_per_ticker("sentiment", "sentiment", ("all", "social", "news", "analyst")),

    # Company profiles
    *_per_ticker("profiles", "profiles", (
        "asset", "recommendation", "cashflow", "statistics", "income",
        "fund", "summary", "insiders", "calendar", "balancesheet",
        "ownership", "earnings", "info", "activity", "transactions",
        "financials", "traffic",
    )),
    Endpoint("profiles_index_trend", "profiles/{ticker}/trend/index"),
    Endpoint("profiles_earnings_trend", "profiles/{ticker}/trend/earnings"),
    Endpoint("profiles_institution_ownership", "profiles/{ticker}/institution"),

    # TODO: confirm the filings, financials, insiders and earnings routes below
    # against the live API; only their parameter names are documented.

    # Filings
    Endpoint("filings_list", "filings/{ticker}", _LIMIT,
             "List recent filings for a ticker."),
    Endpoint("filings_form", "filings/{ticker}/forms/{form}", _YEAR_QUARTER + _LIMIT,
             "List filings of one form type, e.g. 10-K."),
    Endpoint("filings_desc_forms", "filings/desc/forms", (),
             "Describe the supported filing form types."),
    Endpoint(
        "filings_search",
        "filings/search",
        _YEAR_QUARTER + (Param("form", "form"), Param("ticker", "ticker")) + _LIMIT,
        "Search filings across companies.",
    ),

    # Financial statements
    *_per_ticker("financials", "financials", (
        "revenue", "net-income", "total-assets", "total-liabilities",
        "stockholders-equity", "operating-cash-flow", "free-cash-flow",
        "snapshot", "metrics",
    ), _PERIODS),
    Endpoint("financials_earnings_per_share", "financials/{ticker}/eps", _PERIODS),

    # Insider activity
    *_per_ticker("insiders", "insiders", (
        "funds", "individuals", "institutions", "ownership", "activity", "transactions",
    )),

    # Earnings
    *_per_ticker("earnings", "earnings", ("history", "trend", "index")),
    Endpoint("earnings_report", "earnings/{ticker}/report", _YEAR_QUARTER,
             "Get the earnings report for a fiscal period."),
)


_BY_NAME: dict[str, Endpoint] = {endpoint.name: endpoint for endpoint in ENDPOINTS}


def get_endpoint(name: str) -> Endpoint:
    """Look up an endpoint by name.

    Raises:
        KeyError: Unknown endpoint name
    """
    try:
        return _BY_NAME[name]
    except KeyError:
        raise KeyError(f"Unknown Axion endpoint: {name!r}") from None


def list_endpoints() -> list[str]:
    return [endpoint.name for endpoint in ENDPOINTS]
