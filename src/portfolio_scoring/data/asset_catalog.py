"""Asset metadata lookup used by the insight engine."""

import logging
from abc import ABC, abstractmethod

from portfolio_scoring.models.metadata import AssetInfo, IncomeType, LiquidityTier

logger = logging.getLogger(__name__)

_INCOME = IncomeType.INCOME
_GROWTH = IncomeType.GROWTH
_HIGH = LiquidityTier.HIGH
_MEDIUM = LiquidityTier.MEDIUM

# symbol, name, sector, region, asset class, income type, liquidity
_CATALOG_ROWS: tuple[tuple[str, str, str, str, str, IncomeType, LiquidityTier], ...] = (
    # Large caps
    ("RELIANCE", "Reliance Industries Limited", "Energy & Petrochemicals",
     "India", "Large Cap Equity", _GROWTH, _HIGH),
    ("TCS", "Tata Consultancy Services", "Information Technology",
     "India", "Large Cap Equity", _GROWTH, _HIGH),
    ("HDFCBANK", "HDFC Bank Limited", "Banking & Financial Services",
     "India", "Large Cap Equity", _INCOME, _HIGH),
    ("INFY", "Infosys Limited", "Information Technology",
     "India", "Large Cap Equity", _GROWTH, _HIGH),
    ("ICICIBANK", "ICICI Bank Limited", "Banking & Financial Services",
     "India", "Large Cap Equity", _INCOME, _HIGH),
    ("HINDUNILVR", "Hindustan Unilever Limited", "Consumer Goods",
     "India", "Large Cap Equity", _GROWTH, _HIGH),
    ("ITC", "ITC Limited", "Consumer Goods",
     "India", "Large Cap Equity", _INCOME, _HIGH),
    ("KOTAKBANK", "Kotak Mahindra Bank Limited", "Banking & Financial Services",
     "India", "Large Cap Equity", _GROWTH, _HIGH),
    ("LT", "Larsen & Toubro Limited", "Infrastructure & Construction",
     "India", "Large Cap Equity", _GROWTH, _HIGH),
    ("SBIN", "State Bank of India", "Banking & Financial Services",
     "India", "Large Cap Equity", _INCOME, _HIGH),
    # Mid caps
    ("BAJFINANCE", "Bajaj Finance Limited", "Banking & Financial Services",
     "India", "Mid Cap Equity", _GROWTH, _HIGH),
    ("MARUTI", "Maruti Suzuki India Limited", "Automotive",
     "India", "Large Cap Equity", _GROWTH, _HIGH),
    # IT
    ("WIPRO", "Wipro Limited", "Information Technology",
     "India", "Large Cap Equity", _GROWTH, _HIGH),
    ("TECHM", "Tech Mahindra Limited", "Information Technology",
     "India", "Large Cap Equity", _GROWTH, _HIGH),
    ("HCLTECH", "HCL Technologies Limited", "Information Technology",
     "India", "Large Cap Equity", _GROWTH, _HIGH),
    # Pharma
    ("SUNPHARMA", "Sun Pharmaceutical Industries", "Pharmaceuticals",
     "India", "Large Cap Equity", _GROWTH, _HIGH),
    ("DRREDDY", "Dr. Reddys Laboratories", "Pharmaceuticals",
     "India", "Large Cap Equity", _GROWTH, _HIGH),
    # Metals & mining
    ("TATASTEEL", "Tata Steel Limited", "Metals & Mining",
     "India", "Large Cap Equity", _GROWTH, _HIGH),
    ("HINDALCO", "Hindalco Industries Limited", "Metals & Mining",
     "India", "Large Cap Equity", _GROWTH, _HIGH),
    # Power & utilities
    ("NTPC", "NTPC Limited", "Power & Utilities",
     "India", "Large Cap Equity", _INCOME, _HIGH),
    ("POWERGRID", "Power Grid Corporation", "Power & Utilities",
     "India", "Large Cap Equity", _INCOME, _HIGH),
    # International and commodity ETFs
    ("NASDAQ100", "NASDAQ 100 ETF", "Technology",
     "United States", "International Equity ETF", _GROWTH, _HIGH),
    ("GOLDETF", "Gold ETF", "Commodities",
     "Global", "Commodity ETF", _INCOME, _HIGH),
    # Bonds
    ("GILT10YR", "10 Year Government Bond", "Government Securities",
     "India", "Government Bonds", _INCOME, _MEDIUM),
    ("CORPBOND", "Corporate Bond Fund", "Corporate Debt",
     "India", "Corporate Bonds", _INCOME, _MEDIUM),
    # Real estate
    ("REIT", "Real Estate Investment Trust", "Real Estate",
     "India", "REIT", _INCOME, _MEDIUM),
)


class AssetMetadataProvider(ABC):
    """Resolves a ticker to its descriptive metadata."""

    @abstractmethod
    def resolve(self, symbol: str) -> AssetInfo | None:
        """Return metadata for ``symbol`` or None when it is unknown."""
        ...


class StaticAssetCatalog(AssetMetadataProvider):
    def __init__(self, assets: list[AssetInfo] | None = None) -> None:
        if assets is None:
            assets = [_row_to_info(row) for row in _CATALOG_ROWS]
        self._assets: dict[str, AssetInfo] = {a.symbol.upper(): a for a in assets}

    def __len__(self) -> int:
        return len(self._assets)

    def resolve(self, symbol: str) -> AssetInfo | None:
        info = self._assets.get(symbol.strip().upper())
        if info is None:
            logger.debug("No metadata for %s", symbol)
        return info

    def search(self, query: str) -> list[AssetInfo]:
        term = query.strip().lower()
        return [
            a
            for a in self._assets.values()
            if term in a.symbol.lower() or term in a.name.lower()
        ]

    def sectors(self) -> list[str]:
        return _unique(a.sector for a in self._assets.values())

    def asset_classes(self) -> list[str]:
        return _unique(a.asset_class for a in self._assets.values())

    def regions(self) -> list[str]:
        return _unique(a.region for a in self._assets.values())


def _row_to_info(
    row: tuple[str, str, str, str, str, IncomeType, LiquidityTier],
) -> AssetInfo:
    symbol, name, sector, region, asset_class, income_type, liquidity = row
    return AssetInfo(
        symbol=symbol,
        name=name,
        sector=sector,
        region=region,
        asset_class=asset_class,
        income_type=income_type,
        liquidity=liquidity,
    )


def _unique(values) -> list[str]:
    return list(dict.fromkeys(values))


_default_catalog: StaticAssetCatalog | None = None


def get_default_catalog() -> StaticAssetCatalog:
    global _default_catalog
    if _default_catalog is None:
        _default_catalog = StaticAssetCatalog()
    return _default_catalog
