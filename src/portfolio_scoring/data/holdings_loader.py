import json
import logging
from pathlib import Path

import pandas as pd

from portfolio_scoring.data.asset_catalog import AssetMetadataProvider
from portfolio_scoring.models.portfolio import AssetType, Holding, Position

logger = logging.getLogger(__name__)

UNKNOWN = "Unknown"

_COLUMN_ALIASES = {
    "ticker": "symbol",
    "market_value": "value",
    "amount": "value",
    "assetclass": "asset_class",
}


def build_holdings(
    positions: list[Position],
    provider: AssetMetadataProvider | None = None,
) -> list[Holding]:
    """Weight raw positions by value and fill in metadata where missing."""
    total_value = sum(p.value for p in positions)

    holdings: list[Holding] = []
    for p in positions:
        symbol = p.symbol.strip().upper()
        info = provider.resolve(symbol) if provider is not None else None

        name = p.name or (info.name if info else symbol)
        sector = p.sector or (info.sector if info else UNKNOWN)
        region = p.region or (info.region if info else UNKNOWN)
        asset_class = p.asset_class or (info.asset_class if info else UNKNOWN)
        percentage = p.value / total_value * 100 if total_value > 0 else 0.0

        holdings.append(
            Holding(
                symbol=symbol,
                name=name,
                sector=sector,
                region=region,
                asset_class=asset_class,
                asset_type=AssetType.derive(asset_class, symbol),
                value=p.value,
                percentage=min(percentage, 100.0),
            )
        )
    return holdings


def load_positions(path: Path) -> list[Position]:
    """Read positions from a JSON list of objects or a CSV file."""
    if path.suffix.lower() == ".json":
        records = json.loads(path.read_text())
        if not isinstance(records, list):
            raise ValueError(f"{path} must contain a JSON list of positions")
    else:
        df = pd.read_csv(path)
        df.columns = [_normalize_column(c) for c in df.columns]
        df = df.astype(object).where(pd.notna(df), None)
        records = df.to_dict(orient="records")

    positions = [Position(**_normalize_record(r)) for r in records]
    logger.debug("Loaded %d positions from %s", len(positions), path)
    return positions


def _normalize_column(name: str) -> str:
    key = str(name).strip().lower().replace(" ", "_")
    return _COLUMN_ALIASES.get(key, key)


def _normalize_record(record: dict) -> dict:
    out = {_normalize_column(k): v for k, v in record.items()}
    if out.get("symbol") is not None:
        out["symbol"] = str(out["symbol"])
    return {k: v for k, v in out.items() if v is not None and k in Position.model_fields}
