from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ValidationError

from crypto_price_agent.errors import PriceDataError

REPORT_HEADER = "Current cryptocurrency prices:"


class PriceRecord(BaseModel):
    """One asset's quote from the simple price endpoint."""

    asset_id: str
    usd: float
    usd_24h_change: float | None = None
    usd_market_cap: float | None = None
    usd_24h_vol: float | None = None


def parse_price_payload(payload: Mapping[str, Any]) -> list[PriceRecord]:
    """Turn ``{id: {usd: ..., ...}}`` into records, keeping payload order."""
    records: list[PriceRecord] = []
    for asset_id, data in payload.items():
        if not isinstance(data, Mapping):
            raise PriceDataError(f"Malformed price entry for {asset_id!r}")
        try:
            records.append(PriceRecord(asset_id=asset_id, **data))
        except (ValidationError, TypeError) as exc:
            raise PriceDataError(f"Malformed price entry for {asset_id!r}: {exc}") from exc
    return records


def format_number(value: float) -> str:
    # Shortest plain decimal: 45230.0 -> "45230", 98.5 -> "98.5", 1.23e-05 -> "0.0000123"
    if float(value).is_integer():
        return str(int(value))
    return format(Decimal(repr(float(value))), "f")


def format_price_line(record: PriceRecord) -> str:
    line = f"{record.asset_id.upper()}: ${format_number(record.usd)} USD"
    if record.usd_24h_change is not None:
        change = round(record.usd_24h_change, 2)
        sign = "+" if change >= 0 else ""
        line += f" ({sign}{format_number(change)}% 24h)"
    return line


def format_price_report(payload: Mapping[str, Any]) -> str:
    lines = [format_price_line(record) for record in parse_price_payload(payload)]
    return f"{REPORT_HEADER}\n\n" + "\n".join(lines)
