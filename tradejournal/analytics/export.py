"""CSV export of trades."""

from datetime import date, datetime
from typing import Any, Sequence

from tradejournal.models import Trade


def _cell(value: Any) -> str:
    if value is None:
        text = ""
    elif isinstance(value, (list, tuple)):
        text = ",".join(str(v) for v in value)
    elif isinstance(value, (date, datetime)):
        text = value.isoformat()
    else:
        text = str(value)
    return '"' + text.replace('"', '""') + '"'


def _stored_fields(trade: Trade) -> dict[str, Any]:
    # Derived P&L counts as set, defaults filled in by the model do not
    return trade.model_dump(by_alias=True, exclude_unset=True)


def export_csv(trades: Sequence[Trade]) -> str:
    """Serialize trades to CSV text.

    The header lists the store field names present on the first trade,
    including its derived P&L values. Later trades are written under that
    header, with an empty cell for any column they do not carry. Every
    value is quoted, with embedded quotes doubled.

    Args:
        trades: Trades to export.

    Returns:
        CSV text, or an empty string when there are no trades.
    """
    if not trades:
        return ""

    header = list(_stored_fields(trades[0]).keys())
    lines = [",".join(header)]
    for trade in trades:
        row = _stored_fields(trade)
        lines.append(",".join(_cell(row.get(name)) for name in header))
    return "\n".join(lines)
