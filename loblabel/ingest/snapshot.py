"""Top-of-book snapshot as read from the input stream."""

from collections.abc import Sequence
from dataclasses import dataclass

BOOK_DEPTH = 5
TIMESTAMP_COLUMN = "local_timestamp"

BID_PRICE_COLUMNS = [f"bid_price_{i}" for i in range(1, BOOK_DEPTH + 1)]
BID_QTY_COLUMNS = [f"bid_qty_{i}" for i in range(1, BOOK_DEPTH + 1)]
ASK_PRICE_COLUMNS = [f"ask_price_{i}" for i in range(1, BOOK_DEPTH + 1)]
ASK_QTY_COLUMNS = [f"ask_qty_{i}" for i in range(1, BOOK_DEPTH + 1)]

# Column order of the input header
SNAPSHOT_COLUMNS = [
    TIMESTAMP_COLUMN,
    *BID_PRICE_COLUMNS,
    *BID_QTY_COLUMNS,
    *ASK_PRICE_COLUMNS,
    *ASK_QTY_COLUMNS,
]


@dataclass(frozen=True)
class Snapshot:
    """Top-5 book state at one instant.

    Levels are ordered by proximity to the touch (index 0 = best).
    """

    timestamp_ms: float
    bid_prices: tuple[float, ...]
    bid_qtys: tuple[float, ...]
    ask_prices: tuple[float, ...]
    ask_qtys: tuple[float, ...]

    @property
    def best_bid(self) -> float:
        return self.bid_prices[0]

    @property
    def best_ask(self) -> float:
        return self.ask_prices[0]

    @classmethod
    def from_values(cls, values: Sequence[float]) -> "Snapshot":
        """Build a snapshot from values laid out in SNAPSHOT_COLUMNS order."""
        if len(values) != len(SNAPSHOT_COLUMNS):
            raise ValueError(
                f"expected {len(SNAPSHOT_COLUMNS)} values, got {len(values)}"
            )
        d = BOOK_DEPTH
        return cls(
            timestamp_ms=values[0],
            bid_prices=tuple(values[1 : 1 + d]),
            bid_qtys=tuple(values[1 + d : 1 + 2 * d]),
            ask_prices=tuple(values[1 + 2 * d : 1 + 3 * d]),
            ask_qtys=tuple(values[1 + 3 * d : 1 + 4 * d]),
        )

