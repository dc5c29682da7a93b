"""Feature extraction from top-of-book snapshots."""

from dataclasses import dataclass

from loblabel.ingest.snapshot import Snapshot

# Denominators smaller than this in absolute value yield 0.0
DIV_EPSILON = 1e-12


def guarded_div(num: float, den: float) -> float:
    """Divide, returning 0.0 when the denominator is effectively zero."""
    if abs(den) < DIV_EPSILON:
        return 0.0
    return num / den


@dataclass(frozen=True)
class FeatureRecord:
    """Computed features for one snapshot."""

    ts_ms: float
    mid: float
    spread: float  # Absolute spread (ask - bid)
    rel_spread: float  # spread / mid
    microprice: float
    imb1: float  # Imbalance at depth 1 (-1 to 1)
    imb3: float  # Imbalance at depth 3
    imb5: float  # Imbalance at depth 5
    dt_ms: float  # Time since previous snapshot, 0 for the first one


def _imbalance(snapshot: Snapshot, depth: int) -> float:
    """Compute bid-ask quantity imbalance over the top `depth` levels.

    imbalance = (bid_qty - ask_qty) / (bid_qty + ask_qty)

    Returns value in [-1, 1] for non-negative quantities:
      +1 = bids only
      -1 = asks only
       0 = balanced
    """
    bid_qty = sum(snapshot.bid_qtys[:depth])
    ask_qty = sum(snapshot.ask_qtys[:depth])
    return guarded_div(bid_qty - ask_qty, bid_qty + ask_qty)


def compute_features(snapshot: Snapshot, prev_ts_ms: float | None) -> FeatureRecord:
    """Compute features from a snapshot.

    Args:
        snapshot: Current book state.
        prev_ts_ms: Timestamp of the previous snapshot in the stream, or
            None for the first one.

    Returns:
        FeatureRecord for this snapshot.
    """
    bid1 = snapshot.best_bid
    ask1 = snapshot.best_ask
    bid_qty1 = snapshot.bid_qtys[0]
    ask_qty1 = snapshot.ask_qtys[0]

    mid = 0.5 * (ask1 + bid1)
    spread = ask1 - bid1

    # Weighted toward the side with less resting quantity
    microprice = guarded_div(ask1 * bid_qty1 + bid1 * ask_qty1, bid_qty1 + ask_qty1)

    if prev_ts_ms is None:
        dt_ms = 0.0
    else:
        dt_ms = max(snapshot.timestamp_ms - prev_ts_ms, 0.0)

    return FeatureRecord(
        ts_ms=snapshot.timestamp_ms,
        mid=mid,
        spread=spread,
        rel_spread=guarded_div(spread, mid),
        microprice=microprice,
        imb1=_imbalance(snapshot, 1),
        imb3=_imbalance(snapshot, 3),
        imb5=_imbalance(snapshot, 5),
        dt_ms=dt_ms,
    )


class FeatureExtractor:
    """Extracts features from a stream of snapshots.

    Remembers the previous snapshot's timestamp so `dt_ms` can be computed.
    """

    def __init__(self) -> None:
        self._prev_ts_ms: float | None = None

    @property
    def prev_ts_ms(self) -> float | None:
        """Timestamp of the last snapshot seen, or None before the first."""
        return self._prev_ts_ms

    def compute(self, snapshot: Snapshot) -> FeatureRecord:
        """Compute features and advance the previous timestamp.

        Args:
            snapshot: Next snapshot in the stream.

        Returns:
            FeatureRecord for the snapshot.
        """
        features = compute_features(snapshot, self._prev_ts_ms)
        self._prev_ts_ms = features.ts_ms
        return features
