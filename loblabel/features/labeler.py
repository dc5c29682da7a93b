"""Streaming labeler that joins each feature record with its future mid price."""

from collections import deque
from dataclasses import dataclass

from loblabel.config import LabelingConfig
from loblabel.features.deadband import Label, classify
from loblabel.features.extractor import FeatureRecord


@dataclass(frozen=True)
class PendingEntry:
    """A feature record waiting for its horizon to elapse."""

    features: FeatureRecord
    due_ts: float  # ts_ms + horizon_sec * 1000


@dataclass(frozen=True)
class LabeledSample:
    """A feature record paired with its label."""

    features: FeatureRecord
    label: Label
    mid_future: float  # Mid price of the record that resolved the label
    ts_future_ms: float  # Timestamp of that record


class StreamingLabeler:
    """Generate three-way labels after a fixed horizon in event time.

    Records are buffered in arrival order together with their due time.
    Each new record flushes every buffered record whose due time it has
    reached, labeling them against its own mid price. Because timestamps
    are non-decreasing and the horizon is fixed, arrival order is also
    due-time order, so only the front of the queue needs to be checked.

    Records still buffered when the stream ends never see their horizon
    and are not labeled.
    """

    def __init__(self, config: LabelingConfig | None = None):
        """Initialize the labeler.

        Args:
            config: Horizon and deadband parameters. Defaults to LabelingConfig().
        """
        self._config = config or LabelingConfig()
        self._pending: deque[PendingEntry] = deque()

    @property
    def config(self) -> LabelingConfig:
        return self._config

    @property
    def pending_count(self) -> int:
        """Current number of records waiting for a label."""
        return len(self._pending)

    def add(self, features: FeatureRecord) -> list[LabeledSample]:
        """Add a new record and return every buffered record it resolves.

        Args:
            features: Next feature record in the stream.

        Returns:
            Labeled samples in arrival order; empty if none are due.
        """
        cfg = self._config
        ready: list[LabeledSample] = []

        while self._pending and self._pending[0].due_ts <= features.ts_ms:
            entry = self._pending.popleft()
            now = entry.features
            label = classify(
                now.mid,
                features.mid,
                now.rel_spread,
                cfg.eps_min,
                cfg.alpha,
                cfg.cost_bp,
            )
            ready.append(
                LabeledSample(
                    features=now,
                    label=label,
                    mid_future=features.mid,
                    ts_future_ms=features.ts_ms,
                )
            )

        due_ts = features.ts_ms + cfg.horizon_ms
        self._pending.append(PendingEntry(features=features, due_ts=due_ts))
        return ready

    def discard_pending(self) -> int:
        """Drop records whose horizon was never reached.

        Returns:
            Number of records dropped.
        """
        dropped = len(self._pending)
        self._pending.clear()
        return dropped
