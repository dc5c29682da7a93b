"""Single-pass driver: snapshots -> features -> horizon labels -> sink."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol

from loblabel.config import LabelingConfig
from loblabel.features.deadband import Label
from loblabel.features.extractor import FeatureExtractor
from loblabel.features.labeler import LabeledSample, StreamingLabeler
from loblabel.ingest.snapshot import Snapshot

logger = logging.getLogger(__name__)

DEFAULT_PROGRESS_EVERY = 1_000_000


class LabeledSampleSink(Protocol):
    """Destination for labeled samples (CSV file, Iceberg table, ...)."""

    def write(self, sample: LabeledSample) -> None: ...

    def close(self) -> None: ...


@dataclass
class LabelingSummary:
    """Counts accumulated over one run."""

    rows_read: int = 0
    rows_written: int = 0
    rows_dropped: int = 0  # Never reached their horizon before end of input
    label_counts: dict[Label, int] = field(
        default_factory=lambda: {label: 0 for label in Label}
    )

    def record(self, sample: LabeledSample) -> None:
        self.rows_written += 1
        self.label_counts[sample.label] += 1

    def describe(self) -> str:
        """One-line human readable report."""
        counts = self.label_counts
        return (
            f"Done. Written rows: {self.rows_written}. Label distribution: "
            f"down={counts[Label.DOWN]}, flat={counts[Label.FLAT]}, "
            f"up={counts[Label.UP]}"
        )


class LabelingPipeline:
    """Orchestrates feature extraction and horizon labeling for one stream."""

    def __init__(self, config: LabelingConfig | None = None):
        """Initialize the pipeline.

        Args:
            config: Horizon and deadband parameters.
        """
        self.config = config or LabelingConfig()
        self.feature_extractor = FeatureExtractor()
        self.labeler = StreamingLabeler(self.config)

    def process_snapshot(self, snapshot: Snapshot) -> list[LabeledSample]:
        """Process one snapshot and return the samples it resolves.

        Args:
            snapshot: Next snapshot in the stream.

        Returns:
            Labeled samples now due, in arrival order.
        """
        features = self.feature_extractor.compute(snapshot)
        return self.labeler.add(features)

    def run(
        self,
        snapshots: Iterable[Snapshot],
        sink: LabeledSampleSink,
        progress_every: int = DEFAULT_PROGRESS_EVERY,
    ) -> LabelingSummary:
        """Label a whole stream and forward every sample to the sink.

        The sink is not closed here; its owner closes it.

        Args:
            snapshots: Snapshots in non-decreasing timestamp order.
            sink: Destination for labeled samples.
            progress_every: Log a progress line every this many input rows
                (0 disables).

        Returns:
            LabelingSummary for the run.
        """
        summary = LabelingSummary()

        for snapshot in snapshots:
            for sample in self.process_snapshot(snapshot):
                sink.write(sample)
                summary.record(sample)

            summary.rows_read += 1
            if progress_every and summary.rows_read % progress_every == 0:
                logger.info(f"Processed {summary.rows_read} rows")

        summary.rows_dropped = self.labeler.discard_pending()
        if summary.rows_dropped:
            logger.info(
                f"{summary.rows_dropped} trailing rows had no snapshot "
                f"{self.config.horizon_sec}s later and were not written"
            )
        return summary


def run_pipeline(
    snapshots: Iterable[Snapshot],
    sink: LabeledSampleSink,
    config: LabelingConfig | None = None,
    progress_every: int = DEFAULT_PROGRESS_EVERY,
) -> LabelingSummary:
    """Run a fresh LabelingPipeline over `snapshots`."""
    return LabelingPipeline(config).run(snapshots, sink, progress_every=progress_every)
