"""Feature extraction and horizon labeling for top-of-book snapshots."""

from loblabel.features.deadband import Label, classify, deadband
from loblabel.features.extractor import (
    FeatureExtractor,
    FeatureRecord,
    compute_features,
    guarded_div,
)
from loblabel.features.labeler import LabeledSample, PendingEntry, StreamingLabeler

__all__ = [
    "FeatureExtractor",
    "FeatureRecord",
    "Label",
    "LabeledSample",
    "PendingEntry",
    "StreamingLabeler",
    "classify",
    "compute_features",
    "deadband",
    "guarded_div",
]
