"""Schemas for the labeled feature output.

Schema conventions:
- Every feature column is a 64-bit float, including ts_ms and dt_ms
- label is one of the strings "down", "flat", "up"
- Column order matches the CSV header
"""

import pyarrow as pa
from pyiceberg.schema import Schema
from pyiceberg.types import DoubleType, NestedField, StringType

from loblabel.features.labeler import LabeledSample

FEATURE_COLUMNS = [
    "ts_ms",
    "mid",
    "spread",
    "rel_spread",
    "microprice",
    "imb1",
    "imb3",
    "imb5",
    "dt_ms",
]
LABEL_COLUMN = "label"
OUTPUT_COLUMNS = [*FEATURE_COLUMNS, LABEL_COLUMN]

LABELED_ARROW_SCHEMA = pa.schema(
    [pa.field(name, pa.float64(), nullable=False) for name in FEATURE_COLUMNS]
    + [pa.field(LABEL_COLUMN, pa.string(), nullable=False)]
)


def _build_labeled_fields() -> list[NestedField]:
    """Build Iceberg fields for the feature columns followed by the label."""
    fields = [
        NestedField(field_id=i, name=name, field_type=DoubleType(), required=True)
        for i, name in enumerate(FEATURE_COLUMNS, start=1)
    ]
    fields.append(
        NestedField(
            field_id=len(FEATURE_COLUMNS) + 1,
            name=LABEL_COLUMN,
            field_type=StringType(),
            required=True,
        )
    )
    return fields


LABELED_FEATURES_SCHEMA = Schema(*_build_labeled_fields())


def sample_to_row(sample: LabeledSample) -> dict:
    """Convert a LabeledSample to a dict keyed by output column."""
    f = sample.features
    return {
        "ts_ms": f.ts_ms,
        "mid": f.mid,
        "spread": f.spread,
        "rel_spread": f.rel_spread,
        "microprice": f.microprice,
        "imb1": f.imb1,
        "imb3": f.imb3,
        "imb5": f.imb5,
        "dt_ms": f.dt_ms,
        "label": sample.label.value,
    }
