"""Streaming feature extraction and horizon labeling for LOB snapshots."""
