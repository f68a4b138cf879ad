"""FETP decision aid: uptake prediction and configuration search."""
