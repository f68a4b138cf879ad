"""Discrete-choice uptake model: config loading, utility and classification."""
