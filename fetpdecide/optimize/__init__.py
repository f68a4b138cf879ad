"""Exhaustive configuration search and ranking over the attribute domain."""
