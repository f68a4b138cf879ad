"""Attribute identifiers, enums and immutable domain models."""
