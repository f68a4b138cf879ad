"""Core domain types for the FETP decision aid.

Responsibilities:
  - Hold attribute identifiers, enums and immutable result carriers.
  - Must not perform I/O or model evaluation.
"""
