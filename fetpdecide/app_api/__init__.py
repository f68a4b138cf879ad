"""Boundary layer: form parsing, DTOs and the decision-aid facade."""
