"""Session-scoped saved scenarios and their CSV export."""
