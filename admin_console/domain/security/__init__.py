"""Domain-level security helpers."""
