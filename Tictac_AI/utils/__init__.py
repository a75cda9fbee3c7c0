"""CLI parsing and match logging helpers."""
