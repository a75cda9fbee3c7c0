"""Rule engine: winning-line geometry, terminal detection, move validation."""
