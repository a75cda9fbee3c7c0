"""Exhaustive minimax search and move proposal."""
