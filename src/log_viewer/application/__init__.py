"""Application layer – log search use case."""
