"""Adapters – httpx transport, Elasticsearch backend, FastAPI surface."""
