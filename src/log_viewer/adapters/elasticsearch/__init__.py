"""Elasticsearch adapter – search backend over JSON/HTTP."""
from log_viewer.adapters.elasticsearch.backend import ElasticsearchSearchBackend

__all__ = ["ElasticsearchSearchBackend"]
