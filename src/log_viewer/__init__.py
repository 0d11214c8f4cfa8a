"""
log_viewer – search a log store through one HTTP endpoint.

Import path convention::

    from log_viewer.application.search import SearchFilter, build_query, map_hits
    from log_viewer.application.search import SearchGateway
    from log_viewer.adapters.elasticsearch import ElasticsearchSearchBackend
    from log_viewer.app import create_app
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
