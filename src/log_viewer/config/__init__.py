"""Config – process settings loaded once at startup."""
from log_viewer.config.app_settings import LogViewerSettings

__all__ = ["LogViewerSettings"]
