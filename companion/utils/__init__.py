"""Shared utilities module."""

__all__ = [
    "api_retry",
    "cli_common",
    "colors",
    "file_utils",
    "load_manager",
    "progress_display",
    "render",
]
