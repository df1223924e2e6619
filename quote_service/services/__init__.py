"""Services for the quote service."""

from .file_storage import FileStorage, get_file_storage
from .quote_pipeline import QuotePipeline, get_quote_pipeline

__all__ = [
    "FileStorage",
    "get_file_storage",
    "QuotePipeline",
    "get_quote_pipeline",
]
