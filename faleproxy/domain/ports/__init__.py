"""Portas que conectam o domínio com adaptadores externos."""
from .page_fetcher import PageFetcher

__all__ = ["PageFetcher"]
