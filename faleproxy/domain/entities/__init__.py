"""Entidades de domínio utilizadas pelo proxy."""
from .fetched_page import FetchedPage
from .proxied_page import ProxiedPage

__all__ = ["FetchedPage", "ProxiedPage"]
