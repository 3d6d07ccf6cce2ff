"""Persistence adapters."""

from .Db import Db
from .DocumentStore import DocumentStore, FirestoreDocumentStore

__all__ = ["Db", "DocumentStore", "FirestoreDocumentStore"]
