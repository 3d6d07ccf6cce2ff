"""Project database class with Firebase operations."""

import os
import logging
from firebase_admin import firestore
from typing import Dict, Any
from abc import ABC

from onegoal.config import get_users_collection


class Db(ABC):
    """Database operations base class.

    This class provides the singleton pattern and the collection registry.
    The user state collection name comes from configuration.
    """
    _instances: Dict[str, Any] = {}  # Class registry for singleton instances

    collections: Dict[str, Any] = {}

    def __new__(cls, *args, **kwargs):
        """Ensure only one instance per class exists"""
        if cls.__name__ not in cls._instances:
            cls._instances[cls.__name__] = super().__new__(cls)
        return cls._instances[cls.__name__]

    def __init__(self):
        """Initialize the database - only runs once per class due to singleton"""
        if hasattr(self, "_initialized"):
            return

        self._init_firestore()
        self._init_collections()
        self._initialized = True

    def _init_firestore(self):
        """Initialize Firestore client and base configuration."""
        self.firestore = firestore.client()
        self.logger = logging.getLogger("firebase-functions")
        self.logger.info("Firestore initialized")

    def _init_collections(self):
        """Initialize collection references."""
        self.collections = {
            # One aggregate state document per user
            "users": self.firestore.collection(get_users_collection()),
        }

    @classmethod
    def get_instance(cls):
        """Get or create the singleton instance for this class"""
        return cls()

    @classmethod
    def reset_instance(cls):
        """Drop the cached instance (test isolation only)."""
        cls._instances.pop(cls.__name__, None)

    @staticmethod
    def is_development():
        return os.getenv("ENV") == "development"
