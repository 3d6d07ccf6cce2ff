"""
Firebase Functions entry point.
All functions must be exported from this file for deployment.
"""

import logging
import os

import firebase_admin
from firebase_admin import initialize_app

from onegoal.config import is_emulator, load_environment

load_environment()

# Set emulator environment variables if running in emulators
if is_emulator():
    if not os.getenv('FIRESTORE_EMULATOR_HOST'):
        os.environ['FIRESTORE_EMULATOR_HOST'] = 'localhost:8080'
    if not os.getenv('FIREBASE_AUTH_EMULATOR_HOST'):
        os.environ['FIREBASE_AUTH_EMULATOR_HOST'] = 'localhost:9099'

# Initialize Firebase Admin SDK
# The SDK automatically detects emulator environment variables
if not firebase_admin._apps:
    initialize_app()

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Import callable functions
from onegoal.brokers.callable.todo_items import todo_callable
from onegoal.brokers.callable.goal_lists import goal_list_callable
from onegoal.brokers.callable.finance import finance_callable
from onegoal.brokers.callable.quotes import quote_callable
from onegoal.brokers.callable.user_data import user_data_callable
from onegoal.brokers.callable.update_profile import update_profile_callable
from onegoal.brokers.callable.daily_progress import daily_progress_callable

# Import HTTPS functions
from onegoal.brokers.https.health_check import health_check

# Export all functions for Firebase deployment
__all__ = [
    # Callable functions
    'todo_callable',
    'goal_list_callable',
    'finance_callable',
    'quote_callable',
    'user_data_callable',
    'update_profile_callable',
    'daily_progress_callable',

    # HTTPS functions
    'health_check',
]

logger.info("Firebase Functions initialized successfully")
