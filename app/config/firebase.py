"""
Firebase Firestore initialization and the Firestore record backend.

Used when STORAGE_BACKEND=firestore. Each persisted record (alerts,
messages, notifications) is a single document in STORE_COLLECTION holding
the whole sequence under "items", mirroring the one-key-per-record layout of
the JSON backend.
"""

import json
import logging
import os
from typing import Dict, List, Optional

import firebase_admin
from firebase_admin import credentials, firestore, initialize_app

from app.config.seed import RECORD_KEYS
from app.core.errors import PersistenceUnavailable
from app.core.settings import settings

logger = logging.getLogger(__name__)

db: Optional[firestore.Client] = None


def _validate_credentials_file(cred_path: str) -> None:
    if not os.path.exists(cred_path):
        raise FileNotFoundError(
            f"Firebase credentials file not found: {cred_path}\n"
            f"Please check your .env file and ensure FIREBASE_CREDENTIALS_PATH is correct.\n"
            f"Current working directory: {os.getcwd()}"
        )

    try:
        with open(cred_path, "r") as f:
            cred_data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(
            f"Firebase credentials file is not valid JSON: {e}\n"
            f"Please check the file at: {cred_path}"
        )

    required_fields = ["type", "project_id", "private_key", "client_email"]
    missing_fields = [field for field in required_fields if field not in cred_data]
    if missing_fields:
        raise ValueError(
            f"Firebase credentials file is missing required fields: {missing_fields}\n"
            f"Please download a fresh service account key from Firebase Console."
        )

    logger.info(f"[FIRESTORE] Credentials file validated: {cred_path}")
    logger.info(f"[FIRESTORE] Project ID: {cred_data.get('project_id', 'N/A')}")


def initialize_firestore() -> firestore.Client:
    global db

    if db is not None:
        return db

    try:
        if not firebase_admin._apps:
            options = {"projectId": settings.FIREBASE_PROJECT_ID} if settings.FIREBASE_PROJECT_ID else None
            if settings.FIREBASE_CREDENTIALS_PATH:
                _validate_credentials_file(settings.FIREBASE_CREDENTIALS_PATH)
                cred = credentials.Certificate(settings.FIREBASE_CREDENTIALS_PATH)
                initialize_app(cred, options)
                logger.info("[FIRESTORE] Firebase Admin SDK initialized with service account")
            else:
                logger.info("[FIRESTORE] No credentials path set, using Application Default Credentials")
                initialize_app(options=options)

        db = firestore.client()
        logger.info(f"[FIRESTORE] Project: {settings.FIREBASE_PROJECT_ID or 'default'}")
        return db

    except FileNotFoundError as e:
        raise PersistenceUnavailable(
            f"Firestore initialization FAILED - Credentials file not found.\n{str(e)}"
        )
    except ValueError as e:
        raise PersistenceUnavailable(
            f"Firestore initialization FAILED - Invalid credentials file.\n{str(e)}\n"
            f"SOLUTION: Download a fresh service account key from Firebase Console:\n"
            f"1. Go to Firebase Console > Project Settings > Service Accounts\n"
            f"2. Click 'Generate New Private Key'\n"
            f"3. Save the JSON file and update FIREBASE_CREDENTIALS_PATH in .env"
        )
    except Exception as e:
        raise PersistenceUnavailable(
            f"Firestore initialization FAILED. Error: {e}\n"
            f"Please check your Firebase credentials and configuration."
        )


def get_db() -> firestore.Client:
    """
    Get the initialized Firestore client, initializing it on first use.
    """
    if db is None:
        return initialize_firestore()
    return db


class FirestoreBackend:
    """
    Record backend storing each record as one Firestore document.
    """

    def __init__(self, client=None, collection: Optional[str] = None):
        self._client = client
        self.collection = collection or settings.STORE_COLLECTION

    @property
    def client(self):
        if self._client is None:
            self._client = get_db()
        return self._client

    def load(self) -> Dict[str, Optional[List[Dict]]]:
        records: Dict[str, Optional[List[Dict]]] = {}
        try:
            collection_ref = self.client.collection(self.collection)
            for key in RECORD_KEYS:
                doc = collection_ref.document(key).get()
                if not doc.exists:
                    records[key] = None
                    continue
                items = (doc.to_dict() or {}).get("items")
                if not isinstance(items, list):
                    logger.warning(f"[FIRESTORE] Record '{key}' is malformed, ignoring stored copy")
                    items = None
                records[key] = items
        except PersistenceUnavailable:
            raise
        except Exception as e:
            logger.error(f"[FIRESTORE] Failed to load records: {e}", exc_info=True)
            raise PersistenceUnavailable(f"Failed to load records from Firestore: {e}")
        return records

    def save(self, records: Dict[str, List[Dict]]) -> None:
        try:
            collection_ref = self.client.collection(self.collection)
            for key, items in records.items():
                collection_ref.document(key).set({
                    "items": items,
                    "updated_at": firestore.SERVER_TIMESTAMP,
                })
        except PersistenceUnavailable:
            raise
        except Exception as e:
            logger.error(f"[FIRESTORE] Failed to save records {list(records)}: {e}", exc_info=True)
            raise PersistenceUnavailable(f"Failed to save records to Firestore: {e}")

    def describe(self) -> str:
        return f"firestore:{self.collection}"
