"""Root conftest — shared test configuration."""

import os

# Settings are read at app import; tests never reach a real server
os.environ.setdefault("MONGODB_URL", "mongodb://localhost:27017")
os.environ.setdefault("DB_NAME", "contacts_test")
