"""Settings for the test suite.

Seeds the environment with throwaway values before the base settings are
read, so ``pytest`` runs without a ``.env`` file.
"""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("JWT_SIGNING_KEY", "test-jwt-signing-key-32-bytes-long!!")
os.environ.setdefault("MONGODB_NAME", "products_test")
os.environ.setdefault("CORS_ALLOWED_ORIGINS", "http://localhost:3000")

from config.settings import *  # noqa: E402,F401,F403
