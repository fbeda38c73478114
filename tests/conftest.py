# tests/conftest.py
"""
Global test bootstrap
- Pins the environment BEFORE any project import (settings are read at import)
- Pulls in the fixtures (db, app, users, movies)
"""

from __future__ import annotations

import os

# ──────────────────────────────────────────────────────────────────────────────
# 🌱 Test env (in-memory SQLite, fixed secrets, console-only logging)
# ──────────────────────────────────────────────────────────────────────────────
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ.setdefault("SALT", "test-salt")
os.environ.setdefault("JWT_SECRET_KEY", "test-jwt-secret-key-with-enough-entropy")
os.environ["ENV"] = "development"
os.environ["PROMO_MOVIE_ID"] = ""
os.environ["DB_CREATE_ALL"] = "false"
os.environ["LOG_TO_FILE"] = "0"
os.environ.setdefault("LOG_LEVEL", "WARNING")

# ──────────────────────────────────────────────────────────────────────────────
# 📦 Fixtures
# ──────────────────────────────────────────────────────────────────────────────
from tests.fixtures.db import *          # noqa: F401,F403,E402
from tests.fixtures.app import *         # noqa: F401,F403,E402
from tests.fixtures.users import *       # noqa: F401,F403,E402
from tests.fixtures.movies import *      # noqa: F401,F403,E402
