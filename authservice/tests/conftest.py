from __future__ import annotations

import os
import tempfile

_TMP_DIR = tempfile.mkdtemp(prefix="authservice-tests-")

os.environ.setdefault("DATABASE_URL", f"sqlite:///{os.path.join(_TMP_DIR, 'test.db')}")
os.environ.setdefault("LOG_FILE", os.path.join(_TMP_DIR, "app.log"))
os.environ.setdefault("JWT_SECRET", "test-signing-secret")
os.environ.setdefault("PASSWORD_HASH_METHOD", "pbkdf2:sha256:1000")
os.environ.setdefault("APP_ENV", "test")
