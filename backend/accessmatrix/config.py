# backend/accessmatrix/config.py
from __future__ import annotations
import os


def _csv(value: str) -> list[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


def _flag(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


class Config:
    # Optional "SECRET_KEY", with default dev key (signs the session cookie)
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-change-me")

    # SQLite DB stored in backend/instance/accessmatrix.sqlite3
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        "DATABASE_URL", #optional alternative location
        "sqlite:///accessmatrix.sqlite3", #default local location
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Identity record roles that resolve to an administrator
    ADMIN_ROLES = _csv(os.environ.get("ADMIN_ROLES", "ADMIN,OWNER"))

    # Known administrator identities (exact, case-insensitive email match)
    ADMIN_EMAILS = _csv(os.environ.get("ADMIN_EMAILS", ""))

    # Opt-in: when on, any signed-in non-employee under ADMIN_SCOPE_PREFIX
    # resolves to an administrator
    TRUST_ADMIN_SCOPE = _flag(os.environ.get("TRUST_ADMIN_SCOPE", "false"))
    ADMIN_SCOPE_PREFIX = os.environ.get("ADMIN_SCOPE_PREFIX", "/admin")
