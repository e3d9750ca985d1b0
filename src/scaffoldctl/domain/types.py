"""Classification enums shared by the family tables.

Option values on the wire are plain strings; these enums exist so the
tables and tests spell them one way.
"""

from __future__ import annotations

from enum import StrEnum


class Category(StrEnum):
    """Discovery groups shown by ``list_frameworks``."""

    SPRING = "Spring/Java"
    FRONTEND = "Frontend"
    NEXT = "Next.js/React"
    VUE = "Nuxt.js/Vue"
    PYTHON = "Python"
    NODE = "JavaScript/TypeScript"


class StateManagement(StrEnum):
    """Client-side state libraries."""

    NONE = "none"
    ZUSTAND = "zustand"
    REDUX = "redux"
    PINIA = "pinia"


class Database(StrEnum):
    """Database backends a backend scaffold can be wired for."""

    NONE = "none"
    POSTGRESQL = "postgresql"
    MYSQL = "mysql"
    SQLITE = "sqlite"
    MONGODB = "mongodb"
    H2 = "h2"


class ProjectType(StrEnum):
    """Informational project kind accepted by the tool boundary."""

    WEB = "web"
    API = "api"
    MOBILE = "mobile"
    DESKTOP = "desktop"
