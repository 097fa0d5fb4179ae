"""Centralized dependency type aliases for FastAPI routes.

Domain-specific aliases (identities, guards, services) live next to the
domain in ``app/<domain>/dependencies.py``; the shared infrastructure ones
live here:
    from app.core.deps import SessionDep, SettingsDep
"""

from typing import Annotated

from fastapi import Depends
from sqlmodel import Session

from app.core.settings import Settings, get_settings
from app.db.engine import get_session

# Database session, one per request
SessionDep = Annotated[Session, Depends(get_session)]

# Application settings
SettingsDep = Annotated[Settings, Depends(get_settings)]
