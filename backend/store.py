"""
In-memory session store shared across all routes.

Sessions live in a plain dict for the lifetime of the process: nothing is
persisted and nothing is shared between workers. Run a single worker.
"""

import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

import config
from models.session import Session

logger = logging.getLogger(__name__)

sessions: dict[str, Session] = {}


def _ttl() -> timedelta:
    return timedelta(seconds=config.SESSION_TTL_SECONDS)


def is_expired(session: Session, now: Optional[datetime] = None) -> bool:
    now = now or datetime.now(timezone.utc)
    return now - session.last_accessed > _ttl()


def generate_session_id() -> str:
    """Random 8-char alphanumeric id, redrawn until it is not in use."""
    while True:
        session_id = "".join(
            secrets.choice(config.SESSION_ID_ALPHABET)
            for _ in range(config.SESSION_ID_LENGTH)
        )
        if session_id not in sessions:
            return session_id


def create_session(content: str = "") -> Session:
    session = Session(session_id=generate_session_id(), content=content)
    sessions[session.session_id] = session
    logger.info(
        "Created session %s (%d chars, %d live)",
        session.session_id, len(content), len(sessions),
    )
    return session


def get_session(session_id: str) -> Optional[Session]:
    """
    Look up a live session.

    A session past its TTL is evicted here and reported as missing, so callers
    never see an expired record even between purges.
    """
    session = sessions.get(session_id)
    if session is None:
        return None
    if is_expired(session):
        sessions.pop(session_id, None)
        logger.info("Session %s expired on lookup", session_id)
        return None
    return session


def touch(session: Session) -> None:
    session.last_accessed = datetime.now(timezone.utc)


def purge_expired(now: Optional[datetime] = None) -> int:
    """Drop every expired session. Returns how many were removed."""
    now = now or datetime.now(timezone.utc)
    expired = [sid for sid, s in sessions.items() if is_expired(s, now)]
    for sid in expired:
        del sessions[sid]
    if expired:
        logger.info("Purged %d expired session(s), %d live", len(expired), len(sessions))
    return len(expired)
