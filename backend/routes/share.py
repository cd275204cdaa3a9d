import logging

from fastapi import APIRouter, HTTPException

import config
import store
from models.share import ClientConfig, ShareRequest, ShareResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["share"])


def _invalid(reason: str) -> HTTPException:
    logger.warning("Rejected share request: %s", reason)
    return HTTPException(status_code=400, detail="Invalid request")


def _live_session(session_id: str):
    session = store.get_session(session_id)
    if session is None:
        logger.warning("Unknown session %s", session_id)
        raise HTTPException(status_code=404, detail="Session not found")
    store.touch(session)
    return session


# ---------- Endpoints ----------

@router.post("/api/share", response_model=ShareResponse, response_model_exclude_none=True)
async def share(body: ShareRequest):
    """
    Single dispatch endpoint for the share page.

      create    -> {"sessionId": id}     (must not carry a sessionId)
      update    -> {"success": true}     (last write wins)
      get       -> {"content": text}
      heartbeat -> {"success": true}     (keeps the session from expiring)

    Unknown session ids are 404, every other malformed call is 400.
    """
    store.purge_expired()

    if body.content is not None and len(body.content) > config.MAX_CONTENT_LENGTH:
        raise _invalid(f"content too long ({len(body.content)} chars)")

    if body.action == "create":
        if body.session_id:
            raise _invalid("create with a sessionId")
        session = store.create_session(body.content or "")
        return ShareResponse(session_id=session.session_id)

    if body.action not in ("update", "get", "heartbeat"):
        raise _invalid(f"unknown action {body.action!r}")
    if not body.session_id:
        raise _invalid(f"{body.action} without a sessionId")

    if body.action == "update":
        if body.content is None:
            raise _invalid("update without content")
        session = _live_session(body.session_id)
        session.content = body.content
        return ShareResponse(success=True)

    session = _live_session(body.session_id)
    if body.action == "get":
        return ShareResponse(content=session.content)
    return ShareResponse(success=True)


@router.get("/api/share/config", response_model=ClientConfig)
async def client_config():
    """Timings the page uses for polling, heartbeats and the typing debounce."""
    return ClientConfig(
        poll_interval_ms=config.POLL_INTERVAL_MS,
        heartbeat_interval_ms=config.HEARTBEAT_INTERVAL_MS,
        update_debounce_ms=config.UPDATE_DEBOUNCE_MS,
    )
