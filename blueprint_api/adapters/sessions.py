"""In-memory editor sessions backing the session routes."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import uuid4

from loguru import logger

from blueprint_playground.config import EditorConfig
from blueprint_playground.geometry import Point
from blueprint_playground.session import EditorState, display_to_dict, render

POINTER_EVENTS = ("down", "move", "up", "leave")


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class EditorSession:
    id: str
    name: str
    created_at: datetime
    updated_at: datetime
    state: EditorState = field(default_factory=EditorState)


class SessionStore:
    """Simple store keyed by session id; nothing outlives the process."""

    def __init__(self) -> None:
        self._items: Dict[str, EditorSession] = {}

    def create(self, name: str, config: EditorConfig) -> EditorSession:
        now = _now()
        session = EditorSession(
            id=str(uuid4()),
            name=name,
            created_at=now,
            updated_at=now,
            state=EditorState(config=config),
        )
        self._items[session.id] = session
        logger.debug("created editor session {}", session.id)
        return session

    def list(self) -> List[EditorSession]:
        return list(self._items.values())

    def get(self, session_id: str) -> EditorSession:
        session = self._items.get(session_id)
        if session is None:
            raise KeyError(session_id)
        return session

    def delete(self, session_id: str) -> None:
        if self._items.pop(session_id, None) is None:
            raise KeyError(session_id)
        logger.debug("deleted editor session {}", session_id)

    def touch(self, session: EditorSession) -> None:
        session.updated_at = _now()


_store = SessionStore()


def serialize_session(session: EditorSession) -> Dict[str, Any]:
    return {
        "id": session.id,
        "name": session.name,
        "created_at": session.created_at.isoformat(),
        "updated_at": session.updated_at.isoformat(),
        "history_step": session.state.history.cursor,
        "history_length": len(session.state.history),
        "display": display_to_dict(render(session.state)),
    }


def create_session(payload: Dict[str, Any]) -> Dict[str, Any]:
    config_data = {key: value for key, value in (payload.get("config") or {}).items() if value is not None}
    session = _store.create(name=payload.get("name", "Untitled"), config=EditorConfig(**config_data))
    return serialize_session(session)


def list_sessions() -> List[Dict[str, Any]]:
    return [serialize_session(item) for item in _store.list()]


def get_session(session_id: str) -> Dict[str, Any]:
    return serialize_session(_store.get(session_id))


def delete_session(session_id: str) -> None:
    _store.delete(session_id)


def pointer_event(session_id: str, event: str, x: Optional[float], y: Optional[float]) -> Dict[str, Any]:
    """Apply one pointer event in surface coordinates."""
    session = _store.get(session_id)
    state = session.state
    if event not in POINTER_EVENTS:
        raise ValueError(f"Unsupported pointer event '{event}'")
    if event in ("down", "move"):
        if x is None or y is None:
            raise ValueError(f"Pointer event '{event}' needs x and y")
        point = Point(float(x), float(y))
        if event == "down":
            state.begin_drag(point)
        else:
            state.pointer_move(point)
    elif event == "up":
        state.end_drag()
    else:
        state.pointer_leave()
    _store.touch(session)
    return serialize_session(session)


def key_event(session_id: str, key: str, ctrl: bool, meta: bool) -> Dict[str, Any]:
    session = _store.get(session_id)
    handled = session.state.key_down(key, ctrl=ctrl, meta=meta)
    _store.touch(session)
    return {"handled": handled, "session": serialize_session(session)}


def undo(session_id: str) -> Dict[str, Any]:
    session = _store.get(session_id)
    session.state.undo()
    _store.touch(session)
    return serialize_session(session)


def clear(session_id: str) -> Dict[str, Any]:
    session = _store.get(session_id)
    session.state.clear()
    _store.touch(session)
    return serialize_session(session)


def update_config(session_id: str, changes: Dict[str, Any]) -> Dict[str, Any]:
    session = _store.get(session_id)
    session.state.apply_config(
        grid_pitch=changes.get("grid_pitch"),
        thickness=changes.get("thickness"),
        grid_color=changes.get("grid_color"),
    )
    _store.touch(session)
    return serialize_session(session)
