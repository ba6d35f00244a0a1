from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from ..adapters import sessions as sessions_adapter


class ConfigPatch(BaseModel):
    grid_pitch: Optional[float] = Field(default=None, gt=0.0, allow_inf_nan=False, description="Grid pitch for subsequent snaps")
    thickness: Optional[float] = Field(default=None, gt=0.0, allow_inf_nan=False, description="Thickness of walls drawn next")
    grid_color: Optional[str] = Field(default=None, description="Grid colour as #rrggbb")


class SessionCreate(BaseModel):
    name: str = Field(default="Untitled", description="Session name")
    config: ConfigPatch = Field(default_factory=ConfigPatch)


class SessionResponse(BaseModel):
    id: str
    name: str
    created_at: str
    updated_at: str
    history_step: int
    history_length: int
    display: Dict[str, Any]


class PointerEvent(BaseModel):
    event: Literal["down", "move", "up", "leave"]
    x: Optional[float] = Field(default=None, description="Surface-relative x, origin top-left")
    y: Optional[float] = Field(default=None, description="Surface-relative y, origin top-left")


class KeyEvent(BaseModel):
    key: str
    ctrl: bool = False
    meta: bool = False


class KeyResponse(BaseModel):
    handled: bool
    session: SessionResponse


router = APIRouter(prefix="/sessions", tags=["sessions"])


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Session not found")


@router.get("/", response_model=List[SessionResponse])
async def list_sessions() -> List[SessionResponse]:
    return [SessionResponse(**item) for item in sessions_adapter.list_sessions()]


@router.post("/", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
async def create_session(body: SessionCreate) -> SessionResponse:
    try:
        item = sessions_adapter.create_session(body.model_dump())
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return SessionResponse(**item)


@router.get("/{session_id}", response_model=SessionResponse)
async def get_session(session_id: str) -> SessionResponse:
    try:
        return SessionResponse(**sessions_adapter.get_session(session_id))
    except KeyError as exc:
        raise _not_found() from exc


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session(session_id: str) -> None:
    try:
        sessions_adapter.delete_session(session_id)
    except KeyError as exc:
        raise _not_found() from exc


@router.post("/{session_id}/pointer", response_model=SessionResponse)
async def pointer(session_id: str, body: PointerEvent) -> SessionResponse:
    try:
        return SessionResponse(**sessions_adapter.pointer_event(session_id, body.event, body.x, body.y))
    except KeyError as exc:
        raise _not_found() from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.post("/{session_id}/keys", response_model=KeyResponse)
async def key(session_id: str, body: KeyEvent) -> KeyResponse:
    try:
        return KeyResponse(**sessions_adapter.key_event(session_id, body.key, body.ctrl, body.meta))
    except KeyError as exc:
        raise _not_found() from exc


@router.post("/{session_id}/undo", response_model=SessionResponse)
async def undo(session_id: str) -> SessionResponse:
    try:
        return SessionResponse(**sessions_adapter.undo(session_id))
    except KeyError as exc:
        raise _not_found() from exc


@router.post("/{session_id}/clear", response_model=SessionResponse)
async def clear(session_id: str) -> SessionResponse:
    try:
        return SessionResponse(**sessions_adapter.clear(session_id))
    except KeyError as exc:
        raise _not_found() from exc


@router.patch("/{session_id}/config", response_model=SessionResponse)
async def update_config(session_id: str, body: ConfigPatch) -> SessionResponse:
    try:
        return SessionResponse(**sessions_adapter.update_config(session_id, body.model_dump()))
    except KeyError as exc:
        raise _not_found() from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
