"""Authentication routes"""

from fastapi import APIRouter, Depends

from ..core.session import Session, SessionState
from ..models.auth import LoginCredentials, RegisterData
from ..services.backend import HotelBackend
from .deps import get_backend, get_session_state

router = APIRouter(prefix="/api/auth", tags=["Auth"])


def _session_payload(session: Session) -> dict:
    expires_at = session.expires_at
    return {
        "authenticated": True,
        "user_id": session.user_id,
        "email": session.user.get("email"),
        "expires_at": expires_at.isoformat() if expires_at else None,
    }


@router.post("/login")
async def login(
    credentials: LoginCredentials,
    backend: HotelBackend = Depends(get_backend),
):
    session = await backend.auth.login(credentials)
    return _session_payload(session)


@router.post("/register")
async def register(
    data: RegisterData,
    backend: HotelBackend = Depends(get_backend),
):
    session = await backend.auth.register(data)
    return _session_payload(session)


@router.post("/logout")
async def logout(backend: HotelBackend = Depends(get_backend)):
    await backend.auth.logout()
    return {"authenticated": False}


@router.get("/me")
async def current_user(state: SessionState = Depends(get_session_state)):
    """Who is logged in"""
    if not state.current:
        return {"authenticated": False}
    return _session_payload(state.current)
