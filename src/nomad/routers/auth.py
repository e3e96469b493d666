"""Mock authentication and profile endpoints."""

from fastapi import APIRouter

from nomad.dependencies import CurrentSession, Sessions
from nomad.schemas.auth import (
    LoginRequest,
    MessageResponse,
    ProfileResponse,
    SessionResponse,
    SignupRequest,
)
from nomad.services import auth

router = APIRouter()


@router.post("/auth/signup", response_model=MessageResponse, status_code=201)
async def signup(body: SignupRequest) -> MessageResponse:
    """Validate the signup form. Nothing is stored; the client goes on to log in."""
    await auth.signup(body.first_name)
    return MessageResponse(message="Account created. Please log in.")


@router.post("/auth/login", response_model=SessionResponse)
async def login(body: LoginRequest, sessions: Sessions) -> SessionResponse:
    session = await auth.login(sessions, body.email, body.password)
    return SessionResponse.model_validate(session)


@router.post("/auth/logout", response_model=MessageResponse)
async def logout(session: CurrentSession, sessions: Sessions) -> MessageResponse:
    auth.logout(sessions, session)
    return MessageResponse(message="Logged out.")


@router.get("/profile", response_model=ProfileResponse)
async def profile(session: CurrentSession) -> ProfileResponse:
    """Mock profile and booking history for the signed-in user."""
    return ProfileResponse.model_validate(auth.build_profile(session))


@router.delete("/profile", response_model=MessageResponse)
async def delete_profile(session: CurrentSession, sessions: Sessions) -> MessageResponse:
    await auth.delete_account(sessions, session)
    return MessageResponse(message="Account deleted.")
