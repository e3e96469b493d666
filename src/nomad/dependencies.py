"""Shared FastAPI dependencies.

Reusable type aliases and dependency functions that routers import.
Defined here (not in main.py) to avoid circular imports when routers
are registered in main.

The in-process stores and the payment gateway are created by the application
lifespan and live on ``app.state``; handlers reach them only through these
dependencies.
"""

from typing import Annotated

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from nomad.db.session import get_db
from nomad.exceptions import AuthenticationError
from nomad.services.auth import AuthSession, SessionStore
from nomad.services.booking import PaymentGateway
from nomad.services.wizard import WizardStore

SESSION_HEADER = "X-Session-Token"

DB = Annotated[AsyncSession, Depends(get_db)]


def get_session_store(request: Request) -> SessionStore:
    return request.app.state.sessions  # type: ignore[no-any-return]


def get_wizard_store(request: Request) -> WizardStore:
    return request.app.state.wizards  # type: ignore[no-any-return]


def get_payment_gateway(request: Request) -> PaymentGateway:
    return request.app.state.payment_gateway  # type: ignore[no-any-return]


Sessions = Annotated[SessionStore, Depends(get_session_store)]
Wizards = Annotated[WizardStore, Depends(get_wizard_store)]
Gateway = Annotated[PaymentGateway, Depends(get_payment_gateway)]


def get_current_session(
    sessions: Sessions,
    token: Annotated[str | None, Header(alias=SESSION_HEADER)] = None,
) -> AuthSession:
    """Resolve the caller's session or reject with 401."""
    session = sessions.get(token) if token else None
    if session is None:
        raise AuthenticationError("Please log in to continue.")
    return session


CurrentSession = Annotated[AuthSession, Depends(get_current_session)]
