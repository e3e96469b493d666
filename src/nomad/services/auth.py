"""Mock authentication.

One hard-coded account, no password storage, no expiry. A session is an
explicit object held by the SessionStore the application creates at startup;
logout and account deletion close it.
"""

import asyncio
import secrets
from dataclasses import dataclass, field

from nomad.config import settings
from nomad.exceptions import AuthenticationError
from nomad.logging import get_logger

logger = get_logger(__name__)

INVALID_CREDENTIALS = "Invalid email or password."


@dataclass
class AuthSession:
    token: str
    user_name: str
    email: str
    is_authenticated: bool = True


@dataclass
class SessionStore:
    _sessions: dict[str, AuthSession] = field(default_factory=dict)

    def open(self, user_name: str, email: str) -> AuthSession:
        session = AuthSession(token=secrets.token_urlsafe(32), user_name=user_name, email=email)
        self._sessions[session.token] = session
        return session

    def get(self, token: str) -> AuthSession | None:
        return self._sessions.get(token)

    def close(self, token: str) -> bool:
        """Drop a session. Returns False if it was already gone."""
        return self._sessions.pop(token, None) is not None

    def clear(self) -> None:
        self._sessions.clear()

    def __len__(self) -> int:
        return len(self._sessions)


async def login(store: SessionStore, email: str, password: str) -> AuthSession:
    await asyncio.sleep(settings.auth_delay_seconds)
    if email != settings.demo_login_email or password != settings.demo_login_password:
        logger.info("login_failed")
        raise AuthenticationError(INVALID_CREDENTIALS)
    session = store.open(user_name=email.split("@")[0], email=email)
    logger.info("login_succeeded", user_name=session.user_name)
    return session


async def signup(first_name: str) -> None:
    """Accept a signup without creating anything; the user is sent to log in."""
    await asyncio.sleep(settings.auth_delay_seconds)
    logger.info("signup_requested", first_name=first_name)


def logout(store: SessionStore, session: AuthSession) -> None:
    store.close(session.token)
    logger.info("logout", user_name=session.user_name)


async def delete_account(store: SessionStore, session: AuthSession) -> None:
    await asyncio.sleep(settings.auth_delay_seconds)
    store.close(session.token)
    logger.info("account_deletion_requested", user_name=session.user_name)


@dataclass
class User:
    id: str
    first_name: str
    last_name: str
    email: str
    avatar_url: str | None = None


@dataclass
class PastBooking:
    id: str
    hotel_name: str
    dates: str
    status: str


@dataclass
class Profile:
    user: User
    bookings: list[PastBooking]


MOCK_BOOKINGS = [
    PastBooking("bk_abc123", "Grand Parisian Hotel", "Oct 15, 2023 - Oct 18, 2023", "Confirmed"),
    PastBooking("bk_def456", "Tokyo Imperial Palace View", "Nov 20, 2023 - Nov 25, 2023", "Confirmed"),
    PastBooking("bk_ghi789", "Chic Montmartre Boutique", "Jan 05, 2024 - Jan 07, 2024", "Cancelled"),
]  # fmt: skip


def build_profile(session: AuthSession) -> Profile:
    """Mock profile for the signed-in user; only the name and email are real."""
    user = User(
        id="user_123",
        first_name=session.user_name,
        last_name="Wanderer",
        email=session.email,
        avatar_url="https://placehold.co/100x100.png?text=AW",
    )
    return Profile(user=user, bookings=list(MOCK_BOOKINGS))
