# backend/utils/session_auth.py
import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt, JWTError
from fastapi import Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session as DBSession

from config import settings
from database import get_db
from models.session import Session
from models.users import User

logger = logging.getLogger(__name__)

SESSION_LIFETIME = timedelta(days=settings.SESSION_MAX_AGE_DAYS)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# Sign the session id into the cookie value; exp mirrors the row's expiry
def create_session_token(session_id: str, expires_at: datetime) -> str:
    to_encode = {"sid": session_id, "exp": expires_at}
    return jwt.encode(to_encode, settings.SESSION_SECRET, algorithm=settings.ALGORITHM)


def read_session_id(request: Request) -> Optional[str]:
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token:
        return None
    try:
        payload = jwt.decode(token, settings.SESSION_SECRET, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None
    return payload.get("sid")


def purge_expired_sessions(db: DBSession) -> int:
    removed = db.query(Session).filter(Session.expires_at <= _utcnow()).delete(synchronize_session=False)
    db.commit()
    if removed:
        logger.info("Removed %d expired sessions", removed)
    return removed


# Create a session row for the user and attach the signed cookie to the response;
# expired rows are purged on every login
def start_session(db: DBSession, response: Response, user: User) -> Session:
    purge_expired_sessions(db)
    expires_at = _utcnow() + SESSION_LIFETIME
    session = Session(id=secrets.token_urlsafe(32), user_id=user.id, expires_at=expires_at)
    db.add(session)
    db.commit()

    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=create_session_token(session.id, expires_at),
        max_age=int(SESSION_LIFETIME.total_seconds()),
        httponly=True,
        samesite="lax",
        secure=settings.is_production,
    )
    return session


# Destroy the current session, if any, and clear the cookie
def end_session(db: DBSession, request: Request, response: Response) -> bool:
    session_id = read_session_id(request)
    removed = False
    if session_id:
        removed = db.query(Session).filter(Session.id == session_id).delete() > 0
        db.commit()
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return removed


# Resolve the user bound to the request's session, or None
def get_optional_user(request: Request, db: DBSession = Depends(get_db)) -> Optional[User]:
    session_id = read_session_id(request)
    if not session_id:
        return None

    session = (
        db.query(Session)
        .filter(Session.id == session_id, Session.expires_at > _utcnow())
        .first()
    )
    if session is None:
        return None

    # A deleted user leaves the request unauthenticated
    return db.query(User).filter(User.id == session.user_id).first()


def get_current_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return user


# 401 when anonymous, then 403 when the user is not an admin
def admin_required(user: Optional[User] = Depends(get_optional_user)) -> User:
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    if not user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden - Admin access required",
        )
    return user
