# backend/routes/auth.py
import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy import func
from sqlalchemy.orm import Session

from database import get_db
from models.users import User
from schemas import user as schemas
from schemas.base import SuccessResponse
from utils.hashing import get_password_hash, verify_password
from utils.session_auth import end_session, get_current_user, start_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Auth"])

INVALID_CREDENTIALS = "Invalid username, email or password"


def get_user_by_username(db: Session, username: str):
    return db.query(User).filter(User.username == username).first()


# Emails are matched case-insensitively
def get_user_by_email(db: Session, email: str):
    return db.query(User).filter(func.lower(User.email) == email.strip().lower()).first()


# Raise 400 when the username or email already belongs to another account
def ensure_identity_available(db: Session, username=None, email=None, exclude_id=None):
    if username is not None:
        existing = get_user_by_username(db, username)
        if existing and existing.id != exclude_id:
            raise HTTPException(status_code=400, detail="Username already exists")
    if email is not None:
        existing = get_user_by_email(db, email)
        if existing and existing.id != exclude_id:
            raise HTTPException(status_code=400, detail="Email already exists")


# Register a new account and log it in
@router.post("/register", response_model=schemas.UserResponse, status_code=status.HTTP_201_CREATED)
def register(payload: schemas.UserCreate, response: Response, db: Session = Depends(get_db)):
    ensure_identity_available(db, username=payload.username, email=payload.email)

    new_user = User(
        username=payload.username,
        email=payload.email.strip().lower(),
        password=get_password_hash(payload.password),
        is_admin=False,
    )
    db.add(new_user)
    db.commit()
    db.refresh(new_user)

    start_session(db, response, new_user)
    logger.info("Registered user %s (id=%s)", new_user.username, new_user.id)
    return new_user


# Authenticate by username or email and open a session
@router.post("/login", response_model=schemas.UserResponse)
def login(payload: schemas.UserLogin, response: Response, db: Session = Depends(get_db)):
    db_user = get_user_by_username(db, payload.username)
    if db_user is None:
        db_user = get_user_by_email(db, payload.username)

    # Same message for unknown identifier and wrong password
    if not db_user or not verify_password(payload.password, db_user.password):
        logger.warning("Failed login attempt for %r", payload.username)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_CREDENTIALS)

    start_session(db, response, db_user)
    return db_user


# Destroy the session; succeeds even without one
@router.post("/logout")
def logout(request: Request, response: Response, db: Session = Depends(get_db)):
    end_session(db, request, response)
    return {"success": True}


# Retrieve current authenticated user details
@router.get("/user", response_model=schemas.UserResponse)
def me(current_user: User = Depends(get_current_user)):
    return current_user


# Update own username and email
@router.patch("/user", response_model=schemas.UserResponse)
def update_profile(
    payload: schemas.ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    ensure_identity_available(db, username=payload.username, email=payload.email, exclude_id=current_user.id)

    current_user.username = payload.username
    if payload.email is not None:
        current_user.email = payload.email.strip().lower()
    db.commit()
    db.refresh(current_user)
    return current_user


@router.post("/user/change-password", response_model=SuccessResponse)
def change_password(
    payload: schemas.PasswordChange,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    if not verify_password(payload.current_password, current_user.password):
        raise HTTPException(status_code=400, detail="Current password is incorrect")

    if len(payload.new_password) < 8:
        raise HTTPException(status_code=400, detail="New password must be at least 8 characters long")

    current_user.password = get_password_hash(payload.new_password)
    db.commit()
    return SuccessResponse()
