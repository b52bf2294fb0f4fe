# backend/routes/users.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from database import get_db
from models.users import User
from routes.auth import ensure_identity_available
from schemas.user import AdminUserCreate, AdminUserUpdate, UserResponse
from utils.crud import get_or_404, list_newest_first
from utils.hashing import get_password_hash
from utils.session_auth import admin_required

router = APIRouter(prefix="/api/users", tags=["Users"])


# List all accounts (Admin only)
@router.get("", response_model=List[UserResponse])
def list_users(db: Session = Depends(get_db), current_user: User = Depends(admin_required)):
    return list_newest_first(db, User)


# Create an account, optionally with admin rights (Admin only)
@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    payload: AdminUserCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(admin_required),
):
    ensure_identity_available(db, username=payload.username, email=payload.email)

    user = User(
        username=payload.username,
        email=payload.email.strip().lower(),
        password=get_password_hash(payload.password),
        is_admin=payload.is_admin,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


# Edit profile fields, reset the password or toggle admin rights (Admin only)
@router.patch("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: int,
    payload: AdminUserUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(admin_required),
):
    user = get_or_404(db, User, user_id, "User")
    ensure_identity_available(db, username=payload.username, email=payload.email, exclude_id=user.id)

    if payload.username is not None:
        user.username = payload.username
    if payload.email is not None:
        user.email = payload.email.strip().lower()
    if payload.password is not None:
        user.password = get_password_hash(payload.password)
    if payload.is_admin is not None:
        # Prevent an admin from locking themselves out
        if user.id == current_user.id and not payload.is_admin:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="You cannot remove your own admin rights")
        user.is_admin = payload.is_admin

    db.commit()
    db.refresh(user)
    return user


# Delete a user account (Admin only)
@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(admin_required),
):
    user = get_or_404(db, User, user_id, "User")

    # Prevent self-deletion
    if user.id == current_user.id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="You cannot delete your own account")

    db.delete(user)
    db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
