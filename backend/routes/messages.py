# backend/routes/messages.py
import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from database import get_db
from models.message import Message
from models.users import User
from schemas.base import SuccessResponse
from schemas.message import MessageCreate, MessageOut
from utils import analytics
from utils.crud import create_item, delete_item, get_or_404, list_newest_first
from utils.session_auth import admin_required

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/messages", tags=["Messages"])


# Inbox, newest first (Admin only)
@router.get("", response_model=List[MessageOut])
def list_messages(db: Session = Depends(get_db), current_user: User = Depends(admin_required)):
    return list_newest_first(db, Message)


@router.get("/{message_id}", response_model=MessageOut)
def get_message(
    message_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(admin_required),
):
    return get_or_404(db, Message, message_id, "Message")


# Public contact form submission; counts as an inquiry
@router.post("", response_model=MessageOut, status_code=status.HTTP_201_CREATED)
def create_message(payload: MessageCreate, db: Session = Depends(get_db)):
    message = create_item(db, Message, payload)
    result = MessageOut.model_validate(message)
    logger.info("New message %s from %s", message.id, message.email)
    analytics.track(db, analytics.INQUIRIES)
    return result


# Mark as read (Admin only); repeating the call changes nothing
@router.patch("/{message_id}/read", response_model=SuccessResponse)
def mark_message_read(
    message_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(admin_required),
):
    message = get_or_404(db, Message, message_id, "Message")
    if not message.read:
        message.read = True
        db.commit()
    return SuccessResponse()


@router.delete("/{message_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_message(
    message_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(admin_required),
):
    delete_item(db, get_or_404(db, Message, message_id, "Message"))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
