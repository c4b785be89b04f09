import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..auth.auth import require_admin
from ..crud import common
from ..crud.content import get_messages, mark_message_as_read
from ..database.database import get_db
from ..models.message import Message
from ..schemas.message import MessageCreate, MessageOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/messages", tags=["messages"])
admin_router = APIRouter(prefix="/api/admin/messages", tags=["admin"], dependencies=[Depends(require_admin)])


@router.post("", status_code=201)
def send_message(payload: MessageCreate, db: Session = Depends(get_db)):
    message = common.create(db, Message, payload.model_dump(), "send message")
    logger.info("Contact message %s received from %s", message.id, message.email)
    return {"message": "Message sent successfully"}


@admin_router.get("", response_model=List[MessageOut])
def list_messages(db: Session = Depends(get_db)):
    return get_messages(db)


@admin_router.put("/{message_id}/read", response_model=MessageOut)
def read_message(message_id: int, db: Session = Depends(get_db)):
    message = common.get_by_id(db, Message, message_id)
    if not message:
        raise HTTPException(status_code=404, detail="Message not found")
    return mark_message_as_read(db, message)


@admin_router.delete("/{message_id}", status_code=204)
def delete_message(message_id: int, db: Session = Depends(get_db)):
    message = common.get_by_id(db, Message, message_id)
    if not message:
        raise HTTPException(status_code=404, detail="Message not found")
    common.delete(db, message, "delete message")
