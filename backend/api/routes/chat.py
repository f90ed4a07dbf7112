from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession
from db.database import get_db
from core.schemas import ChatMessageCreate, ChatReplyRequest
from services.chat_service import chat_service
from services.student_service import student_service
from api.serializers import chat_message_to_dict

router = APIRouter()

@router.post("", status_code=201)
async def save_message(request: ChatMessageCreate, db: AsyncSession = Depends(get_db)):
    if not await student_service.get_student(db, request.student_id):
        raise HTTPException(status_code=404, detail="Student not found")
    message = await chat_service.save_chat_message(db, request)
    return chat_message_to_dict(message)

@router.post("/reply", status_code=201)
async def reply(request: ChatReplyRequest, db: AsyncSession = Depends(get_db)):
    """Save the student's message and return the assistant's scripted reply"""
    if not await student_service.get_student(db, request.student_id):
        raise HTTPException(status_code=404, detail="Student not found")
    answer = await chat_service.reply(db, request.student_id, request.content, request.context)
    return chat_message_to_dict(answer)

@router.get("/{student_id}")
async def get_history(student_id: str, limit: int = Query(50, ge=1, le=500), db: AsyncSession = Depends(get_db)):
    messages = await chat_service.get_chat_history(db, student_id, limit)
    return [chat_message_to_dict(m) for m in messages]
