"""
Chat Service - Scripted study-assistant replies and chat history
"""
from typing import List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.logging_config import logger
from core.schemas import ChatMessageCreate
from db.models import ChatMessage

# Checked in order; the first rule with a matching keyword wins
REPLY_RULES: List[Tuple[Tuple[str, ...], str]] = [
    (("help", "stuck"),
     "I'm here to help! Can you tell me more specifically what you're finding challenging? "
     "I can break down the concept step by step, or we can try a different approach if that works better for you."),
    (("explain", "understand"),
     "Great question! Let me break this down for you. The key concept here is to think about it in smaller parts. "
     "Would you like me to walk through an example together?"),
    (("practice", "more"),
     "Practice is a great idea! I'd recommend focusing on similar problems first to build your confidence. "
     "Would you like me to suggest which topic areas would give you the most improvement?"),
    (("score", "progress"),
     "Your progress is looking good! You've been consistent with your studying, which is the most important factor. "
     "Keep focusing on your recommended topics, and you'll see improvement in your projected score."),
    (("tired", "frustrated", "hard"),
     "I understand - SAT prep can be demanding. It's completely normal to feel this way sometimes. "
     "Remember, taking breaks is important for learning. Would you like some tips on how to study more efficiently?"),
    (("math",),
     "Math is one of the areas where consistent practice really pays off. For SAT math, focus on understanding the "
     "concepts rather than memorizing formulas. What specific type of math problem would you like help with?"),
    (("reading", "passage"),
     "For reading passages, try to identify the main idea first before diving into the questions. Annotating key "
     "points as you read can also help. Would you like some strategies for different question types?"),
    (("writing", "grammar"),
     "Writing and language questions often test the same grammar rules repeatedly. Focus on understanding comma "
     "usage, subject-verb agreement, and clear/concise expression. Want me to explain any of these in more detail?"),
    (("hi", "hello", "hey"),
     "Hello! I'm your SAT study assistant. I'm here to help you understand concepts, answer questions, and keep you "
     "motivated. What would you like to work on today?"),
]

FALLBACK_REPLY = (
    "That's a thoughtful question. Based on where you are in your preparation, I'd suggest focusing on building "
    "strong foundations first. Would you like me to help you identify which areas would benefit most from your attention?"
)


def generate_reply(message: str) -> str:
    """Pick a canned reply by case-insensitive substring match"""
    lower_message = message.lower()
    for keywords, reply in REPLY_RULES:
        if any(keyword in lower_message for keyword in keywords):
            return reply
    return FALLBACK_REPLY


class ChatService:

    async def save_chat_message(self, db: AsyncSession, data: ChatMessageCreate) -> ChatMessage:
        message = ChatMessage(**data.model_dump())
        db.add(message)
        await db.flush()
        return message

    async def get_chat_history(self, db: AsyncSession, student_id: str, limit: int = 50) -> List[ChatMessage]:
        """Most recent messages first"""
        result = await db.execute(
            select(ChatMessage)
            .where(ChatMessage.student_id == student_id)
            .order_by(ChatMessage.created_at.desc())
            .limit(limit)
        )
        return list(result.scalars().all())

    async def reply(
        self,
        db: AsyncSession,
        student_id: str,
        content: str,
        context: Optional[str] = None
    ) -> ChatMessage:
        """Store the student's message and the assistant's scripted answer"""
        await self.save_chat_message(db, ChatMessageCreate(
            student_id=student_id, role="user", content=content, context=context
        ))
        answer = await self.save_chat_message(db, ChatMessageCreate(
            student_id=student_id, role="assistant", content=generate_reply(content), context=context
        ))
        logger.debug(f"Chat reply for student {student_id} (context={context})")
        return answer


# Global instance
chat_service = ChatService()
