import logging
import anthropic
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session
from typing import List, Literal
from database import get_db
from crud.api.v1.deps import get_owner_id
from utils.assistant import FarmAssistant, AssistantUnavailableError

router = APIRouter()
logger = logging.getLogger(__name__)


class ChatMessage(BaseModel):
    role: Literal["user", "assistant"]
    content: str

class ChatRequest(BaseModel):
    messages: List[ChatMessage] = Field(min_length=1)

class ChatResponse(BaseModel):
    reply: str


def get_assistant(owner_id: str = Depends(get_owner_id), db: Session = Depends(get_db)) -> FarmAssistant:
    try:
        return FarmAssistant(db, owner_id)
    except AssistantUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))

@router.post("/chat", response_model=ChatResponse)
def chat(request: ChatRequest, assistant: FarmAssistant = Depends(get_assistant)):
    messages = [m.model_dump() for m in request.messages]
    try:
        reply = assistant.chat(messages)
    except anthropic.APIError as e:
        logger.error("assistant request failed: %s", e)
        raise HTTPException(status_code=502, detail="Assistant provider error")
    return {"reply": reply}
