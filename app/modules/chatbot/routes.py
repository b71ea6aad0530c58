from fastapi import APIRouter, Depends
from app.database.json_store import RecordStore
from app.database.store_client import get_store
from app.modules.chatbot.schemas import ChatRequest, ChatResponse
from app.modules.chatbot.service import ChatbotService

router = APIRouter(prefix="/chatbot", tags=["chatbot"])


def get_chatbot_service(store: RecordStore = Depends(get_store)) -> ChatbotService:
    return ChatbotService(store)


@router.post("/chat", response_model=ChatResponse)
async def chat(
    chat_request: ChatRequest,
    service: ChatbotService = Depends(get_chatbot_service)
):
    """Answer a chat message"""
    return service.reply(chat_request.message)
