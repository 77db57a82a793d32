from typing import List

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ..models import ChatMessage, InputText, PlainResult
from ..state import AppState, get_state

router = APIRouter(prefix="/chat", tags=["chat"])


class SendRequest(BaseModel):
	text: InputText


class ChatLog(BaseModel):
	messages: List[ChatMessage]


class SendResponse(BaseModel):
	reply: PlainResult
	messages: List[ChatMessage]


@router.post("/open", response_model=ChatLog)
def open_chat(state: AppState = Depends(get_state)):
	state.chat.open()
	return ChatLog(messages=state.chat.messages)


@router.get("/messages", response_model=ChatLog)
def messages(state: AppState = Depends(get_state)):
	return ChatLog(messages=state.chat.messages)


@router.post("/messages", response_model=SendResponse)
async def send(req: SendRequest, state: AppState = Depends(get_state)):
	reply = await state.chat.send_message(req.text)
	return SendResponse(reply=reply, messages=state.chat.messages)
