from fastapi import APIRouter

from balnearios_ai.api.routes import chat
from balnearios_ai.domains.balnearios.api import router as balnearios_router

api_router = APIRouter()

# API routes (all have the API_V1_STR prefix from the app factory)
api_router.include_router(balnearios_router)
api_router.include_router(chat.router, prefix="/chat", tags=["chat"])
