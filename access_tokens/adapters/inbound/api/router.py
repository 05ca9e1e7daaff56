# access_tokens/adapters/inbound/api/router.py

from fastapi import APIRouter
from access_tokens.adapters.inbound.api.endpoints import token_endpoint

api_router = APIRouter()

# Include the endpoint routers
api_router.include_router(token_endpoint.router, prefix="/tokens", tags=["Tokens"])
