# src/api/app.py
"""
FastAPI service for the Fair Insurance Price Calculator (thin API wrapper).

Endpoints:
- GET  /           -> liveness text
- GET  /health     -> JSON status
- POST /api/quote  -> fair price + five company offers

The API layer stays thin:
- accepts the form payload as-is (every field optional, strings or numbers)
- calls src.service.quote_service
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, List, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from src.pricing.config import PricingConfig
from src.service.quote_service import quote_from_payload_dict
from src.utils.config import get_service_config
from src.utils.log import configure_logging

logger = logging.getLogger(__name__)

SERVICE_CONFIG = get_service_config()


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(SERVICE_CONFIG.log_level)
    logger.info("Fair Insurance Backend starting on port %s", SERVICE_CONFIG.port)
    yield
    logger.info("Fair Insurance Backend shutting down")


app = FastAPI(title="Fair Insurance Price Calculator", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(SERVICE_CONFIG.cors_origins),
    allow_methods=["*"],
    allow_headers=["*"],
)


# -----------------------------
# Schemas
# -----------------------------
class QuoteInput(BaseModel):
    # Form values are coerced by the runtime builder, never rejected here
    model: Optional[Any] = None
    year: Optional[Any] = None
    city: Optional[Any] = None
    accidents: Optional[Any] = None
    driver_age: Optional[Any] = None


class OfferOut(BaseModel):
    company: str
    modifier: float
    price: int


class QuoteOut(BaseModel):
    fair_price: int
    offers: List[OfferOut]


# -----------------------------
# Routes
# -----------------------------
@app.get("/", response_class=PlainTextResponse)
def root() -> str:
    return "Fair Insurance Backend is running."


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok", "currency": PricingConfig().currency}


@app.post("/api/quote", response_model=QuoteOut)
def quote(req: Optional[QuoteInput] = None) -> Dict[str, Any]:
    payload = req.model_dump() if req is not None else {}
    return quote_from_payload_dict(payload)
