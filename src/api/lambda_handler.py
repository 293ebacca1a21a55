# src/api/lambda_handler.py
"""
AWS Lambda handler for FastAPI using Mangum (ASGI adapter).

How it works:
- API Gateway invokes Lambda
- Mangum translates the event into an ASGI request
- FastAPI handles routing (/, /health, /api/quote)
- Response is returned back to API Gateway

Lifespan events are skipped (lifespan="off"), so logging is configured
here at cold start instead of in the app's startup hook.
"""

from __future__ import annotations

from mangum import Mangum

from src.api.app import SERVICE_CONFIG, app
from src.utils.log import configure_logging


configure_logging(SERVICE_CONFIG.log_level)

# Mangum handler
handler = Mangum(app, lifespan="off")
