# src/scripts/serve.py
"""
Run the API locally.

Usage:
  python -m src.scripts.serve
  PORT=8080 python -m src.scripts.serve
"""

from __future__ import annotations

import uvicorn

from src.utils.config import get_service_config


def main() -> None:
    cfg = get_service_config()
    print(f"[OK] Backend listening on port {cfg.port}")
    uvicorn.run("src.api.app:app", host=cfg.host, port=cfg.port, log_level=cfg.log_level.lower())


if __name__ == "__main__":
    main()
