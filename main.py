# =============================================================================
# 🚀 QR Payload Codec – Hauptapplikation (main.py)
# =============================================================================

from __future__ import annotations
import logging
from pathlib import Path

from fastapi import FastAPI
from dotenv import load_dotenv

# -------------------------------------------------------------------------
# 1️⃣ .env laden (muss ganz oben sein!)
# -------------------------------------------------------------------------
env_path = Path(__file__).resolve().parent / ".env"
load_dotenv(dotenv_path=env_path)

from utils.qr_config import get_settings  # noqa: E402

settings = get_settings()

# -------------------------------------------------------------------------
# 2️⃣ Logging
# -------------------------------------------------------------------------
logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

# -------------------------------------------------------------------------
# 3️⃣ FastAPI App
# -------------------------------------------------------------------------
app = FastAPI(title=settings.app_title, version=settings.app_version)

# -------------------------------------------------------------------------
# 4️⃣ Routen laden
# -------------------------------------------------------------------------
from routes import api  # noqa: E402

app.include_router(api.router)


# -------------------------------------------------------------------------
# 5️⃣ Health
# -------------------------------------------------------------------------
@app.get("/health")
def health():
    return {"status": "ok", "version": settings.app_version}
