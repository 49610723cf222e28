"""Website Assistant: live chat API entrypoint."""

from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parents[1] / ".env")

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from assistant.config import get_settings
from assistant.live.content import load_content
from assistant.live.router import router as live_router
from assistant.live.session import set_content

logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    set_content(load_content(settings.content_path))
    logger.info("assistant ready (typing delay %s)", "on" if settings.typing_delay_enabled else "off")
    yield


app = FastAPI(
    title="Website Assistant API",
    description="User message → entities + emotion + intent → context update → scripted reply",
    lifespan=lifespan,
)
app.include_router(live_router)


@app.get("/health")
def health():
    return {"status": "ok"}
