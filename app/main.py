import app.logging_config
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from app.api.v1 import git_webhook, webhook
from app.core.config import get_settings
from app.core.timezone_helper import TimezoneHelper

logger = logging.getLogger(__name__)
settings = get_settings()

local_time = TimezoneHelper.get_local_now()
logger.info(f"[TIMEZONE] Zona horaria {settings.APP_TIMEZONE}. Hora actual: {local_time.strftime('%d/%m/%Y %H:%M:%S %Z')}")


@asynccontextmanager
async def lifespan(_: FastAPI):
    yield
    # Cerrar los pools HTTP compartidos
    await webhook.event_processor.composer.external_apis.close()
    await webhook.event_processor.messenger.close()
    await git_webhook.git_notifier.messenger.close()
    logger.info("[APP] Clientes HTTP cerrados")


app = FastAPI(title="LexBot – Messenger", lifespan=lifespan)

app.include_router(webhook.router)
app.include_router(git_webhook.router)

@app.get("/")
async def root():
    return {"message": "LexBot – Messenger"}
