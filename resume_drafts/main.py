import logging

import sentry_sdk
from dotenv import load_dotenv
from fastapi import FastAPI

from resume_drafts.api.v1.health import router as health_router
from resume_drafts.api.v1.resume import router as resume_router
from resume_drafts.api.v1.templates import router as templates_router
from resume_drafts.core.config import settings

load_dotenv()
logging.basicConfig(level=settings.log_level, format="%(message)s")
if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn)

app = FastAPI(title="Resume Draft Engine API", version="0.1.0")

app.include_router(health_router, prefix="/v1", tags=["Health"])
app.include_router(resume_router, prefix="/v1", tags=["Resume"])
app.include_router(templates_router, prefix="/v1", tags=["Templates"])
