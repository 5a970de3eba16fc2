from contextlib import asynccontextmanager

from fastapi import FastAPI

from coach_chat.api.sessions import router as sessions_router
from coach_chat.core.logging_setup import configure_logging
from coach_chat.wiring.dependencies import close_assistant_api_client

configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await close_assistant_api_client()


app = FastAPI(title="Coaching Assistant Chat", version="1.0.0", lifespan=lifespan)

app.include_router(sessions_router, tags=["sessions"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
