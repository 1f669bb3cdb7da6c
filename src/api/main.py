"""
FastAPI backend: run address book commands over HTTP.
Run with uvicorn: uvicorn api.main:app --reload
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from repo root (when run from repo root or from Docker)
for path in (
    Path(__file__).resolve().parent.parent.parent / ".env",
    Path.cwd() / ".env",
):
    if path.exists():
        load_dotenv(path)
        break

from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from pydantic import BaseModel

from modbook.application import CommandError, CommandService, ParseError
from modbook.domain import Person
from modbook.infrastructure import load_model

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO",
)
logger = logging.getLogger(__name__)


def get_service(app: FastAPI) -> CommandService:
    """Return the app's CommandService, loading the address book on first use."""
    if getattr(app.state, "service", None) is None:
        app.state.service = CommandService(load_model())
    return app.state.service


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.service = None
    logger.info("Commands: POST /commands with {\"command\": \"delete 1\"}")
    get_service(app)
    yield


app = FastAPI(title="Modbook API", lifespan=lifespan)


# --- REST: health ---


@app.get("/health")
def health():
    return {"status": "ok"}


# --- REST: persons ---


class PersonItem(BaseModel):
    index: int
    name: str
    email: str
    module_codes: list[str]
    phone: str | None = None
    tele_handle: str = ""
    remark: str = ""
    tags: list[str] = []


def _to_item(index: int, person: Person) -> PersonItem:
    return PersonItem(
        index=index,
        name=person.name.value,
        email=person.email.value,
        module_codes=sorted(code.value for code in person.module_codes),
        phone=person.phone.value if person.phone is not None else None,
        tele_handle=person.tele_handle.value,
        remark=person.remark.value,
        tags=sorted(tag.name for tag in person.tags),
    )


@app.get("/persons")
def list_persons(request: Request):
    """Return the displayed list, numbered the way commands refer to it (one-based)."""
    service = get_service(request.app)
    return [
        _to_item(position, person)
        for position, person in enumerate(service.displayed_persons(), start=1)
    ]


# --- REST: commands ---


class CommandBody(BaseModel):
    command: str


class CommandResponse(BaseModel):
    feedback: str


@app.post("/commands")
def run_command(body: CommandBody, request: Request) -> CommandResponse:
    service = get_service(request.app)
    try:
        result = service.execute(body.command)
    except (ParseError, CommandError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return CommandResponse(feedback=result.feedback)
