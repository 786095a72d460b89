# app/api/dinosaurs.py

import logging
from pathlib import Path
from typing import List, Optional

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.data.dinosaurs import get_dinosaur, load_dinosaurs
from app.data.errors import DinoError, DinoNotFoundError
from app.models.dinosaurs import DinoRecord

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"  # app/templates
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["dinosaurs"])


def _log_failure(error: DinoError) -> None:
    if isinstance(error, DinoNotFoundError):
        logger.warning("%s: %s", error.kind, error)
        return
    if error.__cause__ is None:
        logger.error("%s: %s", error.kind, error)
        return
    logger.error("%s: %s (cause: %r)", error.kind, error, error.__cause__)


@router.get("/", response_class=HTMLResponse)
async def list_dinosaurs(request: Request):
    """
    Render every dinosaur in the data file as a link.

    Any pipeline failure renders an empty list instead.
    """
    try:
        dinos: List[DinoRecord] = await load_dinosaurs()
    except DinoError as e:
        _log_failure(e)
        dinos = []

    return templates.TemplateResponse(request, "index.html", {"dinosaurs": dinos})


# path converter so names containing "/" still reach this route
@router.get("/{name:path}", response_class=HTMLResponse)
async def show_dinosaur(request: Request, name: str):
    """
    Render one dinosaur, matched by name case-insensitively.

    A miss or any pipeline failure renders the not-found page with status 200.
    """
    dino: Optional[DinoRecord]
    try:
        dino = await get_dinosaur(name)
    except DinoError as e:
        _log_failure(e)
        dino = None

    return templates.TemplateResponse(request, "dinosaur.html", {"dino": dino})
