# app/data/dinosaurs.py

import json
import logging
from typing import Any, List

import anyio
from pydantic import ValidationError

from app.data.errors import (
    DataFormatError,
    DinoNotFoundError,
    FileReadError,
    ParseError,
)
from app.models.dinosaurs import DinoRecord

logger = logging.getLogger(__name__)

DATA_PATH = "data/dinosaurs.json"  # relative to the working directory


# ---- Stages ----

async def read_dino_file(path: str = DATA_PATH) -> str:
    try:
        return await anyio.Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(e) from e


def _reject_constant(value: str):
    raise ValueError(f"Invalid JSON constant {value!r}")


def parse_dino_data(text: str) -> Any:
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        raise ParseError(e) from e


def validate_dino_array(data: Any) -> List[DinoRecord]:
    """
    All-or-nothing check that data is a list of {name, description} objects.
    """
    if not isinstance(data, list):
        raise DataFormatError("Data is not in expected array format")

    dinos: List[DinoRecord] = []
    for index, item in enumerate(data):
        try:
            dinos.append(DinoRecord.model_validate(item))
        except ValidationError as e:
            raise DataFormatError(
                f"Some items in array are not valid dinosaur records (index {index})"
            ) from e

    return dinos


def find_dino(name: str, dinos: List[DinoRecord]) -> DinoRecord:
    wanted = name.lower()
    for dino in dinos:
        if dino.name.lower() == wanted:
            return dino
    raise DinoNotFoundError(name)


# ---- Pipelines ----

async def load_dinosaurs(path: str = DATA_PATH) -> List[DinoRecord]:
    text = await read_dino_file(path)
    data = parse_dino_data(text)
    dinos = validate_dino_array(data)
    logger.debug("Loaded %s dinosaurs from %s", len(dinos), path)
    return dinos


async def get_dinosaur(name: str, path: str = DATA_PATH) -> DinoRecord:
    dinos = await load_dinosaurs(path)
    return find_dino(name, dinos)
