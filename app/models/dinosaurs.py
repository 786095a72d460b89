# app/models/dinosaurs.py

from pydantic import BaseModel, ConfigDict


class DinoRecord(BaseModel):
    # strict: a non-string name/description is a format error, not coerced
    model_config = ConfigDict(strict=True, extra="ignore")

    name: str
    description: str
