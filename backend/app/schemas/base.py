"""
Base commune des schémas : JSON en camelCase, attributs Python en snake_case.
Les deux formes sont acceptées en entrée.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def not_blank(v: str) -> str:
    if not v.strip():
        raise ValueError("Le champ ne peut pas être vide.")
    return v.strip()


def positive(v: int) -> int:
    if v <= 0:
        raise ValueError("Le montant doit être strictement positif.")
    return v
