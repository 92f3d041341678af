# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class FrozenModel(BaseModel):
    """
    Base for every settings entity: immutable once built, camelCase on the wire.

    Both the snake_case attribute names and their camelCase aliases are
    accepted as input. Unknown keys are rejected.
    """

    model_config = {
        "frozen": True,
        "extra": "forbid",
        "populate_by_name": True,
        "alias_generator": to_camel,
    }


def not_blank(v: str, what: str) -> str:
    if not v or not v.strip():
        raise ValueError(f"{what} cannot be empty")
    return v.strip()


def unique_strings(values, what: str) -> tuple:
    """Strip, drop blank entries and duplicates, keeping first-seen order."""
    if isinstance(values, str):
        values = [values]
    if not isinstance(values, (list, tuple, set, frozenset)):
        raise ValueError(f"{what} must be a list of strings, got {type(values).__name__}")
    bad = [v for v in values if not isinstance(v, str)]
    if bad:
        raise ValueError(f"{what} must contain only strings, got {bad!r}")
    return tuple(dict.fromkeys(s for s in (v.strip() for v in values) if s))
