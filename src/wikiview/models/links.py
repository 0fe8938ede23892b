"""Link classification models.

A link inside a rendered page is exactly one of:

- :class:`Internal`: authored as an in-product reference, carries a page id.
- :class:`External`: any other URL, opened with the generic URL opener.
- :class:`Anchor`: an in-page fragment. It has no navigation target.
"""

from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict


class Internal(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["internal"] = "internal"
    page_id: str


class External(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["external"] = "external"
    url: str


class Anchor(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["anchor"] = "anchor"


LinkClassification = Union[Internal, External, Anchor]
