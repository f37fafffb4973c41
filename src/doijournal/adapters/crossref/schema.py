"""Crossref works API response schemas.

Only the fields the journal candidate needs are modelled; everything else in a
work record is kept as pydantic extras and passed through untouched.
"""

from __future__ import annotations

import logging
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

log = logging.getLogger(__name__)


class CrossrefBaseModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class CrossrefIssnType(CrossrefBaseModel):
    value: str | None = None
    type: str | None = None


class CrossrefWork(CrossrefBaseModel):
    doi: str | None = Field(default=None, alias="DOI")
    container_title: list[str | None] | None = Field(default=None, alias="container-title")
    issn_type: list[CrossrefIssnType] | None = Field(default=None, alias="issn-type")
    issn: list[str | None] | None = Field(default=None, alias="ISSN")


class CrossrefWorkResponse(CrossrefBaseModel):
    _expected_message_type: ClassVar[str] = "work"

    status: str
    message_type: str | None = Field(default=None, alias="message-type")
    message: CrossrefWork

    def model_post_init(self, _context: object, /) -> None:
        if self.message_type is not None and self.message_type != self._expected_message_type:
            log.warning("Crossref returned message-type %r for a work lookup", self.message_type)
