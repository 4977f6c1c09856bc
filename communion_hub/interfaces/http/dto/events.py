# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, HttpUrl, field_validator
from pydantic_core import PydanticCustomError

from communion_hub.domain.events.entities import Event, EventDraft
from communion_hub.shared.errors.validation_types import ValidationErrorType


class CreateEventRequestDTO(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    date: datetime
    location: str = Field(min_length=1, max_length=300)
    description: str = Field(min_length=1, max_length=5000)
    category: str = Field(min_length=1, max_length=64)
    image: HttpUrl | None = None

    model_config = ConfigDict(extra="ignore")

    @field_validator("title", "location", "description", "category")
    @classmethod
    def reject_blank(cls, value: str) -> str:
        if not value.strip():
            raise PydanticCustomError(
                ValidationErrorType.BLANK,
                "Value cannot be blank",
                {},
            )
        return value

    @field_validator("image", mode="before")
    @classmethod
    def empty_image_is_absent(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def to_draft(self) -> EventDraft:
        return EventDraft(
            title=self.title,
            date=self.date,
            location=self.location,
            description=self.description,
            category=self.category,
            image=str(self.image) if self.image is not None else None,
        )


class EventFilterDTO(BaseModel):
    category: str | None = Field(None, max_length=64)
    search: str | None = Field(None, max_length=200)

    model_config = ConfigDict(extra="ignore")


class EventDTO(BaseModel):
    id: int
    title: str
    date: datetime
    location: str
    description: str
    category: str
    image: str | None = None
    author_id: int | None = Field(None, serialization_alias="authorId")

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def dump(cls, event: Event) -> dict:
        return cls.model_validate(event).model_dump(mode="json", by_alias=True)
