"""Pydantic request/response models for API endpoints."""

from typing import Any, Literal

from pydantic import BaseModel


class CreateCollection(BaseModel):
    label: str
    description: str = ""
    slug_template: str = "{{slug}}"


class UpdateCollection(BaseModel):
    label: str | None = None
    description: str | None = None
    slug_template: str | None = None


class CreateEntry(BaseModel):
    title: str
    body: str = ""
    data: dict[str, Any] = {}


class UpdateEntry(BaseModel):
    title: str | None = None
    body: str | None = None
    data: dict[str, Any] | None = None


class SlugPreviewBody(BaseModel):
    text: str
    replacement: str | None = None
    encoding: Literal["unicode", "ascii"] | None = None
