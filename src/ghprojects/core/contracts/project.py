"""Project and project item contracts."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class ItemContent(BaseModel):
    """The issue, pull request or draft issue behind a project item."""

    id: str = ""
    number: int = 0
    title: str = ""
    state: str = ""
    url: str = ""
    creator: str = ""
    created_at: datetime | None = None


class ProjectItem(BaseModel):
    id: str
    type: str = ""
    content: ItemContent = Field(default_factory=ItemContent)


class ItemPage(BaseModel):
    total_count: int = 0
    nodes: list[ProjectItem] = Field(default_factory=list)


class Project(BaseModel):
    id: str
    number: int = 0
    title: str = ""
    description: str = ""
    body: str = ""
    public: bool = False
    closed: bool = False
    url: str = ""
    creator: str = ""
    created_at: datetime | None = None
    items: ItemPage | None = None


class ProjectList(BaseModel):
    total_count: int = 0
    projects: list[Project] = Field(default_factory=list)
