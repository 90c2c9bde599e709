"""Schemas for Hackatime data."""
from pydantic import BaseModel
from typing import List


class HackatimeProjectResponse(BaseModel):
    name: str
    hours: float


class HackatimeProjectListResponse(BaseModel):
    projects: List[HackatimeProjectResponse]
