# app/models/schemas.py
import datetime as dt
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


# --- Editable article fields ---
# Used by create and update; all five are required every time
class ArticleFields(BaseModel):
    title: str = Field(max_length=255)
    content: str = Field(max_length=5000)
    region: str = Field(max_length=100)
    language: str = Field(max_length=50)
    date: dt.date

    class Config:
        str_strip_whitespace = True


# --- Public listing row ---
# featured is computed at read time, never stored
class PublicArticle(BaseModel):
    id: int
    title: str
    content: str
    region: Optional[str] = None
    language: Optional[str] = None
    date: Optional[dt.date] = None
    created_at: Optional[dt.datetime] = None
    featured: bool = False

    class Config:
        from_attributes = True


# --- Admin listing row ---
class AdminArticle(BaseModel):
    id: int
    title: str
    content: str
    region: Optional[str] = None
    language: Optional[str] = None
    date: Optional[dt.date] = None
    status: str
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None

    class Config:
        from_attributes = True


class FilterOptions(BaseModel):
    regions: List[str] = []
    languages: List[str] = []


class ArticleStatistics(BaseModel):
    total: int
    by_status: Dict[str, int]
    regions: int
    languages: int
