"""
Pydantic schemas for property types, categories, FAQs and knowledge-base articles.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime
import uuid
from noticeboard.models.content import ContentPriority


class DocumentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    slug: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class PropertyTypeCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100, examples=["Residential"])
    slug: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = None


class PropertyTypeUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    slug: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = None


class PropertyTypeResponse(DocumentResponse):
    name: str
    description: Optional[str] = None


class CategoryCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    slug: Optional[str] = Field(None, max_length=255)


class CategoryUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    slug: Optional[str] = Field(None, max_length=255)


class CategoryResponse(DocumentResponse):
    title: str


class FAQCreate(BaseModel):
    question: str = Field(..., min_length=1, max_length=500)
    answer: str = Field(..., min_length=1)
    category: str = Field("general", max_length=100)
    priority: ContentPriority = ContentPriority.MEDIUM
    published: bool = True
    slug: Optional[str] = Field(None, max_length=255)


class FAQUpdate(BaseModel):
    question: Optional[str] = Field(None, min_length=1, max_length=500)
    answer: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = Field(None, max_length=100)
    priority: Optional[ContentPriority] = None
    published: Optional[bool] = None
    slug: Optional[str] = Field(None, max_length=255)


class FAQResponse(DocumentResponse):
    question: str
    answer: str
    category: str
    priority: ContentPriority
    published: bool


class KnowledgeBaseCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    summary: Optional[str] = None
    content: str = Field(..., min_length=1)
    category: str = Field("general", max_length=100)
    priority: ContentPriority = ContentPriority.MEDIUM
    published: bool = True
    slug: Optional[str] = Field(None, max_length=255)


class KnowledgeBaseUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    summary: Optional[str] = None
    content: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = Field(None, max_length=100)
    priority: Optional[ContentPriority] = None
    published: Optional[bool] = None
    slug: Optional[str] = Field(None, max_length=255)


class KnowledgeBaseResponse(DocumentResponse):
    title: str
    summary: Optional[str] = None
    content: str
    category: str
    priority: ContentPriority
    published: bool
