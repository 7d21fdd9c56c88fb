from datetime import datetime
from typing import Optional

from sqlmodel import SQLModel, Field
from sqlalchemy import TEXT, DateTime


class Page(SQLModel, table=True):
    __tablename__ = "pages"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(default="", index=True)
    content: str = Field(default="", sa_type=TEXT)
    last_modified: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))


class PageInput(SQLModel):
    """Values a page form is pre-filled with"""

    id: Optional[int] = None
    name: str = ""
    content: str = ""
