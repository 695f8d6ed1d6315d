from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from domain.entities import Task


class TaskCreate(BaseModel):
    # A client-supplied id is accepted and then ignored; the store assigns ids.
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[int] = None
    title: str
    description: str = ""
    due_date: date = Field(alias="dueDate")
    tags: str = ""

    @field_validator("due_date", mode="before")
    @classmethod
    def accept_timestamps(cls, value):
        """Keep only the calendar day of an RFC 3339 timestamp."""
        if isinstance(value, str) and "T" in value:
            try:
                return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
            except ValueError:
                raise ValueError(f"invalid dueDate '{value}'")
        return value

    def to_entity(self) -> Task:
        return Task(
            title=self.title,
            description=self.description,
            due_date=self.due_date,
            tags=self.tags,
        )


class TaskResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    description: str
    due_date: date = Field(alias="dueDate")
    tags: str

    @classmethod
    def from_entity(cls, task: Task) -> "TaskResponse":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            due_date=task.due_date,
            tags=task.tags,
        )


class TaskCreated(BaseModel):
    id: int


class MessageResponse(BaseModel):
    msg: str


class ErrorResponse(BaseModel):
    error: str
