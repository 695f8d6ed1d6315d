from dataclasses import dataclass
from datetime import date
from typing import Optional

@dataclass
class Task:
    title: str
    due_date: date
    description: str = ""
    tags: str = ""
    id: Optional[int] = None
