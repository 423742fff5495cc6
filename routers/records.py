"""
List/create plumbing shared by the per-entity routers.

Create inserts exactly the submitted fields; anything omitted (or sent as
null) falls back to the column default. Store errors propagate to the
application's exception handlers, which turn them into ``{"error": ...}``
responses.
"""
from typing import List, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy.orm import Session

from models import Base

M = TypeVar("M", bound=Base)


def list_records(db: Session, model: Type[M]) -> List[M]:
     # No ORDER BY: rows come back in whatever order the store returns them
     return db.query(model).all()


def create_record(db: Session, model: Type[M], body: BaseModel, **overrides) -> M:
     values = body.model_dump(exclude_none=True)
     values.update(overrides)
     record = model(**values)
     db.add(record)
     db.commit()
     db.refresh(record)
     return record
