"""Storage access for jokes.

``JokeStore`` is the contract the service depends on; ``SQLJokeRepository``
is the SQLAlchemy-backed implementation used by the HTTP layer.
"""
from typing import Protocol

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models import Joke


class JokeStore(Protocol):
    def create(self, question: str, answer: str) -> Joke: ...
    def find_all(self) -> list[Joke]: ...
    def find_by_id(self, joke_id: int) -> Joke | None: ...
    def count(self) -> int: ...
    def find_with_offset_limit(self, offset: int, limit: int) -> list[Joke]: ...
    def delete(self, joke: Joke) -> None: ...


class SQLJokeRepository:
    """CRUD helpers wrapping a request-scoped SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, question: str, answer: str) -> Joke:
        joke = Joke(question=question, answer=answer)
        try:
            self.db.add(joke)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(joke)
        return joke

    def find_all(self) -> list[Joke]:
        return list(self.db.execute(select(Joke)).scalars().all())

    def find_by_id(self, joke_id: int) -> Joke | None:
        return self.db.get(Joke, joke_id)

    def count(self) -> int:
        return self.db.execute(select(func.count()).select_from(Joke)).scalar_one()

    def find_with_offset_limit(self, offset: int, limit: int) -> list[Joke]:
        # No ORDER BY: the row at a given offset is whatever the storage returns.
        stmt = select(Joke).offset(offset).limit(limit)
        return list(self.db.execute(stmt).scalars().all())

    def delete(self, joke: Joke) -> None:
        try:
            self.db.delete(joke)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
