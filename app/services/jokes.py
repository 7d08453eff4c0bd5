"""Joke operations behind the HTTP handlers.

The service owns input validation, the offset-based random pick and the
translation of storage failures into ``StorageError``. Storage is injected so
tests can hand in a double.
"""
import logging
import random
from typing import Callable, TypeVar

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError

from app import schemas
from app.core.errors import NotFoundError, StorageError, ValidationError, field_errors
from app.models import Joke
from app.repositories.jokes import JokeStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

DELETED_MESSAGE = "Joke deleted successfully."


class JokeService:
    def __init__(self, store: JokeStore, rng: random.Random | None = None):
        self.store = store
        self.rng = rng or random.Random()

    def _storage(self, operation: str, call: Callable[[], T]) -> T:
        try:
            return call()
        except SQLAlchemyError as exc:
            logger.exception("Storage failure during %s", operation)
            raise StorageError(operation) from exc

    def create(self, question: str | None, answer: str | None) -> Joke:
        try:
            payload = schemas.JokeCreate(question=question, answer=answer)
        except PydanticValidationError as exc:
            raise ValidationError("Missing question or answer", field_errors(exc.errors())) from exc
        joke = self._storage("create", lambda: self.store.create(payload.question, payload.answer))
        logger.info("Created joke %s", joke.id)
        return joke

    def list_all(self) -> list[Joke]:
        return self._storage("list", self.store.find_all)

    def get_random(self) -> Joke:
        # count and fetch are separate calls; a delete in between can empty the offset.
        total = self._storage("count", self.store.count)
        if total == 0:
            raise NotFoundError("No jokes in DB")
        offset = self.rng.randrange(total)
        jokes = self._storage("random", lambda: self.store.find_with_offset_limit(offset, 1))
        if not jokes:
            raise NotFoundError("No jokes in DB")
        return jokes[0]

    def get_by_id(self, joke_id: int) -> Joke:
        joke = self._storage("lookup", lambda: self.store.find_by_id(joke_id))
        if joke is None:
            raise NotFoundError("Joke not found")
        return joke

    def delete_by_id(self, joke_id: int) -> str:
        joke = self.get_by_id(joke_id)
        self._storage("delete", lambda: self.store.delete(joke))
        logger.info("Deleted joke %s", joke_id)
        return DELETED_MESSAGE
