from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from app import schemas
from app.database import get_db
from app.repositories.jokes import SQLJokeRepository
from app.services.jokes import JokeService

router = APIRouter(prefix="/jokes", tags=["jokes"])

# Largest value a signed 64-bit INTEGER primary key can hold.
MAX_JOKE_ID = 2**63 - 1

ERROR_RESPONSES = {
    404: {"model": schemas.ErrorResponse},
    500: {"model": schemas.ErrorResponse},
}


def get_joke_service(db: Session = Depends(get_db)) -> JokeService:
    return JokeService(SQLJokeRepository(db))


@router.post(
    "",
    response_model=schemas.JokeRead,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": schemas.ErrorResponse}, 500: {"model": schemas.ErrorResponse}},
)
def create_joke(payload: schemas.JokeCreate, service: JokeService = Depends(get_joke_service)):
    return service.create(payload.question, payload.answer)


@router.get("", response_model=list[schemas.JokeRead], responses={500: {"model": schemas.ErrorResponse}})
def list_jokes(service: JokeService = Depends(get_joke_service)):
    return service.list_all()


# Declared before "/{joke_id}" so "random" is not parsed as an id.
@router.get("/random", response_model=schemas.JokeRead, responses=ERROR_RESPONSES)
def get_random_joke(service: JokeService = Depends(get_joke_service)):
    return service.get_random()


@router.get("/{joke_id}", response_model=schemas.JokeRead, responses=ERROR_RESPONSES)
def get_joke(
    joke_id: int = Path(ge=1, le=MAX_JOKE_ID),
    service: JokeService = Depends(get_joke_service),
):
    return service.get_by_id(joke_id)


@router.delete("/{joke_id}", response_model=schemas.MessageResponse, responses=ERROR_RESPONSES)
def delete_joke(
    joke_id: int = Path(ge=1, le=MAX_JOKE_ID),
    service: JokeService = Depends(get_joke_service),
):
    return {"message": service.delete_by_id(joke_id)}
