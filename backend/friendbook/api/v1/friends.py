from typing import Annotated
import logging

from fastapi import APIRouter, Depends, Path, Query, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from friendbook.core.errors import NOT_FOUND_MESSAGE
from friendbook.crud import friend as crud
from friendbook.db.session import get_db
from friendbook.models import Friend
from friendbook.schemas.friend import (
    FriendCreate,
    FriendRead,
    FriendUpdate,
    NotFoundMessage,
)
from friendbook.services.diagnostics import raise_diagnostic_error


router = APIRouter(prefix="/friends", tags=["Friends"])
logger = logging.getLogger(__name__)

FriendId = Annotated[int, Path(gt=0, examples=[1])]

NOT_FOUND_RESPONSE = {status.HTTP_404_NOT_FOUND: {"model": NotFoundMessage, "description": "Not Found"}}


def _not_found() -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": NOT_FOUND_MESSAGE})


@router.get("", response_model=list[FriendRead], summary="List Friends")
def list_friends(db: Annotated[Session, Depends(get_db)]) -> list[Friend]:
    return crud.list_friends(db)


@router.get("/{friend_id}", response_model=FriendRead, responses=NOT_FOUND_RESPONSE, summary="Get Friend")
def get_friend(friend_id: FriendId, db: Annotated[Session, Depends(get_db)]) -> Friend | JSONResponse:
    friend = crud.get_friend(db, friend_id)
    if not friend:
        return _not_found()
    return friend


@router.post("", response_model=FriendRead, status_code=status.HTTP_201_CREATED, summary="Create Friend")
def create_friend(
    payload: FriendCreate,
    db: Annotated[Session, Depends(get_db)],
    sentry_test: Annotated[bool, Query(alias="sentryTest")] = False,
    sentry_unique: Annotated[bool, Query(alias="sentryUnique")] = False,
) -> Friend:
    if sentry_test:
        raise_diagnostic_error("POST /api/friends", unique_fingerprint=sentry_unique)

    friend = crud.create_friend(db, payload.model_dump())
    logger.info("Friend created", extra={"friend_id": friend.id})
    return friend


@router.put("/{friend_id}", response_model=FriendRead, responses=NOT_FOUND_RESPONSE, summary="Update Friend")
def update_friend(
    friend_id: FriendId,
    payload: FriendUpdate,
    db: Annotated[Session, Depends(get_db)],
) -> Friend | JSONResponse:
    friend = crud.update_friend(db, friend_id, payload.changes())
    if not friend:
        return _not_found()
    return friend


@router.delete(
    "/{friend_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSE,
    summary="Delete Friend",
)
def delete_friend(friend_id: FriendId, db: Annotated[Session, Depends(get_db)]) -> Response:
    if not crud.delete_friend(db, friend_id):
        return _not_found()
    logger.info("Friend deleted", extra={"friend_id": friend_id})
    return Response(status_code=status.HTTP_204_NO_CONTENT)
