"""
Watch party endpoints: sessions, encrypted chat, notifications and key directory.

Domain errors are logged with their detail and answered with a generic
message so internal state never leaks to the caller.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.dependencies.auth import AuthenticatedUser, get_current_user
from app.dependencies.services import get_services
from app.schemas.message import MessageBatch, MessageSendRequest
from app.schemas.movie import MovieDetails
from app.schemas.notification import Notification
from app.schemas.participant_key import ParticipantKey, PublicKeyRequest
from app.schemas.watch_party import WatchParty, WatchPartyCreateRequest
from app.services.container import ServiceContainer
from app.services.errors import NotFoundError, ValidationError, WatchPartyError

router = APIRouter()
logger = logging.getLogger(__name__)


def _failure(status_code: int, detail: str, event: str, exc: Exception, **context) -> HTTPException:
    fields = " ".join(f"{name}={value}" for name, value in context.items())
    if isinstance(exc, WatchPartyError):
        logger.warning("%s %s error=%s reason=%s", event, fields, exc.__class__.__name__, exc)
    else:
        logger.exception("%s %s error=%s", event, fields, exc.__class__.__name__)
    return HTTPException(status_code=status_code, detail=detail)


# Specific routes first; "/{watch_party_id}" would shadow them otherwise.


@router.get("/search", response_model=List[MovieDetails])
async def search_movies(
    query: Optional[str] = Query(None),
    services: ServiceContainer = Depends(get_services),
    user: AuthenticatedUser = Depends(get_current_user),
):
    if not query or not query.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid search query")

    try:
        return await services.movies.search_movies(query)
    except ValidationError as exc:
        raise _failure(400, "Invalid search query", "movie_search_failed", exc, user_id=user.user_id)
    except Exception as exc:
        raise _failure(500, "Failed to search movies", "movie_search_failed", exc, user_id=user.user_id)


@router.get("/user", response_model=List[WatchParty])
async def get_user_watch_parties(
    services: ServiceContainer = Depends(get_services),
    user: AuthenticatedUser = Depends(get_current_user),
):
    try:
        return await services.watch_parties.get_sessions_for_user(user.user_id)
    except Exception as exc:
        raise _failure(500, "Failed to fetch watch parties", "user_watch_parties_failed", exc, user_id=user.user_id)


@router.get("/public", response_model=List[WatchParty])
async def get_public_watch_parties(services: ServiceContainer = Depends(get_services)):
    try:
        return await services.watch_parties.get_public_sessions()
    except Exception as exc:
        raise _failure(500, "Failed to fetch public watch parties", "public_watch_parties_failed", exc)


@router.get("/notifications", response_model=List[Notification])
async def get_notifications(
    services: ServiceContainer = Depends(get_services),
    user: AuthenticatedUser = Depends(get_current_user),
):
    try:
        return await services.notifications.get_notifications(user.user_id)
    except Exception as exc:
        raise _failure(500, "Failed to fetch notifications", "notifications_failed", exc, user_id=user.user_id)


@router.post("/create", response_model=WatchParty)
async def create_watch_party(
    payload: WatchPartyCreateRequest,
    services: ServiceContainer = Depends(get_services),
    user: AuthenticatedUser = Depends(get_current_user),
):
    try:
        return await services.watch_parties.create_session(user.user_id, payload)
    except Exception as exc:
        raise _failure(400, "Failed to create watch party", "watch_party_create_failed", exc, user_id=user.user_id)


@router.post("/join/{watch_party_id}", response_model=WatchParty)
async def join_watch_party(
    watch_party_id: str,
    services: ServiceContainer = Depends(get_services),
    user: AuthenticatedUser = Depends(get_current_user),
):
    try:
        return await services.watch_parties.join_session(user.user_id, watch_party_id)
    except Exception as exc:
        raise _failure(
            400,
            "Failed to join watch party",
            "watch_party_join_failed",
            exc,
            watch_party_id=watch_party_id,
            user_id=user.user_id,
        )


@router.get("/{watch_party_id}", response_model=WatchParty)
async def get_watch_party(
    watch_party_id: str,
    services: ServiceContainer = Depends(get_services),
    user: AuthenticatedUser = Depends(get_current_user),
):
    try:
        return await services.watch_parties.get_session(watch_party_id)
    except NotFoundError as exc:
        raise _failure(404, "Watch party not found", "watch_party_get_failed", exc, watch_party_id=watch_party_id)
    except Exception as exc:
        raise _failure(500, "Failed to fetch watch party", "watch_party_get_failed", exc, watch_party_id=watch_party_id)


@router.post("/{watch_party_id}/message", response_model=MessageBatch)
async def send_message(
    watch_party_id: str,
    payload: MessageSendRequest,
    services: ServiceContainer = Depends(get_services),
    user: AuthenticatedUser = Depends(get_current_user),
):
    try:
        return await services.messages.send_message(watch_party_id, user.user_id, payload.messages)
    except ValidationError as exc:
        raise _failure(400, "Messages array is required", "message_send_failed", exc, watch_party_id=watch_party_id)
    except Exception as exc:
        raise _failure(400, "Failed to send message", "message_send_failed", exc, watch_party_id=watch_party_id)


@router.get("/{watch_party_id}/messages", response_model=List[MessageBatch])
async def get_messages(
    watch_party_id: str,
    services: ServiceContainer = Depends(get_services),
    user: AuthenticatedUser = Depends(get_current_user),
):
    try:
        return await services.messages.get_messages(watch_party_id)
    except Exception as exc:
        raise _failure(500, "Failed to fetch messages", "messages_get_failed", exc, watch_party_id=watch_party_id)


@router.get("/{watch_party_id}/users", response_model=List[ParticipantKey])
async def get_participant_keys(
    watch_party_id: str,
    services: ServiceContainer = Depends(get_services),
    user: AuthenticatedUser = Depends(get_current_user),
):
    try:
        return await services.participant_keys.list_participants_with_keys(watch_party_id)
    except Exception as exc:
        raise _failure(500, "Failed to fetch users", "participant_keys_get_failed", exc, watch_party_id=watch_party_id)


@router.post("/{watch_party_id}/users")
async def add_participant_key(
    watch_party_id: str,
    payload: PublicKeyRequest,
    services: ServiceContainer = Depends(get_services),
    user: AuthenticatedUser = Depends(get_current_user),
):
    try:
        await services.participant_keys.set_public_key(watch_party_id, user.user_id, payload.public_key)
    except Exception as exc:
        raise _failure(
            400,
            "Failed to add public key",
            "participant_key_set_failed",
            exc,
            watch_party_id=watch_party_id,
            user_id=user.user_id,
        )
    return {"message": "Public key added successfully"}
