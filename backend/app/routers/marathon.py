"""
Marathon bucket endpoints.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.dependencies.auth import AuthenticatedUser, get_current_user
from app.dependencies.services import get_services
from app.schemas.marathon import Bucket, BucketAddRequest, BucketRuntime
from app.schemas.movie import MovieDetails
from app.services.container import ServiceContainer
from app.services.errors import UpstreamError, WatchPartyError

router = APIRouter()
logger = logging.getLogger(__name__)


def _status_for(exc: Exception) -> int:
    if isinstance(exc, WatchPartyError) and not isinstance(exc, UpstreamError):
        return status.HTTP_400_BAD_REQUEST
    return status.HTTP_500_INTERNAL_SERVER_ERROR


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
    except Exception as exc:
        logger.warning("marathon_search_failed user_id=%s error=%s", user.user_id, exc.__class__.__name__)
        raise HTTPException(status_code=_status_for(exc), detail="Failed to search movies")


@router.get("/bucket", response_model=Bucket)
async def get_bucket(
    services: ServiceContainer = Depends(get_services),
    user: AuthenticatedUser = Depends(get_current_user),
):
    try:
        return await services.marathon.get_bucket(user.user_id)
    except Exception as exc:
        logger.exception("bucket_get_failed user_id=%s", user.user_id)
        raise HTTPException(status_code=_status_for(exc), detail="Failed to fetch bucket")


@router.post("/bucket", response_model=Bucket)
async def add_movie_to_bucket(
    payload: BucketAddRequest,
    services: ServiceContainer = Depends(get_services),
    user: AuthenticatedUser = Depends(get_current_user),
):
    try:
        return await services.marathon.add_movie(user.user_id, payload.movie_id)
    except Exception as exc:
        logger.warning(
            "bucket_add_failed user_id=%s movie_id=%s error=%s reason=%s",
            user.user_id,
            payload.movie_id,
            exc.__class__.__name__,
            exc,
        )
        raise HTTPException(status_code=_status_for(exc), detail="Failed to add movie to bucket")


@router.delete("/bucket/{movie_id}", response_model=Bucket)
async def remove_movie_from_bucket(
    movie_id: int,
    services: ServiceContainer = Depends(get_services),
    user: AuthenticatedUser = Depends(get_current_user),
):
    try:
        return await services.marathon.remove_movie(user.user_id, movie_id)
    except Exception as exc:
        logger.warning(
            "bucket_remove_failed user_id=%s movie_id=%s error=%s",
            user.user_id,
            movie_id,
            exc.__class__.__name__,
        )
        raise HTTPException(status_code=_status_for(exc), detail="Failed to remove movie from bucket")


@router.get("/bucket/runtime", response_model=BucketRuntime)
async def get_bucket_runtime(
    services: ServiceContainer = Depends(get_services),
    user: AuthenticatedUser = Depends(get_current_user),
):
    try:
        return await services.marathon.calculate_total_runtime(user.user_id)
    except Exception as exc:
        logger.exception("bucket_runtime_failed user_id=%s", user.user_id)
        raise HTTPException(status_code=_status_for(exc), detail="Failed to calculate runtime")
