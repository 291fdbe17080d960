from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, status

from app.deps import get_win_store
from app.schemas.movies import ImportRequest, ImportResponse, MovieOut, PrizeIntervalsResponse
from app.services.import_service import import_movies
from app.services.interval_service import get_prize_intervals
from storage.winstore import WinStoreError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/movies")


def _store_unavailable(action: str) -> HTTPException:
    logger.exception("%s failed", action)
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail="WIN_STORE_UNAVAILABLE",
    )


@router.get("/prize-intervals", response_model=PrizeIntervalsResponse)
def prize_intervals_endpoint() -> PrizeIntervalsResponse:
    try:
        payload = get_prize_intervals()
    except WinStoreError as exc:
        raise _store_unavailable("Prize interval query") from exc
    return PrizeIntervalsResponse.model_validate(payload)


@router.get("", response_model=List[MovieOut])
def list_movies_endpoint(winner: Optional[bool] = None) -> List[MovieOut]:
    try:
        records = get_win_store().list_records()
    except WinStoreError as exc:
        raise _store_unavailable("Movie listing") from exc
    if winner is not None:
        records = [record for record in records if record.winner == winner]
    return [MovieOut(**record.to_dict()) for record in records]


@router.post("/import", response_model=ImportResponse)
def import_endpoint(payload: ImportRequest) -> ImportResponse:
    try:
        summary = import_movies(payload.paths, payload.csv_text, payload.delimiter)
    except WinStoreError as exc:
        raise _store_unavailable("Movie import") from exc
    return ImportResponse(**summary.to_dict())
