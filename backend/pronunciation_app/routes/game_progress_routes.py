"""Game progress endpoints under `/api/gameProgress`."""

from typing import List
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse
from sqlmodel import Session

from ..database import get_session
from .. import schemas, services

router = APIRouter(prefix="/api/gameProgress", tags=["game-progress"])


@router.get("", response_model=List[schemas.GameProgressOut])
def get_all_game_progress(db: Session = Depends(get_session)):
    progress = services.GameProgressService(db).get_all()
    if not progress:
        raise HTTPException(status_code=404, detail="no game progress found")
    return progress


@router.get("/{progress_id}", response_model=schemas.GameProgressOut)
def get_game_progress_by_id(progress_id: str, db: Session = Depends(get_session)):
    progress = services.GameProgressService(db).get_by_id(progress_id)
    if progress is None:
        raise HTTPException(status_code=404, detail="game progress not found")
    return progress


@router.get("/{progress_id}/user", response_model=schemas.UserOut)
def get_game_progress_user(progress_id: str, db: Session = Depends(get_session)):
    """Return the user that owns a game progress record.

    404 when the record does not exist or no user points at it.
    """
    svc = services.GameProgressService(db)
    if not svc.exists_by_id(progress_id):
        raise HTTPException(status_code=404, detail="game progress not found")
    user = svc.get_user(progress_id)
    if user is None:
        raise HTTPException(status_code=404, detail="no user owns this game progress")
    return user


@router.post("/createGameProgress", response_model=schemas.GameProgressOut)
def create_game_progress(payload: schemas.GameProgressIn, db: Session = Depends(get_session)):
    return services.GameProgressService(db).create(payload)


@router.put("/{progress_id}", response_model=schemas.GameProgressOut)
def update_game_progress(progress_id: str, payload: schemas.GameProgressIn, db: Session = Depends(get_session)):
    svc = services.GameProgressService(db)
    if not svc.exists_by_id(progress_id):
        raise HTTPException(status_code=404, detail="game progress not found")
    return svc.update(progress_id, payload)


@router.delete("", response_class=PlainTextResponse)
def delete_all_game_progress(db: Session = Depends(get_session)):
    services.GameProgressService(db).delete_all()
    return "All game progress deleted!"


@router.delete("/{progress_id}", response_class=PlainTextResponse)
def delete_game_progress_by_id(progress_id: str, db: Session = Depends(get_session)):
    svc = services.GameProgressService(db)
    if not svc.exists_by_id(progress_id):
        raise HTTPException(status_code=404, detail="game progress not found")
    svc.delete_by_id(progress_id)
    return "Game progress deleted!"
