"""Level endpoints under `/api/levels`."""

from typing import List
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse
from sqlmodel import Session

from ..database import get_session
from .. import schemas, services

router = APIRouter(prefix="/api/levels", tags=["levels"])


@router.get("", response_model=List[schemas.LevelOut])
def get_all_levels(db: Session = Depends(get_session)):
    """Return every level, or 404 when none are stored."""
    levels = services.LevelService(db).get_all()
    if not levels:
        raise HTTPException(status_code=404, detail="no levels found")
    return levels


@router.get("/{level_id}", response_model=schemas.LevelOut)
def get_level_by_id(level_id: str, db: Session = Depends(get_session)):
    level = services.LevelService(db).get_by_id(level_id)
    if level is None:
        raise HTTPException(status_code=404, detail="level not found")
    return level


@router.get("/{level_id}/words", response_model=List[schemas.WordOut])
def get_level_words(level_id: str, db: Session = Depends(get_session)):
    svc = services.LevelService(db)
    if not svc.exists_by_id(level_id):
        raise HTTPException(status_code=404, detail="level not found")
    return [schemas.WordOut.model_validate(w) for w in svc.get_words(level_id)]


@router.post("/createLevel", response_model=schemas.LevelOut)
def create_level(payload: schemas.LevelIn, db: Session = Depends(get_session)):
    return services.LevelService(db).create(payload)


@router.put("/{level_id}", response_model=schemas.LevelOut)
def update_level(level_id: str, payload: schemas.LevelIn, db: Session = Depends(get_session)):
    """Replace a stored level.

    Unlike the other resources, the response echoes the request body
    (with the path id filled in when the body has none) instead of the
    row read back after saving.
    """
    svc = services.LevelService(db)
    if not svc.exists_by_id(level_id):
        raise HTTPException(status_code=404, detail="level not found")
    svc.update(level_id, payload)
    if payload.id is None:
        return payload.model_copy(update={"id": level_id})
    return payload


@router.delete("", response_class=PlainTextResponse)
def delete_all_levels(db: Session = Depends(get_session)):
    services.LevelService(db).delete_all()
    return "All levels deleted!"


@router.delete("/{level_id}", response_class=PlainTextResponse)
def delete_level_by_id(level_id: str, db: Session = Depends(get_session)):
    svc = services.LevelService(db)
    if not svc.exists_by_id(level_id):
        raise HTTPException(status_code=404, detail="level not found")
    svc.delete_by_id(level_id)
    return "Level deleted!"
