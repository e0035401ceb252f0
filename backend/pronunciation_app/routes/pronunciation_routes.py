"""Pronunciation endpoints under `/api/pronunciations`."""

from typing import List
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse
from sqlmodel import Session

from ..database import get_session
from .. import schemas, services

router = APIRouter(prefix="/api/pronunciations", tags=["pronunciations"])


@router.get("", response_model=List[schemas.PronunciationOut])
def get_all_pronunciations(db: Session = Depends(get_session)):
    pronunciations = services.PronunciationService(db).get_all()
    if not pronunciations:
        raise HTTPException(status_code=404, detail="no pronunciations found")
    return pronunciations


@router.get("/{pronunciation_id}", response_model=schemas.PronunciationOut)
def get_pronunciation_by_id(pronunciation_id: str, db: Session = Depends(get_session)):
    pronunciation = services.PronunciationService(db).get_by_id(pronunciation_id)
    if pronunciation is None:
        raise HTTPException(status_code=404, detail="pronunciation not found")
    return pronunciation


@router.post("/createPronunciation", response_model=schemas.PronunciationOut)
def create_pronunciation(payload: schemas.PronunciationIn, db: Session = Depends(get_session)):
    return services.PronunciationService(db).create(payload)


@router.put("/{pronunciation_id}", response_model=schemas.PronunciationOut)
def update_pronunciation(pronunciation_id: str, payload: schemas.PronunciationIn, db: Session = Depends(get_session)):
    svc = services.PronunciationService(db)
    if not svc.exists_by_id(pronunciation_id):
        raise HTTPException(status_code=404, detail="pronunciation not found")
    return svc.update(pronunciation_id, payload)


@router.delete("", response_class=PlainTextResponse)
def delete_all_pronunciations(db: Session = Depends(get_session)):
    services.PronunciationService(db).delete_all()
    return "All pronunciations deleted!"


@router.delete("/{pronunciation_id}", response_class=PlainTextResponse)
def delete_pronunciation_by_id(pronunciation_id: str, db: Session = Depends(get_session)):
    svc = services.PronunciationService(db)
    if not svc.exists_by_id(pronunciation_id):
        raise HTTPException(status_code=404, detail="pronunciation not found")
    svc.delete_by_id(pronunciation_id)
    return "Pronunciation deleted!"
