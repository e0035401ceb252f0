"""Stage word endpoints under `/api/stageWords`."""

from typing import List
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse
from sqlmodel import Session

from ..database import get_session
from .. import schemas, services

router = APIRouter(prefix="/api/stageWords", tags=["stage-words"])


@router.get("", response_model=List[schemas.StageWordOut])
def get_all_stage_words(db: Session = Depends(get_session)):
    stage_words = services.StageWordService(db).get_all()
    if not stage_words:
        raise HTTPException(status_code=404, detail="no stage words found")
    return stage_words


@router.get("/{stage_word_id}", response_model=schemas.StageWordOut)
def get_stage_word_by_id(stage_word_id: str, db: Session = Depends(get_session)):
    stage_word = services.StageWordService(db).get_by_id(stage_word_id)
    if stage_word is None:
        raise HTTPException(status_code=404, detail="stage word not found")
    return stage_word


@router.post("/createStageWord", response_model=schemas.StageWordOut)
def create_stage_word(payload: schemas.StageWordIn, db: Session = Depends(get_session)):
    """Record a learner's state for one word.

    `status` must be one of DONE, PENDING or FAIL; no transition order is
    enforced between them.
    """
    return services.StageWordService(db).create(payload)


@router.put("/{stage_word_id}", response_model=schemas.StageWordOut)
def update_stage_word(stage_word_id: str, payload: schemas.StageWordIn, db: Session = Depends(get_session)):
    svc = services.StageWordService(db)
    if not svc.exists_by_id(stage_word_id):
        raise HTTPException(status_code=404, detail="stage word not found")
    return svc.update(stage_word_id, payload)


@router.delete("", response_class=PlainTextResponse)
def delete_all_stage_words(db: Session = Depends(get_session)):
    services.StageWordService(db).delete_all()
    return "All stage words deleted!"


@router.delete("/{stage_word_id}", response_class=PlainTextResponse)
def delete_stage_word_by_id(stage_word_id: str, db: Session = Depends(get_session)):
    svc = services.StageWordService(db)
    if not svc.exists_by_id(stage_word_id):
        raise HTTPException(status_code=404, detail="stage word not found")
    svc.delete_by_id(stage_word_id)
    return "Stage word deleted!"
