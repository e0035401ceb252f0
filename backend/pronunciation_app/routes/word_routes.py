"""Word endpoints under `/api/words`.

Word responses are converted to `WordOut` inside the handlers so the
category links are read while the request session is still open.
"""

from typing import List
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse
from sqlmodel import Session

from ..database import get_session
from .. import schemas, services

router = APIRouter(prefix="/api/words", tags=["words"])


def _require_word(svc: services.WordService, word_id: str) -> None:
    if not svc.exists_by_id(word_id):
        raise HTTPException(status_code=404, detail="word not found")


@router.get("", response_model=List[schemas.WordOut])
def get_all_words(db: Session = Depends(get_session)):
    words = services.WordService(db).get_all()
    if not words:
        raise HTTPException(status_code=404, detail="no words found")
    return [schemas.WordOut.model_validate(w) for w in words]


@router.get("/{word_id}", response_model=schemas.WordOut)
def get_word_by_id(word_id: str, db: Session = Depends(get_session)):
    word = services.WordService(db).get_by_id(word_id)
    if word is None:
        raise HTTPException(status_code=404, detail="word not found")
    return schemas.WordOut.model_validate(word)


@router.get("/{word_id}/categories", response_model=List[schemas.CategoryOut])
def get_word_categories(word_id: str, db: Session = Depends(get_session)):
    svc = services.WordService(db)
    _require_word(svc, word_id)
    return svc.get_categories(word_id)


@router.get("/{word_id}/stageWords", response_model=List[schemas.StageWordOut])
def get_word_stage_words(word_id: str, db: Session = Depends(get_session)):
    svc = services.WordService(db)
    _require_word(svc, word_id)
    return svc.get_stage_words(word_id)


@router.get("/{word_id}/pronunciations", response_model=List[schemas.PronunciationOut])
def get_word_pronunciations(word_id: str, db: Session = Depends(get_session)):
    svc = services.WordService(db)
    _require_word(svc, word_id)
    return svc.get_pronunciations(word_id)


@router.post("/createWord", response_model=schemas.WordOut)
def create_word(payload: schemas.WordIn, db: Session = Depends(get_session)):
    """Create a word and link it to the categories named in `categoryIds`."""
    word = services.WordService(db).create(payload)
    return schemas.WordOut.model_validate(word)


@router.put("/{word_id}", response_model=schemas.WordOut)
def update_word(word_id: str, payload: schemas.WordIn, db: Session = Depends(get_session)):
    svc = services.WordService(db)
    _require_word(svc, word_id)
    return schemas.WordOut.model_validate(svc.update(word_id, payload))


@router.delete("", response_class=PlainTextResponse)
def delete_all_words(db: Session = Depends(get_session)):
    services.WordService(db).delete_all()
    return "All words deleted!"


@router.delete("/{word_id}", response_class=PlainTextResponse)
def delete_word_by_id(word_id: str, db: Session = Depends(get_session)):
    svc = services.WordService(db)
    _require_word(svc, word_id)
    svc.delete_by_id(word_id)
    return "Word deleted!"
