"""Category endpoints under `/api/categories`.

Endpoints implemented:
- GET    /api/categories
- GET    /api/categories/{id}
- GET    /api/categories/byName/{name}
- GET    /api/categories/bySubCategoryName/{sub_name}
- GET    /api/categories/{id}/words
- POST   /api/categories/createCategory
- PUT    /api/categories/{id}
- DELETE /api/categories
- DELETE /api/categories/{id}
"""

from typing import List
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse
from sqlmodel import Session

from ..database import get_session
from .. import schemas, services

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("", response_model=List[schemas.CategoryOut])
def get_all_categories(db: Session = Depends(get_session)):
    """Return every category. An empty collection is a 404, not `[]`."""
    categories = services.CategoryService(db).get_all()
    if not categories:
        raise HTTPException(status_code=404, detail="no categories found")
    return categories


@router.get("/byName/{name}", response_model=schemas.CategoryOut)
def get_category_by_name(name: str, db: Session = Depends(get_session)):
    category = services.CategoryService(db).get_by_name(name)
    if category is None:
        raise HTTPException(status_code=404, detail="category not found")
    return category


@router.get("/bySubCategoryName/{sub_name}", response_model=schemas.CategoryOut)
def get_category_by_sub_category_name(sub_name: str, db: Session = Depends(get_session)):
    category = services.CategoryService(db).get_by_sub_category_name(sub_name)
    if category is None:
        raise HTTPException(status_code=404, detail="category not found")
    return category


@router.get("/{category_id}", response_model=schemas.CategoryOut)
def get_category_by_id(category_id: str, db: Session = Depends(get_session)):
    category = services.CategoryService(db).get_by_id(category_id)
    if category is None:
        raise HTTPException(status_code=404, detail="category not found")
    return category


@router.get("/{category_id}/words", response_model=List[schemas.WordOut])
def get_category_words(category_id: str, db: Session = Depends(get_session)):
    """List the words linked to a category (may be empty)."""
    svc = services.CategoryService(db)
    if not svc.exists_by_id(category_id):
        raise HTTPException(status_code=404, detail="category not found")
    return [schemas.WordOut.model_validate(w) for w in svc.get_words(category_id)]


@router.post("/createCategory", response_model=schemas.CategoryOut)
def create_category(payload: schemas.CategoryIn, db: Session = Depends(get_session)):
    return services.CategoryService(db).create(payload)


@router.put("/{category_id}", response_model=schemas.CategoryOut)
def update_category(category_id: str, payload: schemas.CategoryIn, db: Session = Depends(get_session)):
    """Replace a stored category.

    The path id only gates the 404 check; the row written is the one named
    by the body's `id` (the path id is used when the body has none).
    """
    svc = services.CategoryService(db)
    if not svc.exists_by_id(category_id):
        raise HTTPException(status_code=404, detail="category not found")
    return svc.update(category_id, payload)


@router.delete("", response_class=PlainTextResponse)
def delete_all_categories(db: Session = Depends(get_session)):
    services.CategoryService(db).delete_all()
    return "All categories deleted!"


@router.delete("/{category_id}", response_class=PlainTextResponse)
def delete_category_by_id(category_id: str, db: Session = Depends(get_session)):
    # response text is part of the published contract
    svc = services.CategoryService(db)
    if not svc.exists_by_id(category_id):
        raise HTTPException(status_code=404, detail="category not found")
    svc.delete_by_id(category_id)
    return "Level deleted!"
