"""User account endpoints under `/api/users`.

Responses use `UserOut`, which has no password field; the stored value
is a passlib hash.
"""

from typing import List
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse
from sqlmodel import Session

from ..database import get_session
from .. import schemas, services

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=List[schemas.UserOut])
def get_all_users(db: Session = Depends(get_session)):
    users = services.UserService(db).get_all()
    if not users:
        raise HTTPException(status_code=404, detail="no users found")
    return users


@router.get("/{user_id}", response_model=schemas.UserOut)
def get_user_by_id(user_id: str, db: Session = Depends(get_session)):
    user = services.UserService(db).get_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="user not found")
    return user


@router.post("/createUser", response_model=schemas.UserOut)
def create_user(payload: schemas.UserIn, db: Session = Depends(get_session)):
    return services.UserService(db).create(payload)


@router.put("/{user_id}", response_model=schemas.UserOut)
def update_user(user_id: str, payload: schemas.UserIn, db: Session = Depends(get_session)):
    """Replace a stored user; a new password in the body is re-hashed."""
    svc = services.UserService(db)
    if not svc.exists_by_id(user_id):
        raise HTTPException(status_code=404, detail="user not found")
    return svc.update(user_id, payload)


@router.delete("", response_class=PlainTextResponse)
def delete_all_users(db: Session = Depends(get_session)):
    services.UserService(db).delete_all()
    return "All users deleted!"


@router.delete("/{user_id}", response_class=PlainTextResponse)
def delete_user_by_id(user_id: str, db: Session = Depends(get_session)):
    svc = services.UserService(db)
    if not svc.exists_by_id(user_id):
        raise HTTPException(status_code=404, detail="user not found")
    svc.delete_by_id(user_id)
    return "User deleted!"
