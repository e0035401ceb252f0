"""Services used by HTTP routers.

Services are intentionally thin: they turn request schemas into table
rows and delegate to repositories. They add no validation or business
rules; persistence errors propagate to the caller unchanged.
"""

import logging
from typing import List, Optional, Sequence
from passlib.context import CryptContext
from sqlmodel import Session
from . import models, repositories, schemas

PWD_CTX = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")
logger = logging.getLogger("pronunciation_app.services")


class CrudService:
    """Pass-through CRUD over one repository.

    Subclasses set `repository_class` and `model`; `exclude` lists request
    fields that are not columns of `model`.
    """
    repository_class = repositories.CrudRepository
    model = None
    exclude: set = set()

    def __init__(self, session: Session):
        self.session = session
        self.repo = self.repository_class(session)

    def _to_row(self, payload, entity_id: Optional[str] = None):
        """Build a table row from a request schema.

        Fields missing from the payload take the model defaults, so saving
        the row replaces the whole stored record. The payload's own id
        wins over `entity_id`.
        """
        data = payload.model_dump(exclude_none=True, exclude=self.exclude)
        if entity_id is not None:
            data.setdefault("id", entity_id)
        return self.model(**data)

    def get_all(self) -> Sequence:
        return self.repo.find_all()

    def get_by_id(self, entity_id: str):
        return self.repo.find_by_id(entity_id)

    def create(self, payload):
        row = self.repo.save(self._to_row(payload))
        logger.info("created %s %s", self.model.__name__, row.id)
        return row

    def update(self, entity_id: str, payload):
        return self.repo.save(self._to_row(payload, entity_id))

    def delete_by_id(self, entity_id: str) -> None:
        self.repo.delete_by_id(entity_id)
        logger.info("deleted %s %s", self.model.__name__, entity_id)

    def delete_all(self) -> None:
        self.repo.delete_all()
        logger.info("deleted all %s rows", self.model.__name__)

    def exists_by_id(self, entity_id: str) -> bool:
        return self.repo.exists_by_id(entity_id)


class CategoryService(CrudService):
    """Categories and the name lookups used by content screens."""
    repository_class = repositories.CategoryRepository
    model = models.Category

    def get_by_name(self, name: str) -> Optional[models.Category]:
        return self.repo.get_by_category_name(name)

    def get_by_sub_category_name(self, sub_name: str) -> Optional[models.Category]:
        return self.repo.get_by_sub_category_name(sub_name)

    def get_words(self, category_id: str) -> Sequence[models.Word]:
        return repositories.WordRepository(self.session).list_for_category(category_id)


class LevelService(CrudService):
    repository_class = repositories.LevelRepository
    model = models.Level

    def get_words(self, level_id: str) -> Sequence[models.Word]:
        return repositories.WordRepository(self.session).list_for_level(level_id)


class WordService(CrudService):
    """Words, their category links and per-word readers."""
    repository_class = repositories.WordRepository
    model = models.Word
    exclude = {"category_ids"}

    def __init__(self, session: Session):
        super().__init__(session)
        self.category_repo = repositories.CategoryRepository(session)

    def _save(self, word: models.Word, category_ids: List[str]) -> models.Word:
        categories = self.category_repo.list_by_ids(category_ids)
        return self.repo.save_with_categories(word, categories)

    def create(self, payload: schemas.WordIn) -> models.Word:
        word = self._save(self._to_row(payload), payload.category_ids)
        logger.info("created Word %s", word.id)
        return word

    def update(self, entity_id: str, payload: schemas.WordIn) -> models.Word:
        return self._save(self._to_row(payload, entity_id), payload.category_ids)

    def get_categories(self, word_id: str) -> Sequence[models.Category]:
        return self.category_repo.list_for_word(word_id)

    def get_stage_words(self, word_id: str) -> Sequence[models.StageWord]:
        return repositories.StageWordRepository(self.session).list_for_word(word_id)

    def get_pronunciations(self, word_id: str) -> Sequence[models.Pronunciation]:
        return repositories.PronunciationRepository(self.session).list_for_word(word_id)


class StageWordService(CrudService):
    repository_class = repositories.StageWordRepository
    model = models.StageWord


class PronunciationService(CrudService):
    repository_class = repositories.PronunciationRepository
    model = models.Pronunciation

    def update(self, entity_id: str, payload: schemas.PronunciationIn) -> models.Pronunciation:
        """Replace a pronunciation, keeping the stored `created_at`."""
        row = self._to_row(payload, entity_id)
        stored = self.repo.find_by_id(row.id)
        if stored is not None:
            row.created_at = schemas.as_utc(stored.created_at)
        return self.repo.save(row)


class GameProgressService(CrudService):
    repository_class = repositories.GameProgressRepository
    model = models.GameProgress

    def get_user(self, game_progress_id: str) -> Optional[models.AppUser]:
        """Return the user owning the given game progress, if any."""
        return repositories.UserRepository(self.session).get_by_game_progress(game_progress_id)


class UserService(CrudService):
    """User accounts. Passwords are stored hashed, never in plaintext."""
    repository_class = repositories.UserRepository
    model = models.AppUser

    def _to_row(self, payload: schemas.UserIn, entity_id: Optional[str] = None) -> models.AppUser:
        user = super()._to_row(payload, entity_id)
        if payload.password is not None:
            user.password = PWD_CTX.hash(payload.password)
        return user

    def update(self, entity_id: str, payload: schemas.UserIn) -> models.AppUser:
        """Replace a user. Without a new password the stored hash is kept."""
        user = self._to_row(payload, entity_id)
        if payload.password is None:
            stored = self.repo.find_by_id(user.id)
            if stored is not None:
                user.password = stored.password
        return self.repo.save(user)
