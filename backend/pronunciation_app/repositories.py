"""Repository classes encapsulating database operations.

`CrudRepository` provides the generic operations shared by every table
(find all, find by id, save, delete by id, delete all, existence check).
Each subclass binds it to one model and adds the few lookups that model
needs. Repositories return SQLModel objects and commit every write.
"""

from typing import List, Optional, Sequence
from sqlmodel import Session, select, col
from . import models


class CrudRepository:
    """Generic CRUD operations for the table bound to `model`."""
    model = None

    def __init__(self, session: Session):
        self.session = session

    def find_all(self) -> Sequence:
        """Return every row of the table."""
        return self.session.exec(select(self.model)).all()

    def find_by_id(self, entity_id: str):
        """Return the row with primary key `entity_id` or `None`."""
        return self.session.get(self.model, entity_id)

    def save(self, entity):
        """Insert or update `entity` by primary key and return the managed row.

        Column attributes of an existing row are replaced by those of
        `entity`; relationships that were never set on `entity` are left
        untouched.
        """
        managed = self.session.merge(entity)
        self.session.commit()
        self.session.refresh(managed)
        return managed

    def delete_by_id(self, entity_id: str) -> None:
        """Delete the row with primary key `entity_id` if it exists."""
        entity = self.find_by_id(entity_id)
        if entity is None:
            return
        self.session.delete(entity)
        self.session.commit()

    def delete_all(self) -> None:
        """Delete every row one by one so ORM cascades apply."""
        for entity in self.find_all():
            self.session.delete(entity)
        self.session.commit()

    def exists_by_id(self, entity_id: str) -> bool:
        """Return True if a row with primary key `entity_id` exists."""
        stmt = select(self.model.id).where(self.model.id == entity_id)
        return self.session.exec(stmt).first() is not None


class CategoryRepository(CrudRepository):
    """CRUD operations for `Category` plus name lookups."""
    model = models.Category

    def get_by_category_name(self, name: str) -> Optional[models.Category]:
        """Return the first category named `name` or `None`."""
        stmt = select(models.Category).where(models.Category.category_name == name)
        return self.session.exec(stmt).first()

    def get_by_sub_category_name(self, sub_name: str) -> Optional[models.Category]:
        """Return the first category whose sub-category is `sub_name` or `None`."""
        stmt = select(models.Category).where(models.Category.sub_category_name == sub_name)
        return self.session.exec(stmt).first()

    def list_by_ids(self, ids: List[str]) -> Sequence[models.Category]:
        if not ids:
            return []
        stmt = select(models.Category).where(col(models.Category.id).in_(ids))
        return self.session.exec(stmt).all()

    def list_for_word(self, word_id: str) -> Sequence[models.Category]:
        """Return the categories linked to `word_id` through `word_category`."""
        stmt = (
            select(models.Category)
            .join(models.WordCategoryLink, models.WordCategoryLink.category_fk == models.Category.id)
            .where(models.WordCategoryLink.word_fk == word_id)
        )
        return self.session.exec(stmt).all()


class LevelRepository(CrudRepository):
    model = models.Level


class WordRepository(CrudRepository):
    """CRUD operations for `Word` and relationship readers."""
    model = models.Word

    def save_with_categories(self, word: models.Word, categories: Sequence[models.Category]) -> models.Word:
        """Save `word` and replace its category links with `categories`.

        Links must be set on the instance returned by `merge`, never on
        `word` itself (the backref would add `word` to the session as a
        second pending row with the same primary key).
        """
        managed = self.session.merge(word)
        managed.categories = list(categories)
        self.session.commit()
        self.session.refresh(managed)
        return managed

    def list_for_level(self, level_id: str) -> Sequence[models.Word]:
        stmt = select(models.Word).where(models.Word.level_id == level_id)
        return self.session.exec(stmt).all()

    def list_for_category(self, category_id: str) -> Sequence[models.Word]:
        stmt = (
            select(models.Word)
            .join(models.WordCategoryLink, models.WordCategoryLink.word_fk == models.Word.id)
            .where(models.WordCategoryLink.category_fk == category_id)
        )
        return self.session.exec(stmt).all()


class StageWordRepository(CrudRepository):
    model = models.StageWord

    def list_for_word(self, word_id: str) -> Sequence[models.StageWord]:
        stmt = select(models.StageWord).where(models.StageWord.word_id == word_id)
        return self.session.exec(stmt).all()


class PronunciationRepository(CrudRepository):
    model = models.Pronunciation

    def list_for_word(self, word_id: str) -> Sequence[models.Pronunciation]:
        stmt = select(models.Pronunciation).where(models.Pronunciation.word_id == word_id)
        return self.session.exec(stmt).all()


class GameProgressRepository(CrudRepository):
    model = models.GameProgress


class UserRepository(CrudRepository):
    """CRUD operations for `AppUser` objects."""
    model = models.AppUser

    def get_by_game_progress(self, game_progress_id: str) -> Optional[models.AppUser]:
        """Return the user owning `game_progress_id` or `None`."""
        stmt = select(models.AppUser).where(models.AppUser.game_progress_id == game_progress_id)
        return self.session.exec(stmt).first()
