"""SQLModel data models.

This module defines the application's database tables using SQLModel.
Each class maps to a table and uses relationships where appropriate.
Primary keys are strings; when a client does not supply one a random
UUID hex string is generated.
"""

from enum import Enum
from typing import List, Optional
from uuid import uuid4
from datetime import datetime, timezone
from sqlmodel import SQLModel, Field, Relationship


def new_id() -> str:
    return uuid4().hex


class StageWordStatus(str, Enum):
    DONE = "DONE"
    PENDING = "PENDING"
    FAIL = "FAIL"


class Stage(str, Enum):
    STAGE_01 = "STAGE_01"
    STAGE_02 = "STAGE_02"
    STAGE_03 = "STAGE_03"
    STAGE_04 = "STAGE_04"
    STAGE_05 = "STAGE_05"


class WordCategoryLink(SQLModel, table=True):
    """Join table linking words and categories."""
    __tablename__ = "word_category"
    word_fk: Optional[str] = Field(default=None, foreign_key="word.id", primary_key=True)
    category_fk: Optional[str] = Field(default=None, foreign_key="category.id", primary_key=True)


class Category(SQLModel, table=True):
    """A thematic grouping of words, optionally split by sub-category.

    Name lookups return the first match; uniqueness is not enforced.
    """
    id: str = Field(default_factory=new_id, primary_key=True)
    category_name: Optional[str] = Field(default=None, index=True)
    sub_category_name: Optional[str] = Field(default=None, index=True)
    words: List['Word'] = Relationship(back_populates='categories', link_model=WordCategoryLink)


class Level(SQLModel, table=True):
    """A learning level. Deleting a level deletes its words."""
    id: str = Field(default_factory=new_id, primary_key=True)
    number: int = 0
    name: Optional[str] = None
    required_score: int = 0
    is_blocked: bool = False
    words: List['Word'] = Relationship(
        back_populates='level',
        sa_relationship_kwargs={"cascade": "all"},
    )


class Word(SQLModel, table=True):
    """A word to practise, with its definition and an example sentence."""
    id: str = Field(default_factory=new_id, primary_key=True)
    word_name: Optional[str] = Field(default=None, index=True)
    definition: Optional[str] = None
    phonetic_spelling: Optional[str] = None
    sentence: Optional[str] = None
    is_active: bool = False
    level_id: Optional[str] = Field(default=None, foreign_key='level.id', index=True)
    level: Optional[Level] = Relationship(back_populates='words')
    categories: List[Category] = Relationship(back_populates='words', link_model=WordCategoryLink)
    stage_words: List['StageWord'] = Relationship(
        back_populates='word',
        sa_relationship_kwargs={"cascade": "all"},
    )
    pronunciations: List['Pronunciation'] = Relationship(
        back_populates='word',
        sa_relationship_kwargs={"cascade": "all"},
    )

    @property
    def category_ids(self) -> List[str]:
        return [c.id for c in self.categories]


class StageWord(SQLModel, table=True):
    """Progress of a learner on a single word inside a game stage."""
    id: str = Field(default_factory=new_id, primary_key=True)
    status: StageWordStatus = StageWordStatus.PENDING
    listened_qty: int = 0
    last_updated_date_time: Optional[datetime] = None
    word_id: Optional[str] = Field(default=None, foreign_key='word.id', index=True)
    word: Optional[Word] = Relationship(back_populates='stage_words')


class Pronunciation(SQLModel, table=True):
    """A reference pronunciation for a `Word` (audio clip and/or IPA)."""
    id: str = Field(default_factory=new_id, primary_key=True)
    word_id: Optional[str] = Field(default=None, foreign_key='word.id', index=True)
    audio_url: Optional[str] = None
    ipa: Optional[str] = None
    accent: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    word: Optional[Word] = Relationship(back_populates='pronunciations')


class GameProgress(SQLModel, table=True):
    """Aggregate game state of one user.

    The owning side of the one-to-one link is `AppUser.game_progress_id`.
    Deleting a game progress record deletes the user that owns it.
    """
    id: str = Field(default_factory=new_id, primary_key=True)
    current_score: int = 0
    current_stage: Stage = Stage.STAGE_01
    last_played_date: Optional[datetime] = None
    words_learned: int = 0
    app_user: Optional['AppUser'] = Relationship(
        back_populates='game_progress',
        sa_relationship_kwargs={"uselist": False, "cascade": "all"},
    )


class AppUser(SQLModel, table=True):
    """A learner account.

    Fields:
    - `password`: hashed password string (never store plaintext)
    """
    __tablename__ = "app_user"
    id: str = Field(default_factory=new_id, primary_key=True)
    user_name: Optional[str] = Field(default=None, index=True)
    user_age: int = 0
    user_email: Optional[str] = Field(default=None, index=True)
    password: Optional[str] = None
    game_progress_id: Optional[str] = Field(default=None, foreign_key='gameprogress.id', unique=True)
    game_progress: Optional[GameProgress] = Relationship(back_populates='app_user')
