"""Pydantic request/response schemas used by the API.

Schemas keep API input/output shapes stable and translate between the
camelCase JSON used by clients and the snake_case attributes of the
SQLModel tables. Response schemas are built from ORM rows with
`from_attributes`.
"""

from datetime import datetime, timezone
from typing import Annotated, List, Optional
from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .models import Stage, StageWordStatus


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Read timestamps without an offset as UTC; datetime columns store aware values only."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


class CategoryBase(ApiModel):
    category_name: Optional[str] = None
    sub_category_name: Optional[str] = None


class CategoryIn(CategoryBase):
    """Payload for creating or replacing a category."""
    id: Optional[str] = None


class CategoryOut(CategoryBase):
    id: str


class LevelBase(ApiModel):
    number: int = 0
    name: Optional[str] = None
    required_score: int = 0
    is_blocked: bool = False


class LevelIn(LevelBase):
    """Payload for creating or replacing a level."""
    id: Optional[str] = None


class LevelOut(LevelBase):
    id: str


class WordBase(ApiModel):
    word_name: Optional[str] = None
    definition: Optional[str] = None
    phonetic_spelling: Optional[str] = None
    sentence: Optional[str] = None
    is_active: bool = False
    level_id: Optional[str] = None


class WordIn(WordBase):
    """Payload for creating or replacing a word.

    `category_ids` replaces the full set of linked categories; ids that do
    not match a stored category are ignored.
    """
    id: Optional[str] = None
    category_ids: List[str] = Field(default_factory=list)


class WordOut(WordBase):
    id: str
    category_ids: List[str] = Field(default_factory=list)


class StageWordBase(ApiModel):
    status: StageWordStatus = StageWordStatus.PENDING
    listened_qty: int = 0
    last_updated_date_time: Optional[UtcDatetime] = None
    word_id: Optional[str] = None


class StageWordIn(StageWordBase):
    """Payload for creating or replacing a stage word."""
    id: Optional[str] = None


class StageWordOut(StageWordBase):
    id: str


class PronunciationBase(ApiModel):
    word_id: Optional[str] = None
    audio_url: Optional[str] = None
    ipa: Optional[str] = None
    accent: Optional[str] = None


class PronunciationIn(PronunciationBase):
    """Payload for creating or replacing a pronunciation."""
    id: Optional[str] = None


class PronunciationOut(PronunciationBase):
    id: str
    created_at: Optional[datetime] = None


class GameProgressBase(ApiModel):
    current_score: int = 0
    current_stage: Stage = Stage.STAGE_01
    last_played_date: Optional[UtcDatetime] = None
    words_learned: int = 0


class GameProgressIn(GameProgressBase):
    """Payload for creating or replacing a game progress record."""
    id: Optional[str] = None


class GameProgressOut(GameProgressBase):
    id: str


class UserBase(ApiModel):
    user_name: Optional[str] = None
    user_age: int = 0
    user_email: Optional[str] = None
    game_progress_id: Optional[str] = None


class UserIn(UserBase):
    """Payload for creating or replacing a user. `password` is plaintext here only."""
    id: Optional[str] = None
    password: Optional[str] = None


class UserOut(UserBase):
    """User representation returned by the API (never includes the password)."""
    id: str
