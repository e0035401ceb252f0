"""HTTP routers, one per REST resource."""

from .category_routes import router as category_router
from .level_routes import router as level_router
from .word_routes import router as word_router
from .stage_word_routes import router as stage_word_router
from .pronunciation_routes import router as pronunciation_router
from .game_progress_routes import router as game_progress_router
from .user_routes import router as user_router

ALL_ROUTERS = (
    category_router,
    level_router,
    word_router,
    stage_word_router,
    pronunciation_router,
    game_progress_router,
    user_router,
)
