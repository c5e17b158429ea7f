from scorestats.models.base import Base
from scorestats.models.score import Score

__all__ = [
    "Base",
    "Score",
]
