# This project was developed with assistance from AI tools.
__version__ = "0.1.0"

from .database import Base, DatabaseService, get_db_service
from .enums import (
    MODEL_PROVIDERS,
    Complexity,
    HistoryBackend,
    IntentCategory,
    ModelName,
    ModelProvider,
    SpeedPreference,
    Tone,
)
from .models import InteractionHistory

__all__ = [
    "Base",
    "DatabaseService",
    "get_db_service",
    "__version__",
    # Enums
    "Complexity",
    "HistoryBackend",
    "IntentCategory",
    "MODEL_PROVIDERS",
    "ModelName",
    "ModelProvider",
    "SpeedPreference",
    "Tone",
    # Models
    "InteractionHistory",
]
