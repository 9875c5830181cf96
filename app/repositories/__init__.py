"""Repository layer – all database access goes through here.

Repositories encapsulate SQLAlchemy queries so that the service layer
only contains business logic.
"""

from app.repositories.prospect_repository import ProspectRepository
from app.repositories.photo_repository import PhotoRepository
from app.repositories.activity_repository import ActivityRepository

__all__ = [
    "ProspectRepository",
    "PhotoRepository",
    "ActivityRepository",
]
