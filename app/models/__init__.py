from app.models.base import Base
from app.models.prospect import Prospect
from app.models.photo import ProspectPhoto
from app.models.activity import ProspectActivity

# Import event listeners to register them
from app.models import listeners  # noqa: F401

__all__ = [
    "Base",
    "Prospect",
    "ProspectPhoto",
    "ProspectActivity",
]
