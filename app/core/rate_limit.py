from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core.config import settings

# Keyed on client IP; disabled wholesale via RATE_LIMIT_ENABLED=false
limiter = Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)
