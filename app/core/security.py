from __future__ import annotations

import hmac
import logging
from typing import Optional

from app.config import get_settings
from app.core.errors import Unauthorized

logger = logging.getLogger(__name__)


def verify_admin_password(candidate: Optional[str]) -> bool:
    settings = get_settings()
    if not settings.ADMIN_PASSWORD:
        logger.warning("ADMIN_PASSWORD is not configured; admin access is disabled.")
        return False
    if candidate is None:
        return False
    return hmac.compare_digest(
        candidate.encode("utf-8"),
        settings.ADMIN_PASSWORD.encode("utf-8"),
    )


def require_admin_password(candidate: Optional[str]) -> None:
    if not verify_admin_password(candidate):
        raise Unauthorized()
