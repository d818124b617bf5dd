"""Anonymous session context passed explicitly to the analytics recorder."""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass
from typing import Mapping, Optional

__all__ = ["SessionContext"]

MOBILE_PATTERN = re.compile(r"Mobi|Android|iPhone|iPad", re.IGNORECASE)
MAX_REFERRER_LENGTH = 500
UTM_FIELDS = ("utm_source", "utm_medium", "utm_campaign")


@dataclass(frozen=True, slots=True)
class SessionContext:
    """One simulator visit.

    The token is random and carries no personal data; geography is limited to
    country and region, never city or address.
    """

    token: str
    country: Optional[str] = None
    region: Optional[str] = None
    is_mobile: bool = False
    utm_source: Optional[str] = None
    utm_medium: Optional[str] = None
    utm_campaign: Optional[str] = None
    referrer: Optional[str] = None

    @classmethod
    def new(
        cls,
        *,
        user_agent: str | None = None,
        query_params: Mapping[str, str] | None = None,
        referrer: str | None = None,
        country: str | None = None,
        region: str | None = None,
    ) -> "SessionContext":
        params = query_params or {}
        return cls(
            token=str(uuid.uuid4()),
            country=country or None,
            region=region or None,
            is_mobile=bool(user_agent and MOBILE_PATTERN.search(user_agent)),
            utm_source=params.get("utm_source") or None,
            utm_medium=params.get("utm_medium") or None,
            utm_campaign=params.get("utm_campaign") or None,
            referrer=referrer[:MAX_REFERRER_LENGTH] if referrer else None,
        )

    @classmethod
    def resume(cls, token: str, *, region: str | None = None) -> "SessionContext":
        """Rebuild the context of an existing session from its token."""

        return cls(token=token, region=region or None)
