"""Typed configuration for :mod:`visual` with Pydantic validation."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

from .errors import FallbackAlreadySetError
from .fallback import set_fallback

__all__ = ["VisualSettings", "apply_settings"]

logger = logging.getLogger(__name__)


class VisualSettings(BaseModel):
    """Options a host application may pass when configuring rendering."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    fallback: str | None = None


def apply_settings(settings: VisualSettings | Mapping[str, Any]) -> bool:
    """Apply *settings* treating every option as optional configuration.

    Returns ``True`` when the fallback text was committed. When the fallback
    has already been initialised the failure is logged and ``False`` is
    returned; the previously committed value stays in effect. Malformed input
    raises :class:`pydantic.ValidationError`.
    """

    if not isinstance(settings, VisualSettings):
        settings = VisualSettings.model_validate(dict(settings))
    if settings.fallback is None:
        return False
    try:
        set_fallback(settings.fallback)
    except FallbackAlreadySetError as exc:
        logger.warning("Ignoring fallback setting: %s", exc)
        return False
    return True
