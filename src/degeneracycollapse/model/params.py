"""Immutable per-render parameter snapshot."""
from dataclasses import dataclass

from degeneracycollapse.config import DEFAULT_ALPHA, DEFAULT_ENABLED, DEFAULT_LANGUAGE
from degeneracycollapse.model.i18n import Language


@dataclass(frozen=True)
class RenderParams:
    alpha: float = DEFAULT_ALPHA
    enabled: bool = DEFAULT_ENABLED
    language: Language = Language(DEFAULT_LANGUAGE)
