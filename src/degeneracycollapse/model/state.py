"""
Simulator State (Data Model)
============================
This module defines the central data structure for the running application.

Why is this file needed?
------------------------
1. State Management: It holds the three user inputs (constraint flag,
   constraint strength α, display language) in one place.
2. Render Trigger: It emits `changed` whenever one of them actually changes,
   which is the only event that causes a new render pass.
3. Decoupling: Views write to this object; the renderer only ever sees the
   immutable RenderParams snapshot.

Classes:
    SimulatorState: The main container class.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Signal

from degeneracycollapse.config import (
    ALPHA_MIN, ALPHA_MAX, DEFAULT_ALPHA, DEFAULT_ENABLED, DEFAULT_LANGUAGE
)
from degeneracycollapse.model.i18n import Language
from degeneracycollapse.model.params import RenderParams

logger = logging.getLogger(__name__)


class SimulatorState(QObject):
    """Host UI state with a change signal for render sync."""
    changed = Signal(object)  # RenderParams
    language_changed = Signal(object)  # Language

    def __init__(self) -> None:
        super().__init__()
        self._alpha: float = DEFAULT_ALPHA
        self._enabled: bool = DEFAULT_ENABLED
        self._language: Language = Language(DEFAULT_LANGUAGE)

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def language(self) -> Language:
        return self._language

    def snapshot(self) -> RenderParams:
        return RenderParams(alpha=self._alpha, enabled=self._enabled, language=self._language)

    def set_alpha(self, alpha: float) -> None:
        alpha = min(max(float(alpha), ALPHA_MIN), ALPHA_MAX)
        if alpha == self._alpha:
            return
        self._alpha = alpha
        logger.debug(f"alpha -> {alpha:.3f}")
        self.changed.emit(self.snapshot())

    def set_enabled(self, enabled: bool) -> None:
        enabled = bool(enabled)
        if enabled == self._enabled:
            return
        self._enabled = enabled
        logger.debug(f"constraint enabled -> {enabled}")
        self.changed.emit(self.snapshot())

    def set_language(self, language: Language | str) -> None:
        language = Language(language)
        if language == self._language:
            return
        self._language = language
        logger.info(f"Language set to {language.value}")
        self.language_changed.emit(language)
        self.changed.emit(self.snapshot())

    def toggle_language(self) -> None:
        self.set_language(self._language.toggled())
