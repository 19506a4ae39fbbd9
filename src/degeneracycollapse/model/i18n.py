"""Bilingual text catalogue (English / Russian)."""
from dataclasses import dataclass
from enum import StrEnum


class Language(StrEnum):
    EN = "en"
    RU = "ru"

    def toggled(self) -> "Language":
        """The other language of the pair."""
        return Language.RU if self is Language.EN else Language.EN


@dataclass(frozen=True)
class Texts:
    """All user-visible strings for one language."""
    title: str
    explanation: tuple[str, ...]
    constraint_strength: str
    enable_constraint: str
    x_axis: str
    y_axis: str
    ring_profile_title: str
    ring_angle_label: str
    ring_loss_label: str
    window_status: str


FORMULA = "L(x, y) = (x² + y² - 1)² + α·x²"

CONTENT: dict[Language, Texts] = {
    Language.EN: Texts(
        title="Degeneracy Collapse Simulator",
        explanation=(
            "This demonstrates how degenerate solutions (multiple equivalent minima) "
            "collapse when an auxiliary constraint is added.",
            "Base function f(x, y) = (x² + y² - 1)² has infinitely many minima "
            "along a ring of radius 1.",
            "Adding constraint g(x, y) = α·x² breaks symmetry and selects a unique minimum.",
            "Note: This is an illustrative demonstration, not a mathematical proof.",
        ),
        constraint_strength="Constraint strength (α)",
        enable_constraint="Enable auxiliary constraint",
        x_axis="x",
        y_axis="y",
        ring_profile_title="Loss along the ring x² + y² = 1",
        ring_angle_label="θ [rad]",
        ring_loss_label="L(cos θ, sin θ)",
        window_status="Color range: [{low:.4f}, {high:.4f}]",
    ),
    Language.RU: Texts(
        title="Симулятор коллапса вырожденных решений",
        explanation=(
            "Это демонстрация коллапса вырожденных решений (множественных эквивалентных "
            "минимумов) при добавлении вспомогательного ограничения.",
            "Базовая функция f(x, y) = (x² + y² - 1)² имеет бесконечно много минимумов "
            "вдоль кольца радиуса 1.",
            "Добавление ограничения g(x, y) = α·x² нарушает симметрию и выбирает "
            "уникальный минимум.",
            "Примечание: Это иллюстрация, не математическое доказательство.",
        ),
        constraint_strength="Сила ограничения (α)",
        enable_constraint="Включить вспомогательное ограничение",
        x_axis="x",
        y_axis="y",
        ring_profile_title="Потери вдоль кольца x² + y² = 1",
        ring_angle_label="θ [рад]",
        ring_loss_label="L(cos θ, sin θ)",
        window_status="Цветовой диапазон: [{low:.4f}, {high:.4f}]",
    ),
}


def texts_for(language: Language | str) -> Texts:
    """Look up the catalogue entry; raises ValueError for unknown codes."""
    return CONTENT[Language(language)]
