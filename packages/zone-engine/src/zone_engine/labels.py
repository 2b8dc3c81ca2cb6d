from __future__ import annotations

SCORE_LABELS: tuple[tuple[int, str], ...] = (
    (80, "Hot"),
    (60, "Busy"),
    (40, "Moderate"),
    (20, "Slow"),
)


def score_label(score: float) -> str:
    for threshold, label in SCORE_LABELS:
        if score >= threshold:
            return label
    return "Dead"
