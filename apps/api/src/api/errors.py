from __future__ import annotations

from dataclasses import dataclass

UPSTREAM_ERROR_CODES = frozenset(
    {
        "UPSTREAM_TIMEOUT",
        "UPSTREAM_HTTP_ERROR",
        "UPSTREAM_FAILURE",
        "UPSTREAM_MALFORMED",
    }
)


@dataclass
class ApiError(Exception):
    code: str
    message: str
    status_code: int

    @property
    def is_upstream(self) -> bool:
        return self.code in UPSTREAM_ERROR_CODES
