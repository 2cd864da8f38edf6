from __future__ import annotations

from dataclasses import dataclass

UNDERSCORE = '_'
DASH = '-'


@dataclass(frozen=True)
class Localization:
    language: str
    country: str | None = None
    default: bool = False

    def locale(self, delimiter: str = UNDERSCORE) -> str:
        if self.country:
            return f'{self.language}{delimiter}{self.country}'
        return self.language

    def __str__(self) -> str:
        return self.locale()
