from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class OpenNote:
    filename: str


@dataclass(frozen=True)
class SaveNote:
    pass


@dataclass(frozen=True)
class DeleteNote:
    filename: str


Action = Union[OpenNote, SaveNote, DeleteNote]
