"""Lecture entity."""

from dataclasses import dataclass


@dataclass
class Lecture:
    id: int
    subject_id: int
    title: str
    description: str | None = None
    creator_id: int | None = None
