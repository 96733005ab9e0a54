from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest


@dataclass
class FieldDescriptor:
    name: str
    type: str = "text"


@dataclass
class Collection:
    name: str
    schema: Any = field(default_factory=list)


class RecordingLogger:
    """Collects warning messages instead of writing them anywhere."""

    def __init__(self):
        self.messages: list[str] = []

    def warning(self, event, *args, **kwargs):
        self.messages.append(event)


@pytest.fixture()
def posts():
    return Collection(
        name="posts",
        schema=[FieldDescriptor("title"), FieldDescriptor("body", type="markdown")],
    )


@pytest.fixture()
def recording_logger():
    return RecordingLogger()
