"""Shared test fixtures."""

from __future__ import annotations

import base64

import pytest
from fastapi.testclient import TestClient

from inkcalc.dependencies import get_solver
from inkcalc.main import app


def make_data_url(payload: bytes, media_type: str = "image/png") -> str:
    return f"data:{media_type};base64,{base64.b64encode(payload).decode('ascii')}"


# Big enough to pass the blank-canvas gate; the fake solver never decodes it
DRAWING_BYTES = b"\x89PNG\r\n\x1a\n" + bytes(range(256)) * 8
DRAWING_URL = make_data_url(DRAWING_BYTES)

# A few hundred bytes: what a near-empty canvas compresses to
TINY_URL = make_data_url(b"\xff\xd8\xff\xe0" + b"\x00" * 400, "image/jpeg")

TWO_PLUS_TWO_REPLY = '[{"expr": "2 + 2", "result": "4"}]'
ASSIGN_REPLY = '[{"expr": "x", "result": "4", "assign": true}]'


class FakeSolver:
    """Stands in for VisionSolver: records calls, returns a canned reply."""

    model = "fake-vision"
    configured = True

    def __init__(self, reply: str = "[]", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[tuple[str, object]] = []

    async def complete(self, prompt, image) -> str:
        self.calls.append((prompt, image))
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def fake_solver() -> FakeSolver:
    return FakeSolver(TWO_PLUS_TWO_REPLY)


@pytest.fixture
def client(fake_solver):
    app.dependency_overrides[get_solver] = lambda: fake_solver
    yield TestClient(app)
    app.dependency_overrides.clear()
