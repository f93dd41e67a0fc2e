"""Tests for API endpoints (fake solver — no LLM calls)."""

from __future__ import annotations

import base64

from tests.conftest import ASSIGN_REPLY, DRAWING_URL, TINY_URL, make_data_url


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["model"] == "fake-vision"
    assert data["llm_configured"] is True


def test_prompts(client):
    response = client.get("/api/prompts")
    assert response.status_code == 200
    assert "Problem Types" in response.json()["solve"]


def test_two_plus_two(client, fake_solver):
    response = client.post("/api/drawing", json={"image": DRAWING_URL, "dict_of_vars": {}})
    assert response.status_code == 200
    assert response.json() == {
        "message": "Image processed",
        "data": [{"expr": "2 + 2", "result": "4", "assign": False}],
        "status": "success",
    }
    assert len(fake_solver.calls) == 1


def test_assignment_passes_through(client, fake_solver):
    fake_solver.reply = ASSIGN_REPLY
    response = client.post("/api/drawing", json={"image": DRAWING_URL})
    assert response.status_code == 200
    assert response.json()["data"] == [{"expr": "x", "result": "4", "assign": True}]


def test_assign_defaulted_per_entry(client, fake_solver):
    fake_solver.reply = (
        '[{"expr": "x", "result": 2, "assign": true},'
        ' {"expr": "y", "result": 5},'
        ' {"expr": "z", "result": {"re": 1, "im": 0}, "assign": false}]'
    )
    response = client.post("/api/drawing", json={"image": DRAWING_URL})
    assert response.status_code == 200
    data = response.json()["data"]
    assert [e["assign"] for e in data] == [True, False, False]
    assert data[0]["result"] == 2
    assert data[2]["result"] == {"re": 1, "im": 0}


def test_undersized_image_never_reaches_solver(client, fake_solver):
    response = client.post("/api/drawing", json={"image": TINY_URL})
    assert response.status_code == 400
    data = response.json()
    assert data["status"] == "error"
    assert data["message"] == "Invalid image data"
    assert fake_solver.calls == []


def test_exactly_threshold_is_rejected(client, fake_solver):
    response = client.post("/api/drawing", json={"image": make_data_url(b"a" * 1000)})
    assert response.status_code == 400
    assert fake_solver.calls == []


def test_missing_image(client, fake_solver):
    response = client.post("/api/drawing", json={"dict_of_vars": {"x": 1}})
    assert response.status_code == 400
    assert response.json()["status"] == "error"
    assert fake_solver.calls == []


def test_malformed_base64(client, fake_solver):
    response = client.post("/api/drawing", json={"image": "data:image/png;base64," + "!!" * 1000})
    assert response.status_code == 400
    assert fake_solver.calls == []


def test_no_data_url_header(client, fake_solver):
    raw = base64.b64encode(b"x" * 2000).decode("ascii")
    response = client.post("/api/drawing", json={"image": raw})
    assert response.status_code == 400
    assert fake_solver.calls == []


def test_non_object_body(client, fake_solver):
    response = client.post("/api/drawing", json=["not", "an", "object"])
    assert response.status_code == 400
    data = response.json()
    assert data["status"] == "error"
    assert data["message"] == "Invalid request body"


def test_prose_reply_is_format_error(client, fake_solver):
    fake_solver.reply = "The answer is 4."
    response = client.post("/api/drawing", json={"image": DRAWING_URL})
    assert response.status_code == 400
    assert response.json() == {
        "message": "Error processing response",
        "error": "Invalid response format",
        "status": "error",
    }


def test_non_array_reply_is_format_error(client, fake_solver):
    fake_solver.reply = '{"expr": "2 + 2", "result": "4"}'
    response = client.post("/api/drawing", json={"image": DRAWING_URL})
    assert response.status_code == 400
    data = response.json()
    assert data["status"] == "error"
    assert "data" not in data


def test_fenced_reply_is_not_recovered(client, fake_solver):
    fake_solver.reply = '```json\n[{"expr": "2 + 2", "result": "4"}]\n```'
    response = client.post("/api/drawing", json={"image": DRAWING_URL})
    assert response.status_code == 400


def test_infinity_reply_is_format_error(client, fake_solver):
    fake_solver.reply = '[{"expr": "1/0", "result": Infinity}]'
    response = client.post("/api/drawing", json={"image": DRAWING_URL})
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid response format"


def test_solver_failure_is_500(client, fake_solver):
    fake_solver.error = ConnectionError("upstream unreachable")
    response = client.post("/api/drawing", json={"image": DRAWING_URL})
    assert response.status_code == 500
    assert response.json() == {
        "message": "Error processing request",
        "error": "upstream unreachable",
        "status": "error",
    }


def test_variables_reach_prompt(client, fake_solver):
    client.post("/api/drawing", json={"image": DRAWING_URL, "dict_of_vars": {"x": 5}})
    prompt, image = fake_solver.calls[0]
    assert '"x":5' in prompt
    assert image.media_type == "image/png"


def test_same_image_same_result(client, fake_solver):
    first = client.post("/api/drawing", json={"image": DRAWING_URL}).json()
    second = client.post("/api/drawing", json={"image": DRAWING_URL}).json()
    assert first == second
    assert fake_solver.calls[0][1] == fake_solver.calls[1][1]
