"""Tests for solve prompt construction."""

from __future__ import annotations

from inkcalc.llm.prompts import build_solve_prompt, format_variables, get_all_templates


def test_variables_embedded_as_compact_json():
    prompt = build_solve_prompt({"x": 5})
    assert '"x":5' in prompt


def test_empty_context():
    assert "{}" in build_solve_prompt({})
    assert build_solve_prompt(None) == build_solve_prompt({})


def test_structured_values():
    assert format_variables({"v": [1, 2], "ok": True, "name": "speed"}) == '{"v":[1,2],"ok":true,"name":"speed"}'


def test_all_categories_present():
    prompt = build_solve_prompt()
    for heading in (
        "Simple Mathematical Expressions",
        "Systems of Equations",
        "Assignment Statements",
        "Graphical Math Problems",
        "Abstract Concept Detection",
    ):
        assert heading in prompt
    assert "PEMDAS" in prompt
    assert "only of the JSON array" in prompt


def test_output_shapes_unescaped():
    prompt = build_solve_prompt()
    assert '[{"expr": "variable name", "result": assigned value, "assign": true}]' in prompt


def test_templates_listing():
    assert set(get_all_templates()) == {"solve"}
