"""Solve prompt — the five problem categories and the required JSON reply shape."""

from __future__ import annotations

import json
from typing import Any

_SOLVE_TEMPLATE = """You are provided with an image containing mathematical expressions, equations, graphical problems, or abstract concepts. Your goal is to accurately analyze and solve the content based on the following guidelines:

### Key Points:
1. **Follow the PEMDAS Rule**: (Priority: Parentheses, Exponents, Multiplication & Division from left to right, Addition & Subtraction from left to right). Apply this rule when solving any mathematical expression.

### Problem Types:
1. **Simple Mathematical Expressions**:
   Evaluate basic expressions like `2 + 2`, `3 * 4`, or `5 / 6 - 2`. Return a **list of one dictionary** with the structure:
   [{{"expr": "given expression", "result": "calculated answer"}}]

2. **Systems of Equations**:
   Solve equations involving one or more variables such as `x^2 + 2x + 1 = 0` or `3y + 4x = 0`. For each variable, return a **comma-separated list of dictionaries**:
   [{{"expr": "variable name", "result": calculated value, "assign": true}}]

3. **Assignment Statements**:
   If the image contains assignments (e.g., `x = 4`, `y = 5`), include `"assign": true` for each variable:
   [{{"expr": "variable name", "result": assigned value, "assign": true}}]

4. **Graphical Math Problems**:
   For problems drawn as a scenario (motion diagrams, geometry, trigonometric graphs), pay close attention to visual indicators like colors, labels, and notes. Answer in the format:
   [{{"expr": "interpreted description of the problem", "result": "calculated answer"}}]

5. **Abstract Concept Detection**:
   If the image portrays abstract concepts such as emotions, historical events, philosophical ideas, or metaphors, return an interpretation in this format:
   [{{"expr": "explanation of the abstract concept", "result": "interpreted meaning or theme"}}]

### Contextual Consideration:
- Use the values of the variables given in this dictionary: {dict_of_vars} to solve the expressions. If a variable appears in the given expressions, replace it with its corresponding value from the dictionary.

### Response:
- Your response must consist only of the JSON array of results. **Do not include any additional text, explanation, or markdown code fences**."""


def format_variables(dict_of_vars: dict[str, Any] | None) -> str:
    """Compact JSON for the substitution table, e.g. {"x":5}."""
    return json.dumps(dict_of_vars or {}, separators=(",", ":"), ensure_ascii=False, default=str)


def build_solve_prompt(dict_of_vars: dict[str, Any] | None = None) -> str:
    return _SOLVE_TEMPLATE.format(dict_of_vars=format_variables(dict_of_vars))


def get_all_templates() -> dict[str, str]:
    return {"solve": _SOLVE_TEMPLATE}
