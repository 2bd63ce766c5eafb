"""Conformance fixture loader for restroute.

Loads YAML fixtures from tests/fixtures/ and converts them into test cases
for parametrized testing. Three fixture shapes:

- join.yaml: base/extra pairs for join_segments
- query.yaml: parameter mappings for encode_query
- chains.yaml: multi-document route chains built from SimpleRoute and
  SimpleChildRoute, one step at a time
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from restroute import BaseRoute, SimpleChildRoute, SimpleRoute

FIXTURE_DIR = Path(__file__).resolve().parent / "fixtures"


@dataclass
class JoinCase:
    """A single join_segments case."""

    case_name: str
    base: str
    extra: str
    expect: str


@dataclass
class QueryCase:
    """A single encode_query case."""

    case_name: str
    params: dict[str, Any]
    expect: str


@dataclass
class ChainCase:
    """A route chain: a root name, a list of steps, and the rendered result."""

    fixture_name: str
    root: str
    steps: list[dict[str, Any]]
    expect: str


# ─── Chain evaluation ───────────────────────────────────────────────────────


def run_chain(root: str, steps: list[dict[str, Any]]) -> str:
    """Build a route from SimpleRoute(root) by applying each step in order.

    Steps: ``with_id`` and ``child`` keep a route; ``join`` and ``query``
    render a string and must come last.
    """
    current: BaseRoute | str = SimpleRoute(root)
    for step in steps:
        if not isinstance(current, BaseRoute):
            msg = f"step {step!r} follows a rendered string {current!r}"
            raise ValueError(msg)
        [(op, arg)] = step.items()
        if op == "with_id":
            current = current.with_id(arg)
        elif op == "child":
            current = SimpleChildRoute(current, str(arg))
        elif op == "join":
            current = current.join(str(arg))
        elif op == "query":
            current = current.with_query_params(arg)
        else:
            msg = f"unknown chain step: {op!r}"
            raise ValueError(msg)
    return current.path if isinstance(current, BaseRoute) else current


# ─── Fixture loading ────────────────────────────────────────────────────────


def _load_cases(name: str) -> list[dict[str, Any]]:
    """Load the ``cases`` list of a single-document fixture file."""
    with (FIXTURE_DIR / name).open() as f:
        doc = yaml.safe_load(f)
    return doc["cases"]


def load_join_cases() -> list[JoinCase]:
    return [
        JoinCase(
            case_name=case["name"],
            base=str(case["base"]),
            extra=str(case["extra"]),
            expect=str(case["expect"]),
        )
        for case in _load_cases("join.yaml")
    ]


def load_query_cases() -> list[QueryCase]:
    return [
        QueryCase(case_name=case["name"], params=case["params"], expect=str(case["expect"]))
        for case in _load_cases("query.yaml")
    ]


def load_chain_cases() -> list[ChainCase]:
    """Load all route chain documents from chains.yaml."""
    cases: list[ChainCase] = []
    with (FIXTURE_DIR / "chains.yaml").open() as f:
        for doc in yaml.safe_load_all(f):
            if doc is None:
                continue
            cases.append(
                ChainCase(
                    fixture_name=doc["name"],
                    root=str(doc["root"]),
                    steps=doc.get("steps") or [],
                    expect=str(doc["expect"]),
                )
            )
    return cases
