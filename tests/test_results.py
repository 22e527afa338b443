from __future__ import annotations

from dataclasses import dataclass

import pytest

from commandpalette.results import (
    ActivationTarget,
    CommandResult,
    HeaderResult,
    activate,
    find_result_index,
    refine_query,
)
from commandpalette.utils.errors import UnknownResultTypeError


@pytest.fixture
def results(recorder):
    return [
        HeaderResult(text="east", category="east"),
        CommandResult(text="Sumer", handler=recorder, args="Sumer"),
        CommandResult(text="Babylon", handler=recorder, args="Babylon"),
        HeaderResult(text="lang", category="lang"),
        CommandResult(text="Italian", handler=recorder, args="Italian"),
    ]


def test_refine_query_adds_category_and_keeps_text() -> None:
    header = HeaderResult(text="<mark>la</mark>ng", category="lang")

    assert refine_query("ital", header) == ":lang: ital"
    assert refine_query(":east: ital", header) == ":lang: ital"
    assert refine_query("", header) == ":lang: "


def test_refine_query_toggles_off_matching_category() -> None:
    header = HeaderResult(text="lang", category="lang")

    assert refine_query(":lang: ital", header) == "ital"
    assert refine_query(": LANG :", header) == ""


def test_activate_header_returns_refined_query(recorder) -> None:
    header = HeaderResult(text="east", category="east")

    assert activate(header, "sum") == ":east: sum"
    assert recorder.calls == []


def test_activate_command_runs_handler(recorder) -> None:
    command = CommandResult(text="Sumer", handler=recorder, args={"id": 1})

    assert activate(command, ":east: su") == ":east: su"
    assert recorder.calls == [{"id": 1}]


def test_activate_rejects_unknown_result_type() -> None:
    @dataclass
    class Divider:
        text: str = "---"
        type: str = "divider"

    with pytest.raises(UnknownResultTypeError, match="divider"):
        activate(Divider(), "")  # type: ignore[arg-type]

    with pytest.raises(UnknownResultTypeError):
        activate(object(), "")  # type: ignore[arg-type]


def test_find_first_and_last(results) -> None:
    assert find_result_index(results) == 0
    assert find_result_index(results, ActivationTarget.COMMAND) == 1
    assert find_result_index(results, ActivationTarget.HEADER, reverse=True) == 3
    assert find_result_index(results, reverse=True) == 4


def test_find_next_and_previous(results) -> None:
    assert find_result_index(results, ActivationTarget.COMMAND, 2) == 4
    assert find_result_index(results, ActivationTarget.HEADER, 1) == 3
    assert find_result_index(results, ActivationTarget.COMMAND, 4, reverse=True) == 2
    assert find_result_index(results, ActivationTarget.HEADER, 3, reverse=True) == 0


def test_find_without_wrap_stops_at_the_ends(results) -> None:
    assert find_result_index(results, ActivationTarget.HEADER, 3) == -1
    assert find_result_index(results, ActivationTarget.ANY, 4) == -1
    assert find_result_index(results, ActivationTarget.COMMAND, 1, reverse=True) == -1


def test_find_with_wrap_cycles(results) -> None:
    assert find_result_index(results, ActivationTarget.ANY, 4, wrap=True) == 0
    assert find_result_index(results, ActivationTarget.HEADER, 3, wrap=True) == 0
    assert find_result_index(results, ActivationTarget.COMMAND, 1, reverse=True, wrap=True) == 4
    assert find_result_index(results, ActivationTarget.HEADER, 0, wrap=True) == 3


def test_find_in_empty_results() -> None:
    assert find_result_index([]) == -1
    assert find_result_index([], ActivationTarget.HEADER, reverse=True, wrap=True) == -1


def test_find_wrap_returns_start_when_it_is_the_only_match() -> None:
    only = [HeaderResult(text="east", category="east")]

    assert find_result_index(only, ActivationTarget.HEADER, 0, wrap=True) == 0
    assert find_result_index(only, ActivationTarget.COMMAND, 0, wrap=True) == -1
