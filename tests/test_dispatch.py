"""Tests for discriminator normalization and the Selection result type."""

import logging

import pytest

from creational_patterns.dispatch import Selection, normalize, select
from creational_patterns.domain.exceptions import DomainError, UnsupportedSelection
from creational_patterns.domain.models import Platform


class Thing:
    pass


REGISTRY = {Platform.WINDOWS: Thing, Platform.MAC: Thing}


@pytest.mark.parametrize(
    "raw, expected",
    [("windows", "windows"), ("  MAC\n", "mac"), ("WinDows", "windows"), ("", ""), (None, "")],
)
def test_normalize(raw, expected):
    assert normalize(raw) == expected


def test_select_builds_fresh_creator_each_time():
    first = select("windows", REGISTRY, "Platform")
    second = select("windows", REGISTRY, "Platform")

    assert first.ok and second.ok
    assert isinstance(first.creator, Thing)
    assert first.creator is not second.creator


@pytest.mark.parametrize("raw", ["", "   ", "linux", "LINUX", "win dows", None])
def test_select_rejects_unknown_tokens(raw):
    selection = select(raw, REGISTRY, "Platform")

    assert not selection.ok
    assert selection.creator is None
    assert isinstance(selection.error, UnsupportedSelection)


def test_error_names_value_and_choices():
    error = select("  Linux ", REGISTRY, "Platform").error

    assert error.value == "linux"
    assert error.kind == "Platform"
    assert error.choices == ("windows", "mac")
    assert str(error) == "Platform 'linux' is not supported. Expected one of: windows, mac."
    assert isinstance(error, DomainError)
    assert isinstance(error, ValueError)


def test_unwrap_raises_the_selection_error():
    selection = select("bogus", REGISTRY, "Platform")

    with pytest.raises(UnsupportedSelection) as exc_info:
        selection.unwrap()
    assert exc_info.value is selection.error


def test_unwrap_returns_creator():
    assert isinstance(select("mac", REGISTRY, "Platform").unwrap(), Thing)


def test_selection_requires_exactly_one_outcome():
    with pytest.raises(ValueError):
        Selection()
    with pytest.raises(ValueError):
        Selection(creator=Thing(), error=UnsupportedSelection("x", "Platform", []))


def test_rejection_is_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="creational_patterns.dispatch"):
        select("bogus", REGISTRY, "Platform")

    assert "Rejected platform 'bogus'" in caplog.text
