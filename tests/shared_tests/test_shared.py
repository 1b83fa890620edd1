import math

import pytest

from services.shared import (
    AccessDeniedError,
    AssociationNotFoundError,
    DuplicateEntityError,
    EntityNotFoundError,
    InjectionDashboardError,
    is_blank,
    is_positive_finite,
    new_entity_id,
)


@pytest.mark.parametrize("value", [None, "", "   ", "\t\n", 7])
def test_is_blank(value):
    assert is_blank(value)


def test_is_not_blank():
    assert not is_blank(" W1 ")


@pytest.mark.parametrize(
    "value, expected",
    [
        (1, True),
        (0.5, True),
        (0, False),
        (-1.0, False),
        (math.inf, False),
        (math.nan, False),
        (None, False),
        (True, False),
        ("10", False),
    ],
)
def test_is_positive_finite(value, expected):
    assert is_positive_finite(value) is expected


def test_new_entity_id():
    first = new_entity_id("PM")
    second = new_entity_id("PM")

    assert first.startswith("PM")
    assert len(first) == len("PM") + 12
    assert first != second


def test_error_hierarchy():
    assert issubclass(AssociationNotFoundError, EntityNotFoundError)
    assert issubclass(EntityNotFoundError, KeyError)
    assert issubclass(DuplicateEntityError, ValueError)
    assert issubclass(AccessDeniedError, PermissionError)
    for error in (EntityNotFoundError, DuplicateEntityError, AccessDeniedError):
        assert issubclass(error, InjectionDashboardError)


def test_not_found_message_is_not_quoted():
    assert str(EntityNotFoundError("No tank with id 'T9'")) == "No tank with id 'T9'"
