"""Tagged state machine behind the selection and results page.

Every screen the page can show is one state class, so impossible combinations
(for example loading while an error is displayed) cannot be represented.
Transitions are pure functions that return a new state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from ..climate_issues import CLIMATE_ISSUES, issues_for
from ..schemas import ImageResult

EXPECTED_IMAGE_COUNT = 3
GENERIC_FAILURE_MESSAGE = "Failed to generate images. Please try again."


class InvalidTransition(RuntimeError):
    """Raised when an action is not allowed in the current state."""


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class CityChosen:
    city: str


@dataclass(frozen=True)
class ReadyToGenerate:
    city: str
    issue: str


@dataclass(frozen=True)
class Loading:
    city: str
    issue: str


@dataclass(frozen=True)
class ResultsShown:
    city: str
    issue: str
    images: Tuple[ImageResult, ...]


@dataclass(frozen=True)
class ErrorShown:
    city: str
    issue: str
    message: str


UIState = Union[Idle, CityChosen, ReadyToGenerate, Loading, ResultsShown, ErrorShown]

# States that carry a complete city/issue selection.
_SELECTED = (ReadyToGenerate, ResultsShown, ErrorShown)


# ----------------------------------------------------------------------
# Transitions
# ----------------------------------------------------------------------
def select_city(state: UIState, city: str) -> UIState:
    if isinstance(state, Loading):
        raise InvalidTransition("cannot change the city while images are being generated")
    if city not in CLIMATE_ISSUES:
        raise ValueError(f"unknown city '{city}'")
    return CityChosen(city=city)


def select_issue(state: UIState, issue: str) -> UIState:
    if isinstance(state, Loading):
        raise InvalidTransition("cannot change the issue while images are being generated")
    city = selected_city(state)
    if city is None:
        raise InvalidTransition("choose a city before choosing an issue")
    if issue not in issues_for(city):
        raise ValueError(f"'{issue}' is not a known issue for {city}")
    return ReadyToGenerate(city=city, issue=issue)


def start_generation(state: UIState) -> Loading:
    if not isinstance(state, _SELECTED):
        raise InvalidTransition(f"cannot generate from {type(state).__name__}")
    return Loading(city=state.city, issue=state.issue)


def generation_succeeded(state: UIState, images) -> UIState:
    if not isinstance(state, Loading):
        raise InvalidTransition("no generation request is in flight")
    images = tuple(images)
    if len(images) != EXPECTED_IMAGE_COUNT:
        return ErrorShown(city=state.city, issue=state.issue, message=GENERIC_FAILURE_MESSAGE)
    return ResultsShown(city=state.city, issue=state.issue, images=images)


def generation_failed(state: UIState, message: str = GENERIC_FAILURE_MESSAGE) -> ErrorShown:
    if not isinstance(state, Loading):
        raise InvalidTransition("no generation request is in flight")
    return ErrorShown(city=state.city, issue=state.issue, message=message)


# ----------------------------------------------------------------------
# Queries
# ----------------------------------------------------------------------
def selected_city(state: UIState):
    return getattr(state, "city", None)


def selected_issue(state: UIState):
    if isinstance(state, CityChosen):
        return None
    return getattr(state, "issue", None)


def issue_options(state: UIState) -> list:
    city = selected_city(state)
    return issues_for(city) if city else []


def can_select_issue(state: UIState) -> bool:
    return selected_city(state) is not None and not isinstance(state, Loading)


def can_generate(state: UIState) -> bool:
    return isinstance(state, _SELECTED)


def visible_cards(state: UIState):
    """What the results area shows: ``("skeleton", 3)``, ``("images", images)`` or ``None``."""
    if isinstance(state, Loading):
        return ("skeleton", EXPECTED_IMAGE_COUNT)
    if isinstance(state, ResultsShown):
        return ("images", state.images)
    return None
