"""Tests for :mod:`greengitch.utils` and :mod:`greengitch.climate_issues`."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from greengitch.climate_issues import CLIMATE_ISSUES, as_mapping, issues_for, list_cities
from greengitch.utils import decode_data_uri, render_placeholder_svg, to_data_uri


def test_catalogue_lists_cities_in_declaration_order() -> None:
    assert list_cities() == ["New York", "London", "Tokyo", "Mumbai"]


def test_issues_for_unknown_city_is_empty() -> None:
    assert issues_for("Atlantis") == []


def test_catalogue_copies_cannot_mutate_the_table() -> None:
    issues_for("London").append("Volcanoes")
    as_mapping()["Tokyo"].clear()

    assert CLIMATE_ISSUES["London"] == ["Flooding", "Air Quality", "Heat Waves"]
    assert CLIMATE_ISSUES["Tokyo"] == ["Typhoons", "Urban Flooding", "Heat Stress"]


def test_to_data_uri_defaults_to_png() -> None:
    assert to_data_uri("eA==") == "data:image/png;base64,eA=="


def test_decode_data_uri_returns_mime_and_bytes() -> None:
    assert decode_data_uri("data:image/svg+xml;base64,PHN2Zy8+") == ("image/svg+xml", b"<svg/>")
    assert decode_data_uri("data:,plain") == ("text/plain", b"plain")


@pytest.mark.parametrize("url", ["/placeholder.svg", "data:image/png;base64,***"])
def test_decode_data_uri_rejects_bad_input(url: str) -> None:
    with pytest.raises(ValueError):
        decode_data_uri(url)


def test_placeholder_svg_clamps_dimensions() -> None:
    svg = render_placeholder_svg(width=0, height=100000)

    assert svg.startswith("<svg")
    assert 'width="1"' in svg
    assert 'height="4096"' in svg
