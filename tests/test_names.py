from types import SimpleNamespace

import pytest

from f1companion.projections import full_name, profile_name


@pytest.mark.parametrize(
    ("first", "last", "expected"),
    [
        ("", "", ""),
        ("Max", "", "Max"),
        ("", "Verstappen", "Verstappen"),
        ("Max", "Verstappen", "Max Verstappen"),
        (" Max ", " Verstappen ", "Max Verstappen"),
        (None, None, ""),
        ("   ", "Verstappen", "Verstappen"),
    ],
)
def test_full_name(first, last, expected):
    assert full_name(first, last) == expected


def test_full_name_falls_back_to_display_name():
    assert full_name(None, "  ", " maxv ") == "maxv"
    assert full_name("Max", None, "maxv") == "Max"


def test_profile_name():
    profile = SimpleNamespace(first_name="Lando", last_name=None, display_name="ln4")
    assert profile_name(profile) == "Lando"
    assert profile_name(None) == ""
