import re

import pytest

from weather_cli.weather_service.sanitizer import sanitize, trim, url_encode

ALLOWED = re.compile(r"^(?:[A-Za-z0-9\-_.~]|%[0-9A-F]{2})*$")


def test_sanitize_trims_and_encodes_inner_space():
    assert sanitize(" Rio de Janeiro ") == "Rio%20de%20Janeiro"


def test_sanitize_empty_input():
    assert sanitize("") == ""
    assert sanitize(" \t ") == ""


def test_trim_only_strips_spaces_and_tabs():
    assert trim("\t London  ") == "London"
    assert trim("\nLondon\n") == "\nLondon\n"


def test_url_encode_keeps_unreserved_characters():
    assert url_encode("A-z_0.9~") == "A-z_0.9~"


def test_url_encode_uses_uppercase_hex():
    assert url_encode("a/b?c") == "a%2Fb%3Fc"
    assert url_encode("Zürich") == "Z%C3%BCrich"


@pytest.mark.parametrize(
    "raw",
    [
        "New York",
        "Tel Aviv-Yafo",
        "São Paulo",
        "a&b=c",
        "100%",
        "%%%41",
        "\tKyiv,UA ",
        "東京",
        "🌧 city",
        "line\nbreak\r\x00\x1b\x7f",
        "Caf\udcff",
        "\udcfe\udcffCity",
        "",
    ],
)
def test_sanitize_output_only_contains_safe_characters(raw):
    assert ALLOWED.match(sanitize(raw))


def test_undecodable_bytes_encode_as_raw_bytes():
    # Bytes that failed to decode arrive as surrogate escapes.
    assert sanitize("Caf\udcff") == "Caf%FF"
    assert sanitize(b"\xff\xfeCity".decode("utf-8", "surrogateescape")) == "%FF%FECity"


def test_control_characters_and_percent_runs_are_encoded():
    assert url_encode("a\x00b\x7f") == "a%00b%7F"
    assert url_encode("%%") == "%25%25"
