"""Unit tests for project name validation (tsinit.validator)."""

from __future__ import annotations

import pytest

from tsinit.errors import InvalidNameError
from tsinit.validator import MAX_NAME_LENGTH, RESERVED_NAMES, validate_project_name

pytestmark = pytest.mark.unit


class TestAcceptedNames:
    @pytest.mark.parametrize(
        "name",
        ["my-app", "my_app", "MyApp", "app.v2", "app 2", "concat", "com10", "lpt0", "x"],
    )
    def test_clean_names_pass(self, name):
        assert validate_project_name(name) == name

    def test_max_length_passes(self):
        name = "a" * MAX_NAME_LENGTH
        assert validate_project_name(name) == name

    def test_unicode_passes(self):
        assert validate_project_name("projeto-ção") == "projeto-ção"


class TestRejectedNames:
    @pytest.mark.parametrize("name", ["", " ", "   ", "\t"])
    def test_empty_or_blank(self, name):
        with pytest.raises(InvalidNameError):
            validate_project_name(name)

    def test_too_long(self):
        with pytest.raises(InvalidNameError, match="longer than 255"):
            validate_project_name("a" * (MAX_NAME_LENGTH + 1))

    @pytest.mark.parametrize("char", list('<>:"/\\|?*'))
    def test_forbidden_characters(self, char):
        with pytest.raises(InvalidNameError, match="forbidden character"):
            validate_project_name(f"my{char}app")

    @pytest.mark.parametrize("code", [0, 1, 9, 10, 13, 27, 31])
    def test_control_characters(self, code):
        with pytest.raises(InvalidNameError):
            validate_project_name(f"my{chr(code)}app")

    def test_del_is_not_a_control_character_here(self):
        assert validate_project_name("my\x7fapp") == "my\x7fapp"

    @pytest.mark.parametrize("name", sorted(RESERVED_NAMES))
    def test_reserved_names(self, name):
        with pytest.raises(InvalidNameError, match="reserved"):
            validate_project_name(name)

    @pytest.mark.parametrize("name", ["CON", "Prn", "aUx", "NUL", "COM1", "Lpt9"])
    def test_reserved_names_any_case(self, name):
        with pytest.raises(InvalidNameError):
            validate_project_name(name)


class TestReservedSet:
    def test_contents(self):
        assert len(RESERVED_NAMES) == 22
        assert {"con", "prn", "aux", "nul", "com1", "com9", "lpt1", "lpt9"} <= RESERVED_NAMES
        assert "com0" not in RESERVED_NAMES


class TestErrorDetails:
    def test_message_is_uniform_per_cause(self):
        messages = set()
        for name in ("a<b", "a>b", "a|b"):
            with pytest.raises(InvalidNameError) as exc_info:
                validate_project_name(name)
            messages.add(str(exc_info.value))
        assert len(messages) == 1

    def test_carries_name_and_exit_code(self):
        with pytest.raises(InvalidNameError) as exc_info:
            validate_project_name("aux")
        assert exc_info.value.name == "aux"
        assert exc_info.value.exit_code == 2
