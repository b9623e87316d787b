"""
Tests for domain models — Section, SectionResult, ExitOutcome.
"""

import json

import pytest
from pydantic import ValidationError

from macdevkit.core.errors import UnknownSectionError
from macdevkit.core.models import ExitOutcome, Section, SectionResult


class TestSection:
    def test_thirteen_sections(self):
        assert [s.value for s in Section] == [
            "xcode",
            "brew",
            "git",
            "ssh",
            "vscode",
            "node",
            "iterm",
            "zsh",
            "docker",
            "devtools",
            "apps",
            "macos",
            "workspace",
        ]

    def test_parse_exact(self):
        assert Section.parse("brew") is Section.BREW

    @pytest.mark.parametrize("name", ["BREW", "Brew", "bReW"])
    def test_parse_is_case_insensitive(self, name):
        assert Section.parse(name) is Section.BREW

    @pytest.mark.parametrize("name", ["bogus", "bre", "brews", "", "dev-tools"])
    def test_parse_rejects_unknown(self, name):
        with pytest.raises(UnknownSectionError) as exc:
            Section.parse(name)
        assert exc.value.name == name

    def test_unknown_error_names_the_string(self):
        with pytest.raises(UnknownSectionError, match="'bogus'"):
            Section.parse("bogus")

    def test_unknown_error_is_value_error(self):
        with pytest.raises(ValueError):
            Section.parse("nope")

    def test_every_section_has_label(self):
        for section in Section:
            assert section.label
        assert Section.BREW.label == "Install Homebrew"


class TestSectionResult:
    def test_success(self):
        r = SectionResult.success(Section.GIT, tier="script")
        assert r.ok
        assert not r.failed
        assert r.error is None
        assert r.error_kind is None

    def test_failure(self):
        r = SectionResult.failure(Section.GIT, tier="native", error="boom")
        assert r.failed
        assert not r.ok
        assert r.error == "boom"
        assert r.error_kind == "handler_action_failure"

    def test_script_failures_are_not_a_result_kind(self):
        with pytest.raises(ValidationError):
            SectionResult.failure(
                Section.GIT,
                tier="script",
                error="boom",
                error_kind="script_execution_failure",
            )

    def test_to_dict_is_json_ready(self):
        r = SectionResult.success(Section.DOCKER, tier="native", messages=["hi"])
        d = r.to_dict()
        assert d["section"] == "docker"
        assert d["status"] == "ok"
        assert d["tier"] == "native"
        assert d["messages"] == ["hi"]
        json.dumps(d)


class TestExitOutcome:
    def test_zero_is_ok(self):
        assert ExitOutcome(code=0).ok

    def test_nonzero_is_not_ok(self):
        assert not ExitOutcome(code=1).ok
        assert not ExitOutcome(code=127, stderr="not found").ok
