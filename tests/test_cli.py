"""
Tests for CLI commands — section commands, run, sections, setup, menu.
"""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from macdevkit.adapters.mock import MockRunner
from macdevkit.core.models.section import Section
from macdevkit.main import cli


@pytest.fixture
def env(tmp_path: Path, monkeypatch) -> Path:
    """Isolated home, no packaged script, no settings file."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("MACDEVKIT_SCRIPT", str(tmp_path / "no-init.sh"))
    monkeypatch.delenv("MACDEVKIT_WORKSPACE", raising=False)
    monkeypatch.delenv("MACDEVKIT_LOG_FILE", raising=False)
    return home


@pytest.fixture
def script_fails(env: Path, tmp_path: Path, monkeypatch) -> MockRunner:
    """A packaged script that exits 1; every other command succeeds."""
    script = tmp_path / "init.sh"
    script.write_text("#!/bin/bash\nexit 1\n")
    monkeypatch.setenv("MACDEVKIT_SCRIPT", str(script))
    runner = MockRunner()
    runner.set_failure([str(script)])
    return runner


class TestCLIGlobal:
    def test_help(self):
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "MacDevKit" in result.output

    def test_version(self):
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_every_section_has_a_command(self):
        result = CliRunner().invoke(cli, ["--help"])
        for section in Section:
            assert section.value in result.output

    def test_bad_config(self, env, tmp_path):
        bad = tmp_path / "bad.yml"
        bad.write_text("devtools: [oops\n")
        result = CliRunner().invoke(cli, ["--config", str(bad), "sections"])
        assert result.exit_code == 1
        assert "Invalid YAML" in result.output


class TestSectionCommands:
    def test_script_tier_success(self, env):
        runner = MockRunner()
        result = CliRunner().invoke(cli, ["xcode"], obj={"runner": runner})
        assert result.exit_code == 0
        assert "Running XCODE Section" in result.output
        assert "[script]" in result.output
        assert runner.call_log[0][1] == "xcode"

    def test_native_fallback_creates_workspace(self, env, script_fails):
        result = CliRunner().invoke(cli, ["workspace"], obj={"runner": script_fails})
        assert result.exit_code == 0
        assert (env / "Workspace").is_dir()
        assert "[native]" in result.output
        assert "Created" in result.output

    def test_failure_exits_one(self, env):
        result = CliRunner().invoke(cli, ["brew"], obj={"runner": MockRunner(default_code=1)})
        assert result.exit_code == 1
        assert "failed" in result.output

    def test_json_output(self, env, script_fails):
        result = CliRunner().invoke(cli, ["-q", "workspace", "--json"], obj={"runner": script_fails})
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["section"] == "workspace"
        assert data["tier"] == "native"
        assert data["status"] == "ok"


class TestRunCommand:
    def test_case_insensitive(self, env):
        runner = MockRunner()
        result = CliRunner().invoke(cli, ["run", "DOCKER"], obj={"runner": runner})
        assert result.exit_code == 0
        assert runner.call_log[0][1] == "docker"

    def test_unknown_section(self, env):
        runner = MockRunner()
        result = CliRunner().invoke(cli, ["run", "bogus"], obj={"runner": runner})
        assert result.exit_code == 1
        assert "Unknown section: 'bogus'" in result.output
        assert runner.call_count == 0

    def test_unknown_section_json(self, env):
        result = CliRunner().invoke(cli, ["-q", "run", "bogus", "--json"], obj={"runner": MockRunner()})
        assert result.exit_code == 1
        assert "Unknown section" in json.loads(result.output)["error"]


class TestSectionsCommand:
    def test_lists_sections(self, env):
        result = CliRunner().invoke(cli, ["sections"], obj={"runner": MockRunner()})
        assert result.exit_code == 0
        assert "Install Homebrew" in result.output
        assert "minimal fallback" in result.output

    def test_json(self, env):
        result = CliRunner().invoke(cli, ["sections", "--json"], obj={"runner": MockRunner()})
        data = json.loads(result.output)
        assert [s["name"] for s in data["sections"]] == [s.value for s in Section]
        assert all(s["native"] for s in data["sections"])
        assert data["script"]["packaged"] is False

    def test_packaged_script(self, env, tmp_path, monkeypatch):
        script = tmp_path / "init.sh"
        script.write_text("#!/bin/bash\n")
        monkeypatch.setenv("MACDEVKIT_SCRIPT", str(script))
        result = CliRunner().invoke(cli, ["sections", "--json"], obj={"runner": MockRunner()})
        data = json.loads(result.output)
        assert data["script"] == {"path": str(script), "packaged": True}


class TestSetupCommand:
    def test_decline_everything(self, env):
        runner = MockRunner()
        answers = "n\n" * len(Section) + "n\n"
        result = CliRunner().invoke(cli, ["setup"], input=answers, obj={"runner": runner})
        assert result.exit_code == 0
        assert "Setup Complete" in result.output
        assert runner.call_count == 0

    def test_runs_confirmed_steps_and_continues_after_failure(self, env, script_fails):
        runner = script_fails
        runner.set_failure(["xcode-select"])
        # yes to xcode (fails) and workspace, no to the rest, no restart
        answers = ["y" if s in (Section.XCODE, Section.WORKSPACE) else "n" for s in Section]
        result = CliRunner().invoke(
            cli, ["setup"], input="\n".join(answers + ["n"]) + "\n", obj={"runner": runner}
        )
        assert result.exit_code == 0
        assert "Install Xcode Command Line Tools: failed" in result.output
        assert (env / "Workspace").is_dir()
        assert "1/2 sections succeeded" in result.output
        assert ["sudo", "shutdown", "-r", "now"] not in runner.call_log

    def test_restart_when_confirmed(self, env):
        runner = MockRunner()
        answers = "n\n" * len(Section) + "y\n"
        result = CliRunner().invoke(cli, ["setup"], input=answers, obj={"runner": runner})
        assert result.exit_code == 0
        assert runner.call_log == [["sudo", "shutdown", "-r", "now"]]


class TestInteractiveMenu:
    def test_exit(self, env):
        runner = MockRunner()
        result = CliRunner().invoke(cli, [], input=f"{len(Section) + 1}\n", obj={"runner": runner})
        assert result.exit_code == 0
        assert "Welcome to MacDevKit" in result.output
        assert "Goodbye!" in result.output
        assert runner.call_count == 0

    def test_pick_section(self, env, script_fails):
        runner = script_fails
        index = list(Section).index(Section.WORKSPACE) + 1
        result = CliRunner().invoke(cli, [], input=f"{index}\n", obj={"runner": runner})
        assert result.exit_code == 0
        assert (env / "Workspace").is_dir()

    def test_out_of_range_choice_is_reprompted(self, env):
        result = CliRunner().invoke(
            cli, [], input=f"99\n{len(Section) + 1}\n", obj={"runner": MockRunner()}
        )
        assert result.exit_code == 0
        assert "Goodbye!" in result.output
