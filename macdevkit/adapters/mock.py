"""
Mock runner — universal test double for process execution.

Records every argv it receives and answers from a table of canned
outcomes, so handler and dispatcher logic can be exercised without
touching package managers or OS preferences.
"""

from __future__ import annotations

from macdevkit.adapters.base import CommandRunner
from macdevkit.core.errors import CommandSpawnError
from macdevkit.core.models.command import ExitOutcome


class MockRunner(CommandRunner):
    """Universal mock runner for testing.

    By default every command exits 0 with empty output. Responses are
    matched on the longest registered argv prefix, so
    ``set_failure(["brew", "install"])`` fails every brew install while
    ``set_failure(["brew", "install", "jq"])`` fails only jq.

    Args:
        default_code: Exit code for commands with no canned response.
        missing: Commands that ``which`` should report as absent.
    """

    def __init__(self, default_code: int = 0, missing: list[str] | None = None):
        self._default_code = default_code
        self._responses: dict[tuple[str, ...], ExitOutcome] = {}
        self._spawn_errors: set[tuple[str, ...]] = set()
        self._call_log: list[list[str]] = []
        for command in missing or []:
            self.set_missing(command)

    @property
    def name(self) -> str:
        return "mock"

    @property
    def call_log(self) -> list[list[str]]:
        """Every argv this mock has received, in order."""
        return self._call_log

    @property
    def call_count(self) -> int:
        return len(self._call_log)

    def calls_starting_with(self, *prefix: str) -> list[list[str]]:
        """Recorded calls whose argv begins with ``prefix``."""
        return [argv for argv in self._call_log if tuple(argv[: len(prefix)]) == prefix]

    def set_response(
        self,
        argv: list[str],
        code: int = 0,
        stdout: str = "",
        stderr: str = "",
    ) -> None:
        """Set a canned outcome for commands starting with ``argv``."""
        self._responses[tuple(argv)] = ExitOutcome(code=code, stdout=stdout, stderr=stderr)

    def set_failure(self, argv: list[str], code: int = 1, stderr: str = "Mock failure") -> None:
        """Configure commands starting with ``argv`` to exit non-zero."""
        self.set_response(argv, code=code, stderr=stderr)

    def set_missing(self, command: str) -> None:
        """Make ``which <command>`` report the command as absent."""
        self.set_failure(["which", command], stderr="")

    def set_spawn_error(self, argv: list[str]) -> None:
        """Make commands starting with ``argv`` fail to start."""
        self._spawn_errors.add(tuple(argv))

    def run(self, argv: list[str], *, capture: bool = True) -> ExitOutcome:
        self._call_log.append(list(argv))

        for size in range(len(argv), 0, -1):
            prefix = tuple(argv[:size])
            if prefix in self._spawn_errors:
                raise CommandSpawnError(argv, "[mock] No such file or directory")
            if prefix in self._responses:
                return self._responses[prefix].model_copy()

        return ExitOutcome(code=self._default_code)

    def reset(self) -> None:
        """Clear call log and canned responses."""
        self._call_log.clear()
        self._responses.clear()
        self._spawn_errors.clear()
