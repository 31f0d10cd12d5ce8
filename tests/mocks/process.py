"""
Fake process runner for testing.

FakeProcessRunner records every command and imitates ``carthage build`` by
writing a framework into ``Carthage/Build/<platform>`` under the working
directory, the way the real tool does.
"""

from pathlib import Path
from typing import Dict, List, Optional, Sequence

from carthagecache.core.process import CommandResult


class FakeProcessRunner:
    """Records commands and simulates carthage."""

    def __init__(
        self,
        failing_builds: Sequence[str] = (),
        responses: Optional[Dict[str, CommandResult]] = None,
    ):
        """
        Initialize the fake runner.

        Args:
            failing_builds: Library names whose build exits with status 1
            responses: Canned results keyed by the space-joined command
        """
        self.failing_builds = set(failing_builds)
        self.responses = responses or {}
        self.calls: List[List[str]] = []
        self.cwds: List[Optional[Path]] = []

    def run(self, args, cwd=None) -> CommandResult:
        argv = [str(a) for a in args if a]
        self.calls.append(argv)
        self.cwds.append(Path(cwd) if cwd is not None else None)

        canned = self.responses.get(" ".join(argv))
        if canned is not None:
            return canned

        if argv[:2] == ["carthage", "build"]:
            return self._build(argv, cwd)
        return CommandResult(args=argv)

    def _build(self, argv: List[str], cwd) -> CommandResult:
        name = argv[-1]
        platform = argv[argv.index("--platform") + 1]
        if name in self.failing_builds:
            return CommandResult(
                args=argv, error=[f"Failed to build {name}"], exit_code=1
            )

        framework = Path(cwd) / "Carthage" / "Build" / platform / f"{name}.framework"
        framework.mkdir(parents=True, exist_ok=True)
        (framework / name).write_text(f"{name} binary")
        return CommandResult(args=argv, output=[f'*** Building scheme "{name}"'])

    @property
    def build_calls(self) -> List[List[str]]:
        return [call for call in self.calls if call[:2] == ["carthage", "build"]]

    @property
    def built_names(self) -> List[str]:
        return [call[-1] for call in self.build_calls]
