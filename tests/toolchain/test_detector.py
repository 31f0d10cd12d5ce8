"""Tests for Xcode and Swift version detection."""

from carthagecache.core.process import CommandResult
from carthagecache.toolchain.detector import (
    detect_swift_version,
    detect_xcode_version,
    parse_version_banner,
)

from tests.mocks import FakeProcessRunner


class TestParseVersionBanner:
    def test_llvm_banner(self):
        line = "Apple LLVM version 8.0.0 (clang-800.0.38)"
        assert parse_version_banner(line) == "8.0.0"

    def test_clang_banner(self):
        line = "Apple clang version 15.0.0 (clang-1500.0.40.1)"
        assert parse_version_banner(line) == "15.0.0"

    def test_fourth_token_fallback(self):
        assert parse_version_banner("a b c 1.2 d") == "1.2"

    def test_empty(self):
        assert parse_version_banner(None) == ""
        assert parse_version_banner("") == ""
        assert parse_version_banner("too short") == ""


class TestDetectXcodeVersion:
    def test_reads_stderr_banner(self):
        runner = FakeProcessRunner(
            responses={
                "llvm-gcc -v": CommandResult(
                    args=[],
                    error=[
                        "Apple LLVM version 8.0.0 (clang-800.0.38)",
                        "Target: x86_64-apple-darwin15.6.0",
                    ],
                )
            }
        )
        assert detect_xcode_version(runner) == "8.0.0"

    def test_missing_tool(self):
        runner = FakeProcessRunner(
            responses={
                "llvm-gcc -v": CommandResult(
                    args=[],
                    error=["env: 'llvm-gcc': No such file or directory"],
                    exit_code=127,
                )
            }
        )
        assert detect_xcode_version(runner) == ""


class TestDetectSwiftVersion:
    def test_classic_banner(self):
        runner = FakeProcessRunner(
            responses={
                "xcrun swift -version": CommandResult(
                    args=[], output=["Apple Swift version 3.0 (swiftlang-800.0.46.2)"]
                )
            }
        )
        assert detect_swift_version(runner) == "3.0"

    def test_driver_prefixed_banner(self):
        runner = FakeProcessRunner(
            responses={
                "xcrun swift -version": CommandResult(
                    args=[],
                    error=[
                        "swift-driver version: 1.87.1 Apple Swift version 5.9 (swiftlang-5.9.0.128.108)"
                    ],
                )
            }
        )
        assert detect_swift_version(runner) == "5.9"

    def test_failure(self):
        runner = FakeProcessRunner(
            responses={"xcrun swift -version": CommandResult(args=[], exit_code=1)}
        )
        assert detect_swift_version(runner) == ""
