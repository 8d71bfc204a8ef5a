#!/usr/bin/env python3
"""
regparse Fixture Runner

Checks a corpus of patterns against their expected outcome.

Each non-blank, non-comment line of the fixtures file holds an expectation
and a pattern separated by a single tab:

    ok<TAB>a(b|c)*
    error<TAB>[z-a]

Usage:
    python run_fixtures.py [options]

Examples:
    python run_fixtures.py
    python run_fixtures.py --verbose --fail-fast
    python run_fixtures.py --fixtures-file ./more_patterns.txt
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterator

from regparse import PatternCompiler


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    datefmt="%H:%M:%S"
)
logger = logging.getLogger(__name__)


class Expectation(Enum):
    """Expected outcome of parsing a fixture pattern."""
    OK = "ok"
    ERROR = "error"


@dataclass(frozen=True)
class Fixture:
    """One pattern from the fixtures file."""
    line_number: int
    expectation: Expectation
    pattern: str


@dataclass(frozen=True)
class FixtureResult:
    """Represents the result of checking a single fixture."""
    fixture: Fixture
    passed: bool
    error_message: str = ""

    def __str__(self) -> str:
        status = "PASS" if self.passed else "FAIL"
        return f"[{status}] line {self.fixture.line_number}: {self.fixture.pattern!r}"


@dataclass
class FixtureSuite:
    """Manages a collection of fixture results."""
    results: list[FixtureResult] = field(default_factory=list)

    @property
    def passed_count(self) -> int:
        """Return the number of passed fixtures."""
        return sum(1 for r in self.results if r.passed)

    @property
    def failed_count(self) -> int:
        """Return the number of failed fixtures."""
        return sum(1 for r in self.results if not r.passed)

    def add_result(self, result: FixtureResult) -> None:
        """Add a fixture result to the suite."""
        self.results.append(result)

    def print_summary(self) -> None:
        """Print a summary of all fixture results."""
        print("\n" + "=" * 50)
        print(f"Fixture Summary: {self.passed_count} passed, {self.failed_count} failed")
        print("=" * 50)

        if self.failed_count > 0:
            print("\nFailed fixtures:")
            for result in self.results:
                if not result.passed:
                    print(f"  - {result}")


def load_fixtures(fixtures_file: Path) -> Iterator[Fixture]:
    """
    Read fixtures from a file.

    Args:
        fixtures_file: Path to the fixtures file

    Yields:
        Fixture objects in file order

    Raises:
        FileNotFoundError: If the fixtures file does not exist
        ValueError: If a line is malformed
    """
    text = fixtures_file.read_text(encoding="utf-8")
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip() or line.startswith("#"):
            continue
        expectation, sep, pattern = line.partition("\t")
        if not sep:
            raise ValueError(f"Line {line_number}: expected '<ok|error><TAB><pattern>'")
        try:
            kind = Expectation(expectation.strip())
        except ValueError:
            raise ValueError(f"Line {line_number}: unknown expectation {expectation!r}") from None
        yield Fixture(line_number=line_number, expectation=kind, pattern=pattern)


class FixtureRunner:
    """
    Runs every fixture through the parser and compares outcomes.
    """

    def __init__(self, fixtures_file: Path, verbose: bool = False, fail_fast: bool = False) -> None:
        """
        Initialize the fixture runner.

        Args:
            fixtures_file: File containing the fixtures
            verbose: Enable verbose output
            fail_fast: Stop on first failure
        """
        self.fixtures_file = fixtures_file.resolve()
        self.verbose = verbose
        self.fail_fast = fail_fast
        self.compiler = PatternCompiler()
        self.suite = FixtureSuite()

        if self.verbose:
            logger.setLevel(logging.DEBUG)

    def run_single(self, fixture: Fixture) -> FixtureResult:
        """
        Check a single fixture.

        Args:
            fixture: The fixture to check

        Returns:
            FixtureResult containing the outcome
        """
        result = self.compiler.check(fixture.pattern)
        logger.debug(f"{fixture.pattern!r}: success={result.success} error={result.error_message}")

        if fixture.expectation is Expectation.OK and not result.success:
            return FixtureResult(fixture, passed=False,
                                 error_message=f"Unexpected error: {result.error_message}")
        if fixture.expectation is Expectation.ERROR and result.success:
            return FixtureResult(fixture, passed=False, error_message="Pattern was accepted")
        return FixtureResult(fixture, passed=True)

    def run_all(self) -> int:
        """
        Run all fixtures.

        Returns:
            Exit code (0 for success, 1 for failure)
        """
        print("=" * 50)
        print("regparse Fixture Runner")
        print("=" * 50)
        print(f"Fixtures file: {self.fixtures_file}")

        try:
            fixtures = list(load_fixtures(self.fixtures_file))
        except (FileNotFoundError, ValueError) as e:
            logger.error(f"Loading fixtures failed: {e}")
            return 1

        print(f"\nFound {len(fixtures)} fixture(s)")

        for fixture in fixtures:
            result = self.run_single(fixture)
            self.suite.add_result(result)
            if self.verbose or not result.passed:
                print(result)
                if result.error_message:
                    print(f"    {result.error_message}")

            if not result.passed and self.fail_fast:
                logger.info("Fail-fast enabled, stopping after first failure")
                break

        self.suite.print_summary()

        return 0 if self.suite.failed_count == 0 else 1


def parse_arguments() -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog="run_fixtures.py",
        description="Check regparse against a corpus of patterns",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_fixtures.py
  python run_fixtures.py --verbose --fail-fast
  python run_fixtures.py --fixtures-file ./more_patterns.txt
        """
    )

    parser.add_argument(
        "--fixtures-file",
        type=Path,
        default=None,
        help="Fixtures file (default: ../tests/fixtures/patterns.txt)"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose output"
    )

    parser.add_argument(
        "--fail-fast", "-x",
        action="store_true",
        help="Stop on first failure"
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 0.1.0"
    )

    return parser.parse_args()


def main() -> int:
    """
    Main entry point for the fixture runner.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    args = parse_arguments()

    if args.fixtures_file:
        fixtures_file = args.fixtures_file
    else:
        repo_root = Path(__file__).parent.resolve().parent
        fixtures_file = repo_root / "tests" / "fixtures" / "patterns.txt"

    runner = FixtureRunner(
        fixtures_file=fixtures_file,
        verbose=args.verbose,
        fail_fast=args.fail_fast
    )

    return runner.run_all()


if __name__ == "__main__":
    sys.exit(main())
