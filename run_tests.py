#!/usr/bin/env python3
"""
Test runner script for the Villa Claudia document portal.
"""
import sys
import subprocess
import argparse


def run_tests(test_type="all", coverage=True, verbose=False):
    """
    Run the test suite.

    Args:
        test_type: Type of tests to run ('all', 'unit', 'api')
        coverage: Whether to run with coverage
        verbose: Whether to run with verbose output
    """
    cmd = [sys.executable, "-m", "pytest"]

    if test_type != "all":
        cmd.extend(["-m", test_type])

    if coverage:
        cmd.extend(["--cov=villa_docs", "--cov=config", "--cov-report=term-missing"])

    if verbose:
        cmd.append("-v")

    cmd.append("tests/")

    print(f"Running tests: {' '.join(cmd)}")
    print("=" * 60)

    try:
        subprocess.run(cmd, check=True)
        print("\n" + "=" * 60)
        print("✅ All tests passed!")
        return 0
    except subprocess.CalledProcessError as e:
        print("\n" + "=" * 60)
        print(f"❌ Tests failed with exit code {e.returncode}")
        return e.returncode


def run_linting():
    """Run flake8 over the package and tests."""
    print("Running code linting...")
    print("=" * 60)
    try:
        subprocess.run(["flake8", "--max-line-length=130", "villa_docs/", "config/", "tests/"], check=True)
        print("✅ Flake8 passed!")
        return 0
    except subprocess.CalledProcessError:
        print("❌ Flake8 failed!")
        return 1


def main():
    parser = argparse.ArgumentParser(description="Test runner for the Villa Claudia document portal")
    parser.add_argument("--type", choices=["all", "unit", "api"], default="all", help="Type of tests to run")
    parser.add_argument("--no-coverage", action="store_true", help="Run tests without coverage")
    parser.add_argument("--verbose", "-v", action="store_true", help="Run with verbose output")
    parser.add_argument("--lint", action="store_true", help="Run flake8 before the tests")

    args = parser.parse_args()

    if args.lint:
        lint_result = run_linting()
        if lint_result != 0:
            print("\nLinting failed. Fix the issues before running tests.")
            return lint_result
        print()

    return run_tests(
        test_type=args.type,
        coverage=not args.no_coverage,
        verbose=args.verbose
    )


if __name__ == "__main__":
    sys.exit(main())
