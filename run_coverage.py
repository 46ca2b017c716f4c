#!/usr/bin/env python3
"""
Coverage test runner for the minesweeper package
Runs the test suite with coverage and writes an HTML report
"""

import subprocess
import sys
import webbrowser
from pathlib import Path


def run_coverage(open_report: bool = False) -> bool:
    """Run tests with coverage and generate HTML report"""
    cmd = [
        sys.executable, "-m", "pytest",
        "tests/",
        "--cov=minesweeper",
        "--cov-report=term-missing",
        "--cov-report=html:htmlcov",
        "-v"
    ]

    try:
        result = subprocess.run(cmd, check=False)
    except FileNotFoundError:
        print("Error: Python or pytest not found")
        return False

    if result.returncode == 0:
        print("\nAll tests passed!")
    else:
        print(f"\nSome tests failed (exit code: {result.returncode})")

    html_report = Path("htmlcov/index.html")
    if html_report.exists():
        print(f"\nCoverage report generated: {html_report.absolute()}")
        if open_report:
            webbrowser.open(html_report.absolute().as_uri())

    return result.returncode == 0


if __name__ == "__main__":
    success = run_coverage(open_report="--open" in sys.argv[1:])
    sys.exit(0 if success else 1)
