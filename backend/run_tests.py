#!/usr/bin/env python3
"""
Test runner for the Unit Master backend.

Usage:
    python run_tests.py [options]

Options:
    --verbose, -v    : Show verbose output
    --specific TEST  : Run tests matching a keyword expression
    --help, -h       : Show this help message
"""

import sys
import os
import subprocess
import argparse
import time
from pathlib import Path
from typing import List, Dict

project_root = Path(__file__).parent

TEST_FILES = [
    "tests/test_exceptions.py",
    "tests/test_file_helper.py",
    "tests/test_encryption_helper.py",
    "tests/test_enums_constants.py",
    "tests/test_settings.py",
    "tests/test_unit_service.py",
    "tests/test_middleware.py",
    "tests/test_master_router.py"
]

PYTEST_BASE_ARGS = [
    "--tb=short",
    "--strict-markers",
    "--no-header",
    "-ra",
]


def print_section(title: str, char: str = "-", width: int = 60):
    """Print a section header."""
    print(f"\n{char * width}")
    print(f" {title}")
    print(f"{char * width}")


def check_dependencies() -> bool:
    """Check if required test dependencies are importable."""
    print_section("Checking Dependencies")

    required = {
        "pytest": "pytest",
        "pytest-asyncio": "pytest_asyncio",
        "fastapi": "fastapi",
        "httpx": "httpx",
        "cryptography": "cryptography",
        "aiofile": "aiofile",
        "anyio": "anyio",
    }
    missing = []
    for package, import_name in required.items():
        try:
            __import__(import_name)
            print(f"OK  {package}")
        except ImportError:
            print(f"MISSING  {package}")
            missing.append(package)

    if missing:
        print("Install them with: pip install -e '.[test]'")
        return False
    return True


def setup_environment():
    """Set up test environment variables."""
    os.environ["ENVIRONMENT"] = "testing"
    os.environ["LOG_LEVEL"] = "WARNING"
    os.environ["LOG_FILE"] = "false"
    os.environ["PYTHONPATH"] = str(project_root)


def run_pytest(args: List[str]) -> Dict:
    """Run pytest with given arguments and return results."""
    cmd = [sys.executable, "-m", "pytest"] + args + TEST_FILES
    print(f"Running: {' '.join(cmd)}")

    start_time = time.time()
    result = subprocess.run(cmd, cwd=project_root)
    return {
        "returncode": result.returncode,
        "duration": time.time() - start_time,
        "success": result.returncode == 0
    }


def main():
    """Main test runner function."""
    parser = argparse.ArgumentParser(
        description="Run Unit Master tests",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Show verbose output")
    parser.add_argument("--specific", type=str, help="Run tests matching a keyword expression")
    args = parser.parse_args()

    if not check_dependencies():
        sys.exit(1)

    setup_environment()

    pytest_args = PYTEST_BASE_ARGS.copy()
    if args.verbose:
        pytest_args.append("-v")
    if args.specific:
        pytest_args += ["-k", args.specific]

    results = run_pytest(pytest_args)
    print_section("Summary")
    print(f"Status: {'PASSED' if results['success'] else 'FAILED'}")
    print(f"Execution Time: {results['duration']:.2f} seconds")
    sys.exit(0 if results["success"] else 1)


if __name__ == "__main__":
    main()
