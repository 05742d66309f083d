#!/usr/bin/env python3
"""
Test Runner Script for the Data Warehouse client

This script provides a convenient way to run tests by category.

Usage:
    python run_tests.py                    # Run all tests
    python run_tests.py --category client  # Run specific category
    python run_tests.py --quick            # Stop on first failure
    python run_tests.py --verbose          # Verbose output
    python run_tests.py --list             # List available categories
"""

import argparse
import subprocess
import sys
from datetime import datetime
from pathlib import Path

# Test categories mapping
TEST_CATEGORIES = {
    "config": "tests/test_system_config_validation.py",
    "client": "tests/test_client.py",
    "resources": "tests/test_resources.py",
    "health": "tests/test_health.py",
    "models": "tests/test_models.py",
}

CATEGORY_DESCRIPTIONS = {
    "config": "Configuration validation - env vars, defaults, logging setup",
    "client": "Transport - construction, headers, status codes, transport errors",
    "resources": "Article and podcast operations - paths, decoding, error context",
    "health": "Health check endpoint",
    "models": "Records, request payloads and envelopes",
}


def list_categories():
    """Print available test categories."""
    print("\n" + "=" * 60)
    print("AVAILABLE TEST CATEGORIES")
    print("=" * 60)
    for key, desc in CATEGORY_DESCRIPTIONS.items():
        print(f"  {key:12} - {desc}")
    print("=" * 60)


def run_tests(categories=None, verbose=False, quick=False):
    """Run tests with specified options."""
    cmd = [sys.executable, "-m", "pytest"]

    paths = [TEST_CATEGORIES[cat] for cat in categories or [] if cat in TEST_CATEGORIES]
    cmd.extend(paths or ["tests/"])

    cmd.append("-v" if verbose else "--tb=short")
    if quick:
        cmd.extend(["-x", "--ff"])  # Stop on first failure, failed first

    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print("\n" + "=" * 60)
    print("DATA WAREHOUSE CLIENT TEST RUNNER")
    print("=" * 60)
    print(f"Started:    {timestamp}")
    print(f"Categories: {', '.join(categories) if categories else 'ALL'}")
    print("=" * 60 + "\n")

    result = subprocess.run(cmd, cwd=Path(__file__).parent)
    return result.returncode


def main():
    parser = argparse.ArgumentParser(
        description="Run Data Warehouse client tests by category",
    )
    parser.add_argument(
        "--category", "-c",
        type=str,
        help="Test category to run (comma-separated for multiple)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Show verbose output")
    parser.add_argument("--quick", "-q", action="store_true", help="Stop on first failure")
    parser.add_argument("--list", "-l", action="store_true", help="List available test categories")

    args = parser.parse_args()

    if args.list:
        list_categories()
        return 0

    categories = [c.strip() for c in args.category.split(",")] if args.category else None
    return run_tests(categories=categories, verbose=args.verbose, quick=args.quick)


if __name__ == "__main__":
    sys.exit(main())
