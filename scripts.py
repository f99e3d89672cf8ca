"""Development task runners: ``python scripts.py <task>``."""

import subprocess
import sys


def run_tests():
    subprocess.run(["pytest"], check=True)


def run_cli_tests():
    subprocess.run(["pytest", "--run-cli-tests", "tests/integration"], check=True)


def run_lint():
    subprocess.run(["flake8", "--max-line-length", "120", "src", "tests"], check=True)


def run_typecheck():
    subprocess.run(["mypy", "src"], check=True)


def run_format():
    subprocess.run(["black", "src", "tests", "scripts.py"], check=True)


def run_coverage():
    subprocess.run(["pytest", "--cov=filemapper", "--cov-report=term-missing", "--cov-report=xml"], check=True)


def run_all():
    run_format()
    run_lint()
    run_typecheck()
    run_coverage()


if __name__ == "__main__":
    globals()[sys.argv[1]]()
