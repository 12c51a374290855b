#!/usr/bin/env python3
"""
Run all CI checks locally before pushing.

Each check's output is written to .ci-logs/<name>.log and echoed to the console.
"""

import os
import subprocess
import sys
import time
from pathlib import Path

# Colors for output
RED = '\033[0;31m'
GREEN = '\033[0;32m'
YELLOW = '\033[1;33m'
BLUE = '\033[0;34m'
NC = '\033[0m'  # No Color

PACKAGE = "logalerts/"
PY = sys.executable

# (section, check name, commands)
CHECKS: list[tuple[str, str, list[list[str]]]] = [
    ("Tests", "pytest", [[PY, "-m", "pytest", "-v", "--tb=short"]]),
    ("Tests", "mypy", [[PY, "-m", "mypy", PACKAGE, "--ignore-missing-imports"]]),
    ("Lint", "ruff", [[PY, "-m", "ruff", "check", PACKAGE, "tests/"]]),
    ("Lint", "pylint", [[
        PY, "-m", "pylint", PACKAGE,
        "--disable=C0114,C0115,C0116,R0903,W0511,W0613,W0718,W0212",
        "--max-line-length=100",
        "--fail-under=9.0",
    ]]),
    ("Lint", "radon", [
        [PY, "-m", "radon", "cc", PACKAGE, "-a", "-nb"],
        [PY, "-m", "radon", "mi", PACKAGE, "-nb"],
    ]),
    ("Security", "bandit", [[PY, "-m", "bandit", "-r", PACKAGE, "--severity-level", "medium"]]),
]


def print_header(text: str) -> None:
    """Print a section header."""
    print(f"{BLUE}{'=' * 40}{NC}")
    print(f"{BLUE}{text}{NC}")
    print(f"{BLUE}{'=' * 40}{NC}")


def run_check(name: str, commands: list[list[str]], log_file: Path) -> bool:
    """
    Run the commands of one check, capturing output to log_file.

    Returns True if every command exited with status 0.
    """
    print(f"\n{YELLOW}▶ {name}{NC}")
    success = True
    with open(log_file, 'w', encoding='utf-8') as f:
        for cmd in commands:
            try:
                result = subprocess.run(
                    cmd,
                    stdout=subprocess.PIPE,
                    stderr=subprocess.STDOUT,
                    text=True,
                    check=False
                )
            except OSError as e:
                print(f"{RED}✗ {name} failed: {e}{NC}")
                return False
            f.write(result.stdout)
            print(result.stdout, end='')
            if result.returncode != 0:
                success = False

    if success:
        print(f"{GREEN}✓ {name} passed{NC}")
    else:
        print(f"{RED}✗ {name} failed{NC}")
    return success


def pip_audit_command(project_root: Path) -> list[str]:
    """Build the pip-audit command, honouring .pip-audit-ignores.txt."""
    cmd = [PY, "-m", "pip_audit", "--skip-editable"]
    ignore_file = project_root / ".pip-audit-ignores.txt"
    if ignore_file.exists():
        for line in ignore_file.read_text(encoding='utf-8').splitlines():
            line = line.strip()
            if line and not line.startswith('#'):
                cmd.extend(["--ignore-vuln", line])
    return cmd


def main() -> int:
    """Run all CI checks."""
    project_root = Path(__file__).parent.parent
    logs_dir = project_root / ".ci-logs"
    logs_dir.mkdir(exist_ok=True)
    os.chdir(project_root)

    start_time = time.time()
    print_header("Log Alerts Local CI Checks")

    checks = CHECKS + [("Security", "pip-audit", [pip_audit_command(project_root)])]

    passed: list[str] = []
    failed: list[str] = []
    section = None
    for check_section, name, commands in checks:
        if check_section != section:
            section = check_section
            print()
            print_header(section)
        if run_check(name, commands, logs_dir / f"{name}.log"):
            passed.append(name)
        else:
            failed.append(name)

    duration = int(time.time() - start_time)

    print()
    print_header("Summary")
    print(f"\n{GREEN}Passed Checks ({len(passed)}):{NC}")
    for name in passed:
        print(f"  {GREEN}✓{NC} {name}")

    if failed:
        print(f"\n{RED}Failed Checks ({len(failed)}):{NC}")
        for name in failed:
            print(f"  {RED}✗{NC} {name}")

    print(f"\n{BLUE}Duration:{NC} {duration}s")

    if failed:
        print(f"\nCheck the log files in {logs_dir}/ for details.")
        return 1

    print(f"\n{GREEN}All checks passed.{NC}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
