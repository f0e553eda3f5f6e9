"""Development script to run checks (formatting, linting, tests) and a smoke run."""

import argparse
import subprocess
import sys

CI_GATE = ["./scripts/ci-gate.sh"]
SMOKE_STYLES = ("camel", "dot", "kebab")


def run_command(command: list[str], step_name: str) -> None:
    """Run a command as one step, exiting with status 1 if it fails."""
    print(f"\n--- Running Step: {step_name} ---")
    print(f"$ {' '.join(command)}")
    try:
        subprocess.run(command, check=True)
    except subprocess.CalledProcessError:
        print(f"\n❌ Failed: {step_name}")
        sys.exit(1)


def main() -> None:
    """Run the CI gate and, outside CI, auto-fixes and a sample conversion."""
    parser = argparse.ArgumentParser(
        description="Run development checks and a sample conversion."
    )
    parser.add_argument(
        "--ci",
        action="store_true",
        help="Run the CI gate only, skipping auto-fixes and the smoke run",
    )
    args = parser.parse_args()

    if args.ci:
        run_command(CI_GATE, "CI Gate Checks")
        print("\n✅ CI checks passed successfully. Skipping the smoke run.")
        return

    run_command(["uv", "run", "ruff", "format"], "Ruff Formatting")
    run_command(["uv", "run", "ruff", "check", "--fix"], "Ruff Linting & Fixes")
    run_command(CI_GATE, "CI Gate Checks")

    for style in SMOKE_STYLES:
        run_command(
            ["uv", "run", "python", "main.py", "--style", style, "user-API-key"],
            f"Smoke Run ({style})",
        )

    print("\n✅ All development checks and smoke runs passed successfully.")


if __name__ == "__main__":
    main()
