"""Run the word-case converter from the repository root.

Example:
    uv run python main.py --style dot "API_response-data"

"""

from src.word_case_cli import main

if __name__ == "__main__":
    raise SystemExit(main())
