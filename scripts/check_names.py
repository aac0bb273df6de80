# Run using uv run python -m scripts.check_names names.txt
#
# Audits a file of exercise names, one per line. Blank lines are skipped.
# Exits with status 1 when any name is rejected.

import argparse
import sys
from pathlib import Path

from exercise_naming.models.validation import Invalid, ValidationResult
from exercise_naming.naming import suggest_correction, validate_many
from exercise_naming.utils.log import configure_logging


def read_names(path: Path) -> list[str]:
    lines = path.read_text(encoding="utf-8").splitlines()
    return [line for line in lines if line.strip()]


def describe(name: str, result: ValidationResult) -> str:
    if not isinstance(result, Invalid):
        return f"OK       {name}"

    line = f"INVALID  {name}: {result.reason}"
    if result.suggestion is not None:
        line += f" (try {result.suggestion!r})"
    return line


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Audit a file of exercise names")
    parser.add_argument("path", type=Path, help="file with one exercise name per line")
    parser.add_argument(
        "--suggest",
        action="store_true",
        help="also print the corrected form of every name",
    )
    args = parser.parse_args(argv)

    names = read_names(args.path)
    results = validate_many(names)

    invalid = 0
    for name, result in results.items():
        print(describe(name, result))
        if args.suggest:
            print(f"         -> {suggest_correction(name)}")
        if isinstance(result, Invalid):
            invalid += 1

    print(f"Checked {len(results)} names, {invalid} invalid")
    return 1 if invalid else 0


if __name__ == "__main__":
    configure_logging()
    sys.exit(main())
