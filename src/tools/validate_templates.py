import argparse
import sys
from pathlib import Path

from dictation.template import blank_segments, parse_template
from dictation.validation import validate_template

def validate(paths: list[str]) -> int:
    errors = 0
    for path in paths:
        source = Path(path).read_text(encoding="utf-8")
        issues = validate_template(source)
        for issue in issues:
            if issue.severity == "error":
                errors += 1
            where = f" at {issue.position}" if issue.position is not None else ""
            print(f"{issue.severity.upper()}: {path}{where}: {issue.message}")
        blanks = blank_segments(parse_template(source))
        print(f"{path}: blanks={len(blanks)} issues={len(issues)}")

    if errors:
        return 1
    print("OK")
    return 0

def main(argv: list[str]) -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("paths", nargs="+", help="dictation text files with [word] blanks")
    args = parser.parse_args(argv)
    return validate(args.paths)

if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
