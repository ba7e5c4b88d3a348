"""Existing error -- add a stack trace to an exception raised elsewhere.

`tracerr.wrap` attaches the stack at the point of wrapping. Wrapping is
safe for None too, so the helper can wrap unconditionally.

Run:
    python app.py
"""

import tracerr

MISSING_PATH = "/tmp/non_existent_file"


def read():
    return read_non_existent()


def read_non_existent():
    try:
        with open(MISSING_PATH) as f:
            f.read()
    except OSError as exc:
        # Add stack trace to existing error.
        return tracerr.wrap(exc)
    return tracerr.wrap(None)


err = read()

output = tracerr.sprint_source(err, 1)


def main() -> None:
    if err is not None:
        tracerr.print_source_color(err)


if __name__ == "__main__":
    main()
