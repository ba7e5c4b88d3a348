"""Nil error -- wrapping None gives None.

Run:
    python app.py
"""

import tracerr


def nil_error():
    return tracerr.wrap(None)


err = nil_error()

output = tracerr.sprint_source_color(err) if err is not None else "no error"


def main() -> None:
    print(output)


if __name__ == "__main__":
    main()
