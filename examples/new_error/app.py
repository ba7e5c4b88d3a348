"""New error -- create an error with a stack trace deep in a call chain.

`tracerr.errorf` captures the stack where it is called, so the printed
trace starts inside the innermost recursive call.

Run:
    python app.py
"""

import tracerr


def foo():
    return bar(0)


def bar(i):
    if i >= 2:
        # Create new error with stack trace.
        return tracerr.errorf("i = %d", i)
    return bar(i + 1)


err = foo()

output = tracerr.sprint_source(err)


def main() -> None:
    tracerr.print_source_color(err)


if __name__ == "__main__":
    main()
