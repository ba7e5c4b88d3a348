"""Stack trace -- work with the raw frames instead of rendered text.

Run:
    python app.py
"""

import tracerr


def read():
    return read_non_existent()


def read_non_existent():
    try:
        open("/tmp/non_existent_file")
    except OSError as exc:
        return tracerr.wrap(exc)
    return None


err = read()

# Dump raw stack trace.
frames = tracerr.stack_trace(err)

output = "\n".join(repr(frame) for frame in frames)


def main() -> None:
    print(output)


if __name__ == "__main__":
    main()
