"""Save log -- keep the rendered trace instead of printing it.

`tracerr.sprint_source` returns the same text `print_source` would print,
ready to be written to a log file.

Run:
    python app.py
"""

import tempfile
from pathlib import Path

import tracerr

LOG_PATH = Path(tempfile.gettempdir()) / "tracerr.log"


def read():
    return read_non_existent()


def read_non_existent():
    try:
        Path("/tmp/non_existent_file").read_text()
    except OSError as exc:
        return tracerr.wrap(exc)
    return None


err = read()

# Save output to variable.
text = tracerr.sprint_source(err)
LOG_PATH.write_text(text)


def main() -> None:
    print(f"Trace saved to {LOG_PATH}")


if __name__ == "__main__":
    main()
