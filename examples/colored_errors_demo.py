"""Demo of colored trace output.

Shows a traced error passed up through several layers, printed with and
without colors, plus the raw frames.
"""

import tracerr


def load_config(path):
    try:
        with open(path) as f:
            return f.read()
    except OSError as exc:
        # The first wrap captures the stack here.
        return tracerr.wrap(exc)


def start_service():
    err = load_config("/etc/demo/missing.toml")
    # Wrapping again is a no-op, the trace still starts in load_config.
    return tracerr.wrap(err)


err = start_service()

print("=" * 80)
print("COLORED TRACE DEMO")
print("=" * 80)
print()
print("Notice the colors:")
print("  • Frame headers: Bold")
print("  • Traced lines: Red")
print("  • Context line numbers: Dimmed")
print("  • Missing source warnings: Yellow")
print()
print("=" * 80)
print()

tracerr.print_source_color(err, 2, 1)

print("=" * 80)
print("Same trace, plain")
print("=" * 80)

tracerr.print_source(err, 2, 1)

print("=" * 80)
print("Frames only")
print("=" * 80)

tracerr.print_error(err)
