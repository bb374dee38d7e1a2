# main.py
import sys

from stretch.notifier import NotificationError
from stretch.reminder import run_reminder
from stretch.timer import UsageError, format_hhmmss, parse_duration

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_USAGE = 1
EXIT_INTERRUPTED = 130

USAGE = "usage: stretch-timer <seconds>"


def usage_error(problem: str) -> int:
    # one line on stderr, hint included
    print(f"Error: {problem} ({USAGE})", file=sys.stderr)
    return EXIT_USAGE


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)

    if len(args) != 1:
        return usage_error("missing duration" if not args else f"expected 1 argument, got {len(args)}")

    try:
        seconds = parse_duration(args[0])
    except UsageError as e:
        return usage_error(str(e))

    print(f"Stretch reminder set for {format_hhmmss(seconds)}")

    try:
        run_reminder(seconds)
    except KeyboardInterrupt:
        print("Cancelled.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except NotificationError as e:
        print(f"[Notifier Error] {e}", file=sys.stderr)
        return EXIT_FAILURE

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
