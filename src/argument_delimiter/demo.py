# src/argument_delimiter/demo.py
import argparse
import json
import sys


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="argdelim-demo",
        description="Split text into arguments using delimiters and quote pairs.",
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Text to split (joined with spaces); reads stdin lines when omitted",
    )
    parser.add_argument(
        "--preset",
        default=None,
        help="Start from a shipped preset (see --list-presets); default: shell_like "
        "unless --delimiters/--quote are given",
    )
    parser.add_argument(
        "--delimiters",
        default="",
        help="Extra delimiter characters, e.g. ',;'",
    )
    parser.add_argument(
        "--quote",
        nargs=2,
        action="append",
        default=[],
        metavar=("OPEN", "CLOSE"),
        help="Extra quote pair (repeatable)",
    )
    parser.add_argument("--start", type=int, default=0, help="First index to scan")
    parser.add_argument("--end", type=int, default=None, help="Index to stop at (exclusive)")
    parser.add_argument("--list-presets", action="store_true", dest="list_presets")
    parser.add_argument("--debug", action="store_true", help="Verbose debug lines on stderr")
    return parser


def main(argv=None):
    """CLI demo: split text (or each stdin line) and print the arguments as JSON."""
    from .delimiting import (
        ArgumentDelimiterError,
        DelimiterConfiguration,
        list_presets,
        load_preset,
        split,
    )
    from .utils import debug, reload_topics
    from .utils.load_config import ConfigFileNotFound, ConfigParseError

    args = _build_parser().parse_args(argv)

    if args.list_presets:
        print("\n".join(list_presets()))
        return

    if args.debug:
        reload_topics("all")
    try:
        preset = args.preset
        if preset is None and not (args.delimiters or args.quote):
            preset = "shell_like"
        config = load_preset(preset) if preset else DelimiterConfiguration()
        for ch in args.delimiters:
            config.add_delimiter(ch)
        for open_, close in args.quote:
            config.add_quote_pair(open_, close)
        debug(f"configuration: {config!r}", topic="demo")

        lines = [" ".join(args.text)] if args.text else [ln.rstrip("\n") for ln in sys.stdin]
        for line in lines:
            result = split(line, config, args.start, args.end)
            debug(f"{line!r} → {len(result)} args", topic="demo")
            print(json.dumps(result, ensure_ascii=False))
    except (ArgumentDelimiterError, ConfigFileNotFound, ConfigParseError) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        if args.debug:
            reload_topics()


if __name__ == "__main__":
    main()
