import argparse
import logging
import sys

from .dialects import DEFAULT_DIALECT, available_dialects, get_dialect
from .errors import TreeSpecError
from .loader import load_block, loads_block
from .model import CodeBlock
from .validation import validate_rendered


def _read_block(source: str) -> CodeBlock:
    if source == "-":
        try:
            text = sys.stdin.read()
        except UnicodeDecodeError as e:
            raise TreeSpecError("<stdin>", f"invalid UTF-8: {e}") from e
        return loads_block(text)
    return load_block(source)


def cmd_render(args: argparse.Namespace) -> int:
    if args.check and args.dialect != "python":
        print("--check is only supported for the python dialect", file=sys.stderr)
        return 2

    try:
        block = _read_block(args.source)
    except TreeSpecError as e:
        print(f"Invalid tree description: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"Cannot read {args.source}: {e.strerror}", file=sys.stderr)
        return 2

    dialect = get_dialect(args.dialect, " " * args.indent_width)
    print(dialect.render(block, args.indent), end="")

    if args.check:
        res = validate_rendered(block, dialect)
        for err in res.errors:
            print(err, file=sys.stderr)
        if not res.ok:
            return 1
    return 0


def cmd_dialects(args: argparse.Namespace) -> int:
    for name in available_dialects():
        marker = " (default)" if name == DEFAULT_DIALECT else ""
        print(f"{name}{marker}")
    return 0


def _non_negative(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError("must be >= 0")
    return n


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser("tracedsl")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(required=True)

    s = sub.add_parser("render", help="Render a JSON tree description as source text")
    s.add_argument("source", help="Path to the JSON description, or '-' for stdin")
    s.add_argument("--dialect", choices=available_dialects(), default=DEFAULT_DIALECT)
    s.add_argument("--indent", type=_non_negative, default=0, help="Starting indent level")
    s.add_argument("--indent-width", dest="indent_width", type=_non_negative, default=2,
                   help="Spaces per indent level")
    s.add_argument("--check", action="store_true", help="Syntax-check the output (python dialect)")
    s.set_defaults(func=cmd_render)

    s = sub.add_parser("dialects", help="List available target dialects")
    s.set_defaults(func=cmd_dialects)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
