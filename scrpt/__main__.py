import argparse
import logging
import sys
from . import TARGETS, CompileError, compile

logger = logging.getLogger("scrpt")


def argument_parser():
    parser = argparse.ArgumentParser(
        prog="scrpt",
        description="Translate a .scrpt program into C source.")
    parser.add_argument("input", help="source file to translate")
    parser.add_argument(
        "-o", "--output",
        help="file to write the generated source to (default: stdout)")
    parser.add_argument(
        "-t", "--target", default="c", choices=sorted(TARGETS),
        help="output language (default: %(default)s)")
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="log each compilation stage")
    return parser


def main(argv=None):
    args = argument_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s")

    try:
        with open(args.input, "r") as f:
            text = f.read()
    except OSError as e:
        print(f"{args.input}: {e.strerror}", file=sys.stderr)
        return 1

    try:
        code = compile(text, args.input, args.target)
    except CompileError as e:
        print(f"{e.filename}:{e.lineno}:{e.offset}: {e.msg}", file=sys.stderr)
        if e.text:
            print(f"    {e.text}", file=sys.stderr)
        return 1

    if args.output is None:
        sys.stdout.write(code)
    else:
        try:
            with open(args.output, "w") as f:
                f.write(code)
        except OSError as e:
            print(f"{args.output}: {e.strerror}", file=sys.stderr)
            return 1
        logger.info("wrote %s", args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
