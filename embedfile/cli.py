import sys
import argparse

from .errors import EmbedError, UsageError
from .generator import run_from_config
from .logger import logger

DESCRIPTION = (
    "Generates a C include and source file with embedded data "
    "from a list of files to be included in a separate build step."
)

VALUE_OPTIONS = ("--function", "--source", "--header")

def build_parser(prog=None):
    parser = argparse.ArgumentParser(prog=prog, description=DESCRIPTION, add_help=False, allow_abbrev=False)
    parser.add_argument("--function", type=str, metavar="NAME",
                        help="The name of the function for retrieving embedded file data")
    parser.add_argument("--source", type=str, metavar="PATH", help="Source file to generate")
    parser.add_argument("--header", type=str, metavar="PATH", help="Header file to generate")
    parser.add_argument("--preserve-paths", action="store_true",
                        help="Keep the paths passed for files as the names used by the retrieval function")
    parser.add_argument("--help", action="store_true", help="Show this message and exit")
    parser.add_argument("files", nargs="*", metavar="FILE", help="List of input files")
    return parser

def split_argv(argv):
    """
    Splits argv into option arguments and the input file list.

    Only arguments starting with -- are options, and the first one that does
    not starts the file list. The argument following a value option is its
    value whatever it looks like, so it is joined as --name=value before
    argparse sees it.
    """
    options = []
    i = 0
    while i < len(argv) and argv[i].startswith("--"):
        arg = argv[i]
        if arg == "--":
            raise UsageError("Unrecognized option '--'")
        if arg in VALUE_OPTIONS and i + 1 < len(argv):
            options.append(f"{arg}={argv[i + 1]}")
            i += 2
        else:
            options.append(arg)
            i += 1
    return options, list(argv[i:])

def parse_args(parser, argv):
    if argv is None:
        argv = sys.argv[1:]
    options, files = split_argv(argv)
    args = parser.parse_args(options)
    args.files = files
    if args.help:
        return args
    if any(f.startswith("--") for f in args.files):
        raise UsageError("You must specify all options before listing files")
    return args

def main(argv=None, prog=None):
    parser = build_parser(prog)
    try:
        args = parse_args(parser, argv)
        if args.help:
            parser.print_help(sys.stderr)
            return 1

        run_from_config(
            function_name=args.function,
            source=args.source,
            header=args.header,
            preserve_paths=args.preserve_paths,
            input_files=args.files
        )
    except UsageError as e:
        logger.error(f"Error: {e}")
        parser.print_help(sys.stderr)
        return 1
    except EmbedError as e:
        logger.error(str(e))
        return 1
    return 0
