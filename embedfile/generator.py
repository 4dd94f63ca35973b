import re
from contextlib import ExitStack

from .entries import read_bundle
from .errors import OutputOpenError, UsageError
from .header_writer import write_header
from .logger import logger
from .source_writer import write_source

C_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*\Z")

def open_output(path, kind):
    try:
        return open(path, 'w', newline='\n', encoding='utf-8')
    except OSError as e:
        raise OutputOpenError(f"Could not open output {kind} file '{path}' ({e.strerror})", path=path) from e

def write_output(f, path, writer, *args):
    try:
        writer(f, *args)
    except OSError as e:
        raise OutputOpenError(f"Could not write output file '{path}' ({e.strerror})", path=path) from e

def validate_config(function_name, source, input_files):
    if not source:
        raise UsageError("You must provide --source for the output source file")
    if not function_name:
        raise UsageError("You must provide --function for the file get function name")
    if not C_IDENTIFIER.match(function_name):
        raise UsageError(f"--function '{function_name}' is not a valid C identifier")
    if not input_files:
        raise UsageError("You must list at least one input file")

def run_from_config(
    function_name,
    source,
    header=None,
    preserve_paths=False,
    input_files=()
):
    input_files = list(input_files)
    validate_config(function_name, source, input_files)
    if not header:
        logger.warning("Notice: Not producing a header file because --header was not provided")

    bundle = read_bundle(input_files, preserve_paths=preserve_paths)

    with ExitStack() as stack:
        source_file = stack.enter_context(open_output(source, "source"))
        header_file = stack.enter_context(open_output(header, "header")) if header else None

        write_output(source_file, source, write_source, bundle, function_name)
        logger.info(f"Embedded {len(bundle)} file(s) into {source}")

        if header_file is not None:
            write_output(header_file, header, write_header, header, function_name)
            logger.info(f"Declared {function_name}() in {header}")

    return bundle
