"""Command-line interface for filemapper.

This module provides the command-line entry point: it parses arguments into a
MapperConfig, assembles the complete output in memory and only then writes it to
the output file or standard output, so a failed run never leaves partial output
behind.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution
    2: Command-line syntax error
    126: Permission denied while walking the directory
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe on standard output

Example:
    # Tree with inline contents
    $ filemapper -p /path/to/dir -c

    # Display version information
    $ filemapper --version
"""

import logging
import sys

from filemapper.assembler import assemble
from filemapper.cli.argparser import config_from_args, create_parser, validate_args
from filemapper.cli.safe_writer import SafeWriter

logger = logging.getLogger("filemapper")


def configure_logging(verbose: bool) -> None:
    """Send filemapper log records to stderr, at DEBUG level when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def main() -> None:
    """Main entry point for the filemapper command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        126: Permission denied
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe on standard output
    """
    parser = create_parser()
    # argparse calls sys.exit(2) for argument errors or sys.exit(0) for --version
    args = parser.parse_args()

    configure_logging(args.verbose)

    try:
        validate_args(args)
        config = config_from_args(args)

        result = assemble(config)

        output_file = config.output if config.output else sys.stdout.fileno()
        with SafeWriter(output_file) as safe_writer:
            safe_writer.write(result)

        if config.output:
            logger.info("Output written to %s", config.output)

    except BrokenPipeError:
        sys.exit(141)
    except KeyboardInterrupt:
        sys.exit(130)
    except PermissionError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(126)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
