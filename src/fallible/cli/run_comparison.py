"""Core comparison runner.

Runs the same searches under each error handler and prints the outcomes,
so the two ways of reporting a failure can be compared side by side.
Scripts are thin wrappers; this is the real implementation.
"""

import sys
import json
import logging
import argparse
from contextlib import ExitStack
from typing import Optional, Sequence

from fallible.errors import HandlerError, MessageRegistry, SearchError
from fallible.handlers import Err, ErrorHandler, LoggingHandler, RaisingHandler, ResultHandler
from fallible.schemas import CLIConfig, InternalConfig, ParamConfig, resolve_config
from fallible.search import find_max, find_max_index
from fallible.setup_directories import get_log_path

__all__ = ['compare_error_handling', 'main']

logger = logging.getLogger(__name__)


def print_max(label) -> None:
    print(f"max is: {label}")


def print_error_message(msg: str) -> None:
    print(f"could not find max, because {msg}", file=sys.stderr)


def use_result(values: Sequence, handler: ErrorHandler, index: bool = False) -> None:
    """Search under a result-returning handler and print the outcome."""
    search = find_max_index if index else find_max
    outcome = search(values, handler)
    if isinstance(outcome, Err):
        print_error_message(handler.message(outcome.error))
    else:
        print_max(f"index {outcome.value}" if index else outcome.value)


def use_raising(values: Sequence, handler: ErrorHandler, index: bool = False) -> None:
    """Search under a raising handler, catching its error at this boundary."""
    search = find_max_index if index else find_max
    try:
        found = search(values, handler)
    except HandlerError as e:
        print_error_message(str(e))
        return
    print_max(f"index {found}" if index else found)


def compare_error_handling(config: Optional[InternalConfig] = None) -> None:
    """Run every sample under every handler.

    For each sample, in order: result handler, logging handler (value
    variant with the log file enabled), raising handler.

    Parameters
    ----------
    config : InternalConfig, optional
        Resolved configuration. If None, the defaults are used.
    """
    if config is None:
        config = resolve_config()

    registry = MessageRegistry.from_mapping(config.messages, SearchError)
    index = config.variant == "index"

    result_handler = ResultHandler(registry)
    raising_handler = RaisingHandler(registry)

    with ExitStack() as stack:
        logging_handler = None
        if not index and config.log_file.enabled:
            log_path = get_log_path(config.log_file.directory, config.log_file.filename)
            logging_handler = stack.enter_context(LoggingHandler.open(log_path, result_handler))
            logger.info("Error log: %s", log_path)

        for sample in config.samples:
            logger.debug("Sample: %s", sample)
            use_result(sample, result_handler, index=index)
            if logging_handler is not None:
                use_result(sample, logging_handler)
            use_raising(sample, raising_handler, index=index)


def setup_logging(level: str = "WARNING") -> None:
    """Configure the root logger with a console handler."""
    log_level = getattr(logging, level.upper(), logging.WARNING)

    formatter = logging.Formatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root = logging.getLogger()
    root.setLevel(log_level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    ch = logging.StreamHandler()
    ch.setLevel(log_level)
    ch.setFormatter(formatter)
    root.addHandler(ch)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compare returning and raising error handlers on a max search"
    )
    parser.add_argument("--variant", choices=["value", "index"],
                        help="Print the found value (default) or its index")
    parser.add_argument("--log-path", help="Error log file (default: ../log.txt)")
    parser.add_argument("--no-log-file", action="store_true", help="Skip the logging handler")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    cli_cfg = CLIConfig.model_validate({
        k: v
        for k, v in {
            "variant": args.variant,
            "log_path": args.log_path,
            "no_log_file": args.no_log_file or None,
            "log_level": "DEBUG" if args.verbose else None,
        }.items()
        if v is not None
    })
    config = resolve_config(ParamConfig(), cli_cfg)

    setup_logging(config.logging.level)
    logger.debug("Resolved configuration:\n%s", json.dumps(config.model_dump(), indent=2))

    compare_error_handling(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
