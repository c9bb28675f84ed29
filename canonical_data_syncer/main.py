#!/usr/bin/env python3
"""
canonical_data_syncer - Canonical Data Syncer

Entry point: parses the command line, sets up logging and hands the
resulting configuration to the syncer.
"""

import logging
import sys
from typing import Optional, Sequence

from .args import ArgumentParser, Conf, Verbosity

# Package version
from . import __version__

LOG_LEVELS = {
    Verbosity.quiet: logging.WARNING,
    Verbosity.normal: logging.INFO,
    Verbosity.detailed: logging.DEBUG,
}


def setup_logging(verbosity: Verbosity):
    """Setup console logging according to the requested verbosity"""
    level = LOG_LEVELS[verbosity]

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root_logger.addHandler(console_handler)

    return console_handler


def log_configuration(conf: Conf):
    """Log a summary of the parsed configuration"""
    logging.info("Configuration:")
    logging.info("  Exercise: %s", conf.exercise or "all")
    logging.info("  Mode: %s", conf.mode.value)
    logging.info("  Verbosity: %s", conf.verbosity.value)
    if conf.check:
        logging.info("  Check only: missing tests are reported, not written")

    if conf.prob_specs_dir:
        logging.info("  problem-specifications: %s", conf.prob_specs_dir)
        if conf.offline:
            logging.info("  Offline: not checking that the directory is up-to-date")
    else:
        logging.info("  problem-specifications: cloned temporarily")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main application entry point"""
    try:
        # Exits on --help, --version and usage errors
        arg_parser = ArgumentParser()
        conf = arg_parser.parse_args(argv)

        setup_logging(conf.verbosity)

        logging.info("=" * 60)
        logging.info("Canonical Data Syncer session started - Version %s", __version__)
        log_configuration(conf)
        logging.debug("Resolved configuration: %s", conf)
        return 0

    except KeyboardInterrupt:
        logging.info("Interrupted by user")
        return 1
    except Exception as e:
        logging.exception("Critical error: %s", str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
