#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
This is the module that parses your command line arguments and then runs the
memocache demonstration scenarios, which wrap example functions in a
:class:`memocache.core.memoize.Memoize` and show, for every call, whether the
result was computed or served from the cache.

Type ``memocache -h`` for all command line arguments.

Arguments can also be given in a config file, see
:attr:`memocache.DEFAULT_CONFIG_FILE_LOCATIONS` for where they are looked up,
e.g.:

.. code-block:: ini

    verbosity = 3
    scenarios = [functor, member]
"""
import configargparse
import logging
import logging.handlers
import os
import memocache
from memocache.colourlog import ColourFormatter
from memocache.demo import run_scenarios
from memocache.demo import SCENARIOS
from memocache.version import __version__, __app_name__

#: :attr:`logging.format` format string for log files and syslog
LOGFORMAT = (
    "%(asctime)s [%(levelname)s] %(name)-24.28s %(message)s"
)
#: :attr:`logging.format` format string for stdout
COLOUR_LOGFORMAT = (
    "{msg}%(asctime)s{reset} {lvl}[%(levelname)s]{reset} "
    "{msg}%(name)-24.28s %(message)s{reset}"
)

TIMESTAMP_FORMAT = "%b %d %H:%M:%S"

logger = logging.getLogger('memocache')


def get_cli_arg_parser():
    """
    Make a CLI argument parser and return it.

    It does not parse the arguments because a plain parser object is used for
    documentation purposes.

    :return: Argument parser with all of memocache's options configured
    :rtype: argparse.ArgumentParser
    """
    parser = configargparse.ArgParser(
        default_config_files=memocache.DEFAULT_CONFIG_FILE_LOCATIONS,
        description=(
            "Run memoization scenarios and report for each call whether its "
            "result was computed or taken from the cache."
        ),
        conflict_handler='resolve',
        prog=__app_name__
    )
    parser.add(
        '-c',
        '--config',
        required=False,
        is_config_file=True,
        help=(
            "Override the default config file locations "
            "(default={})".format(
                ", ".join(memocache.DEFAULT_CONFIG_FILE_LOCATIONS)
            )
        )
    )
    parser.add(
        '-s',
        '--scenarios',
        type=str,
        nargs='+',
        default=list(memocache.DEFAULT_SCENARIOS),
        help=(
            "Scenarios to run, in order, choose from: {} "
            "(default: all).".format(", ".join(sorted(SCENARIOS)))
        )
    )
    parser.add(
        '--verbosity',
        type=int,
        default=0,
        help=(
            "Verbose output argument should be an integer between 0 and 4, "
            "can be overridden by the ``-v`` argument."
        )
    )
    parser.add(
        '-v',
        action='count',
        dest="verbose",
        help=(
            "Verbose output, repeat to increase verbosity, overrides the "
            "``verbosity`` argument if provided. At ``-vvvv`` every cache hit "
            "and miss is logged."
        )
    )
    parser.add(
        '-l',
        '--logdir',
        type=str,
        nargs='?',
        default=None,
        const=memocache.LOG_DIR,
        help=("Enable logging to '{}'. It is possible to supply "
              "another directory.".format(memocache.LOG_DIR))
    )
    parser.add(
        '--syslog',
        action='store_true',
        default=False,
        help="Output log messages to syslog."
    )
    parser.add(
        '-q',
        '--quiet',
        action='store_true',
        help="Don't print log messages to stdout, results are still printed."
    )
    parser.add(
        '-V', '--version',
        action='version',
        version="%(app_name)s v%(version)s" % {
            'app_name': __app_name__, 'version': __version__
        },
        help="Show the version number and exit."
    )
    return parser


def init(argv=None):
    """
    Parse arguments, configure logging and run the selected scenarios.

    :param list|NoneType argv: Arguments to parse instead of ``sys.argv``.
    :return list: The printed result lines.
    """
    parser = get_cli_arg_parser()
    args = parser.parse_args(argv)
    __init_logging(args)

    logger.debug("Started with CLI args: %s", str(vars(args)))
    lines = run_scenarios(args.scenarios)
    for line in lines:
        print(line)
    return lines


def __init_logging(args):
    """
    Initialise the logging module.

    :param Namespace args: Argparser argument list.
    """
    verbose = args.verbose or args.verbosity
    log_level = max(min(50 - verbose * 10, 50), 10)
    logger.propagate = False
    logger.setLevel(level=log_level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    if not args.quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        console_handler.setFormatter(
            ColourFormatter(COLOUR_LOGFORMAT, TIMESTAMP_FORMAT)
        )
        logger.addHandler(console_handler)
    if args.logdir:
        file_handler = logging.FileHandler(
            os.path.join(args.logdir, 'memocache.log'))
        file_handler.setLevel(log_level)
        file_handler.setFormatter(
            logging.Formatter(LOGFORMAT, TIMESTAMP_FORMAT)
        )
        logger.addHandler(file_handler)
    if args.syslog:
        syslog_handler = logging.handlers.SysLogHandler(address='/dev/log')
        syslog_handler.setLevel(log_level)
        syslog_handler.setFormatter(
            logging.Formatter(LOGFORMAT, TIMESTAMP_FORMAT)
        )
        logger.addHandler(syslog_handler)
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())


def main():
    """Console script entry point, logs fatal errors before raising them."""
    try:
        init()
    except Exception as exc:
        logger.critical(str(exc))
        raise


if __name__ == '__main__':
    main()
