# -*- coding: utf-8 -*-
"""
ANSI colourise the logging stream (works on LINUX/UNIX based systems).

*Constants for colours*:

:attr const BLACK: Black
:attr const RED: Red
:attr const GREEN: Green
:attr const YELLOW: Yellow
:attr const BLUE: Blue
:attr const MAGENTA: Magenta
:attr const CYAN: Cyan
:attr const WHITE: White
"""

import logging

BLACK, RED, GREEN, YELLOW, BLUE, MAGENTA, CYAN, WHITE = range(8)

RESET = "\x1b[0m"

#: Colour schemes per placeholder and log level, each a tuple of foreground
#: colour, background colour and bold face.
DEFAULT_COLOURS = {
    'lvl': {
        logging.DEBUG: (WHITE, BLUE, False),
        logging.INFO: (BLACK, GREEN, False),
        logging.WARNING: (BLACK, YELLOW, False),
        logging.ERROR: (WHITE, RED, False),
        logging.CRITICAL: (YELLOW, RED, True),
    },
    'msg': {
        logging.DEBUG: (BLUE, None, False),
        logging.INFO: (GREEN, None, False),
        logging.WARNING: (YELLOW, None, False),
        logging.ERROR: (RED, None, False),
        logging.CRITICAL: (RED, None, True),
    }
}


def ansi_code(foreground=None, background=None, bold=False):
    """
    Make the ANSI escape sequence for a colour combination.

    :param int|NoneType foreground: Foreground colour constant.
    :param int|NoneType background: Background colour constant.
    :param bool bold: Use bold face.
    :return str: Escape sequence, empty if nothing is set.
    """
    props = []
    if background is not None:
        props.append(str(background + 40))
    if foreground is not None:
        props.append(str(foreground + 30))
    if bold:
        props.append('1')
    if not props:
        return ""
    return "\x1b[%sm" % ';'.join(props)


class _Palette(dict):
    """Placeholder values for one log level, unknown placeholders vanish."""

    def __missing__(self, key):
        return ""


class ColourFormatter(logging.Formatter):
    """
    ANSI colourise the logging stream (works on LINUX/UNIX based systems).

    The format string may contain ``{name}`` placeholders for each colour
    scheme plus ``{reset}``:

    .. code-block:: python

        handler.setFormatter(
            ColourFormatter(
                "{lvl}[%(levelname)s]{reset} {msg}%(name)s %(message)s"
            )
        )

    A ``{reset}`` is appended if the format doesn't end with one, so the
    terminal doesn't keep printing in colour after the log line. Custom
    schemes can be passed with the ``colours`` keyword, structured like
    :data:`DEFAULT_COLOURS`.

    The placeholders are substituted in the format string once per level, the
    log message itself is never touched.
    """

    def __init__(self, fmt=None, datefmt=None, colours=None):
        """
        :param str fmt: Format string with colour placeholders.
        :param str datefmt: Date format passed to the parent formatter.
        :param dict colours: Colour schemes, default: :data:`DEFAULT_COLOURS`
        """
        fmt = fmt or "{lvl}[%(levelname)s]{reset} {msg}%(message)s"
        if not fmt.endswith("{reset}"):
            fmt += "{reset}"
        self.colour_template = fmt
        self.colours = colours if colours is not None else DEFAULT_COLOURS
        self._level_fmts = {}
        super(ColourFormatter, self).__init__(
            self.level_format(logging.NOTSET), datefmt
        )

    def level_format(self, level):
        """
        Return the format string with colours filled in for ``level``.

        :param int level: The logging log level.
        :return str: A plain :mod:`logging` format string.
        """
        try:
            return self._level_fmts[level]
        except KeyError:
            pass
        palette = _Palette(reset=RESET)
        for scheme, levels in self.colours.items():
            if level in levels:
                palette[scheme] = ansi_code(*levels[level])
        fmt = self._level_fmts[level] = self.colour_template.format_map(
            palette
        )
        return fmt

    def format(self, record):
        """
        Swap in the format string for the record's level, then call the
        parent format method.

        :param logging.LogRecord record: The log record.
        """
        self._style._fmt = self.level_format(record.levelno)
        return super(ColourFormatter, self).format(record)
