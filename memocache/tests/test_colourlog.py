"""
Test the ANSI colour log formatter.
"""

# pylint: disable=no-self-use
# pylint: disable=invalid-name

import logging
import pytest
from memocache.colourlog import ColourFormatter
from memocache.colourlog import ansi_code
from memocache.colourlog import BLUE, RED, WHITE, YELLOW


def make_record(level, msg, *args):
    return logging.LogRecord(
        'memocache.test', level, __file__, 1, msg, args, None
    )


@pytest.mark.parametrize("colour,expected", [
    ((WHITE, BLUE, False), "\x1b[44;37m"),
    ((YELLOW, RED, True), "\x1b[41;33;1m"),
    ((BLUE, None, False), "\x1b[34m"),
    ((None, None, False), ""),
])
def test_ansi_code(colour, expected):
    """
    Background, foreground and bold face combine into one escape sequence.
    """
    assert ansi_code(*colour) == expected


class TestColourFormatter(object):
    """
    Test level dependent colouring of log lines.
    """

    def test_debug_line(self):
        """
        A debug record gets the debug colours and ends with a reset.
        """
        formatter = ColourFormatter(
            "{lvl}[%(levelname)s]{reset} {msg}%(message)s"
        )
        line = formatter.format(make_record(logging.DEBUG, "miss %s", 1))
        assert line == "\x1b[44;37m[DEBUG]\x1b[0m \x1b[34mmiss 1\x1b[0m"

    def test_levels_differ(self):
        """
        The same formatter colours each level with its own scheme.
        """
        formatter = ColourFormatter("{lvl}%(message)s")
        error = formatter.format(make_record(logging.ERROR, "x"))
        critical = formatter.format(make_record(logging.CRITICAL, "x"))
        assert error == "\x1b[41;37mx\x1b[0m"
        assert critical == "\x1b[41;33;1mx\x1b[0m"

    def test_braces_in_message_untouched(self):
        """
        Placeholders are only substituted in the format, not the message.
        """
        formatter = ColourFormatter("%(message)s")
        line = formatter.format(make_record(logging.INFO, "{lvl} {0}"))
        assert line == "{lvl} {0}\x1b[0m"

    def test_custom_scheme(self):
        """
        Custom schemes replace the defaults, unknown placeholders vanish.
        """
        formatter = ColourFormatter(
            "{note}{lvl}%(message)s{reset}",
            colours={'note': {logging.WARNING: (RED, None, False)}}
        )
        line = formatter.format(make_record(logging.WARNING, "careful"))
        assert line == "\x1b[31mcareful\x1b[0m"
