"""
Test the demonstration scenarios and the command line entry point.
"""

# pylint: disable=no-self-use
# pylint: disable=invalid-name

import logging
import pytest
import memocache
from memocache import demo
from memocache.__main__ import get_cli_arg_parser
from memocache.__main__ import init
from memocache.core.exceptions import ArgumentError


@pytest.fixture
def package_logger():
    """
    Restore the ``memocache`` logger after the CLI reconfigured it.
    """
    logger = logging.getLogger('memocache')
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate


class TestScenarios(object):
    """
    Test each scenario reports computed and cached results.
    """

    def test_functor(self):
        """
        Two keys computed, then recomputed after the clear.
        """
        assert demo.functor() == [
            "functor (1, 4.9) -> 5.9 (new)",
            "functor (1, 4.9) -> 5.9 (from cache)",
            "functor (1, 4.9) -> 5.9 (from cache)",
            "functor (2, 4.9) -> 6.9 (new)",
            "functor (2, 4.9) -> 6.9 (from cache)",
            "functor cleared",
            "functor (2, 4.9) -> 6.9 (new)",
        ]

    def test_overloaded(self):
        """
        Each overload computes only its own results.
        """
        assert demo.overloaded() == [
            "overloaded[int] (4, 3) -> 1 (new)",
            "overloaded[int] (4, 3) -> 1 (from cache)",
            "overloaded[int] (4, 3) -> 1 (from cache)",
            "overloaded[int] (1, 3) -> -2 (new)",
            "overloaded[int] (1, 3) -> -2 (from cache)",
            "overloaded[str] ('z ', 'y') -> 'z y' (new)",
            "overloaded[str] ('z ', 'y') -> 'z y' (from cache)",
            "overloaded[str] ('z ', 'y') -> 'z y' (from cache)",
            "overloaded[str] ('c ', 's') -> 'c s' (new)",
            "overloaded[str] ('c ', 's') -> 'c s' (from cache)",
        ]

    def test_member(self):
        """
        The receiver is part of the key, the larger value is returned.
        """
        assert demo.member() == [
            "member (MaxClass(), 10.0, 20.0) -> 20.0 (new)",
            "member (MaxClass(), 10.0, 20.0) -> 20.0 (from cache)",
            "member (MaxClass(), 10.0, 20.0) -> 20.0 (from cache)",
            "member (MaxClass(), 20.0, 21.0) -> 21.0 (new)",
            "member (MaxClass(), 20.0, 21.0) -> 21.0 (from cache)",
        ]

    def test_generic_implementation_raises(self):
        """
        The unregistered base of the overloaded function isn't usable.
        """
        with pytest.raises(NotImplementedError, match="float"):
            demo.concat_or_subtract(1.5, 2.5)

    def test_unknown_scenario(self):
        """
        Unknown names are refused before anything runs.
        """
        with pytest.raises(ArgumentError, match="bogus"):
            demo.run_scenarios(['functor', 'bogus'])


class TestCli(object):
    """
    Test argument parsing and the entry point.
    """

    def test_defaults(self):
        """
        Without arguments all scenarios run quietly at critical level.
        """
        args = get_cli_arg_parser().parse_args([])
        assert args.scenarios == memocache.DEFAULT_SCENARIOS
        assert args.verbosity == 0
        assert args.verbose is None
        assert args.logdir is None

    def test_logdir_without_value(self):
        """
        ``-l`` without a directory uses the default log directory.
        """
        args = get_cli_arg_parser().parse_args(['-l'])
        assert args.logdir == memocache.LOG_DIR

    def test_init_prints_results(self, capsys, package_logger):
        """
        Selected scenarios run in order and their lines are printed.
        """
        lines = init(['-q', '-s', 'member', 'functor'])
        out = capsys.readouterr().out.splitlines()
        assert out == lines
        assert lines[0].startswith("member ")
        assert lines[-1] == "functor (2, 4.9) -> 6.9 (new)"
        assert package_logger.level == logging.CRITICAL

    def test_verbosity(self, capsys, package_logger):
        """
        ``-vvvv`` logs every cache hit and miss.
        """
        init(['-vvvv', '-s', 'functor'])
        assert package_logger.level == logging.DEBUG
        err = capsys.readouterr().err
        assert "Cache miss for" in err
        assert "Cache hit for" in err

    def test_logdir(self, tmpdir, package_logger):
        """
        A log file is written in the given directory.
        """
        init(['-q', '-vvv', '-l', str(tmpdir), '-s', 'overloaded'])
        for handler in package_logger.handlers:
            handler.flush()
        assert "Scenario overloaded[int]" in tmpdir.join('memocache.log').read()

    def test_config_file(self, tmpdir, capsys, package_logger):
        """
        Options can be set in a config file.
        """
        config = tmpdir.join('memocache.conf')
        config.write("quiet = true\nscenarios = [member]\n")
        lines = init(['-c', str(config)])
        assert all(line.startswith("member ") for line in lines)
        assert capsys.readouterr().err == ""

    def test_unknown_scenario(self, package_logger):
        """
        An unknown scenario raises an ArgumentError.
        """
        with pytest.raises(ArgumentError):
            init(['-q', '-s', 'nope'])
