import logging

from nose.tools import eq_
from nose.tools import ok_
from densematrix.utils import logger


def test_get_logger_attaches_handlers_once():
    first = logger.get_logger("densematrix.test.once")
    second = logger.get_logger("densematrix.test.once")
    ok_(first is second)
    eq_(1, len(first.handlers))


def test_set_level():
    test_logger = logger.get_logger("densematrix.test.level")
    previous = test_logger.level
    try:
        logger.set_level(logging.DEBUG)
        eq_(logging.DEBUG, test_logger.level)
    finally:
        logger.set_level(previous)
