#
# densematrix configuration.
#
import __main__
import logging
import os


# Field width used when rendering a matrix, one field per element.
DISPLAY_WIDTH = int(os.environ.get("DENSEMATRIX_DISPLAY_WIDTH", 10))


# Threshold for every logger handed out by utils.logger.
LOG_LEVEL = logging.getLevelName(
    os.environ.get("DENSEMATRIX_LOG_LEVEL", "WARNING").upper())


def get_log_file_name():
    directory = os.path.dirname(os.path.realpath(__file__))
    log_directory = 'log'
    # Interactive sessions have no main file.
    main_file = getattr(__main__, '__file__', None) or 'densematrix'
    main_file = os.path.basename(main_file)
    main_file = main_file.replace('.py', '')
    file_name = '%s.log' % main_file
    return os.path.join(*[directory, log_directory, file_name])


SHOULD_LOG = os.environ.get("DENSEMATRIX_SHOULD_LOG", "") not in ("", "0")


LOG_FILE_NAME = os.environ.get("DENSEMATRIX_LOG_FILE") or get_log_file_name()
