## logging setup for applications using affine3d

## Copyright (c) 2020 Richard W. DeVaul
## Copyright (c) 2020 yapCAD contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.


"""handlers for the ``affine3d`` logger namespace

The kernel only creates module loggers with
``logging.getLogger(__name__)``; nothing is printed until an
application calls ``setup_logging``.  The level defaults to the
``AFFINE3D_LOG_LEVEL`` setting of the process ``Environment``.
"""

import logging
import sys
from typing import Optional, Union

from affine3d.config import Environment

LOGGER_NAME = 'affine3d'

FORMAT = '%(levelname)-7s %(name)s: %(message)s'

## marks handlers installed here so that repeated setup replaces
## only its own
_OWNED = '_affine3d_handler'


def _level(level, env):
    if level is None:
        level = (env or Environment.from_environ()).log_level
    if isinstance(level, str):
        number = logging.getLevelName(level.strip().upper())
        if not isinstance(number, int):
            raise ValueError('unknown log level {!r}'.format(level))
        return number
    return level


def _own(handler, level):
    setattr(handler, _OWNED, True)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FORMAT))
    return handler


def setup_logging(level: Union[int, str, None] = None,
                  log_file: Optional[str] = None,
                  env: Optional[Environment] = None) -> logging.Logger:
    """install a stderr handler, and a file handler when ``log_file``
    is given, on the package logger.

    ``level`` is a number or a level name; when omitted it is taken
    from ``env``, or from ``Environment.from_environ()``.  Handlers
    added by an earlier call are closed and replaced; handlers the
    application installed itself are left alone.
    """
    number = _level(level, env)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(number)

    for h in [h for h in logger.handlers if getattr(h, _OWNED, False)]:
        logger.removeHandler(h)
        h.close()

    logger.addHandler(_own(logging.StreamHandler(sys.stderr), number))
    if log_file:
        logger.addHandler(_own(logging.FileHandler(log_file, mode='a', encoding='utf-8'),
                               number))

    logger.debug('logging at %s', logging.getLevelName(number))
    return logger
