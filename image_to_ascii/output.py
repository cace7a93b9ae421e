#!/usr/bin/env python3
"""
Image to ASCII Converter - Output
=================================
Output sink selection: standard output or a UTF-8 text file.
"""

import logging
import sys
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO

from image_to_ascii.exceptions import OutputError


logger = logging.getLogger(__name__)


@contextmanager
def open_sink(output_path: Optional[str] = None) -> Iterator[TextIO]:
    """
    Yield a writable text stream.

    Writes go to ``sys.stdout`` when ``output_path`` is None. OS errors on
    open, write, flush or close are raised as OutputError. A file left behind
    after a failure is incomplete.
    """
    if output_path is None:
        try:
            yield sys.stdout
            sys.stdout.flush()
        except OSError as e:
            raise OutputError('<stdout>', str(e)) from e
        return

    try:
        f = open(output_path, 'w', encoding='utf-8', newline='\n')
    except OSError as e:
        raise OutputError(output_path, str(e)) from e

    try:
        with f:
            yield f
    except OSError as e:
        raise OutputError(output_path, str(e)) from e
    logger.info("Saved to %s", output_path)
