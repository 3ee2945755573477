"""
Lookup Miss Handling

Applies a LookupPolicy to a failed room/device lookup. With
PANIC_ON_OOB the process exits immediately with status 101; no
exception handler or finally block runs.
"""

import logging
import os
import sys
from typing import NoReturn

from .exceptions import NotFoundError
from .settings import LookupPolicy

logger = logging.getLogger(__name__)

PANIC_EXIT_CODE = 101


def handle_missing(error: NotFoundError, policy: LookupPolicy) -> NoReturn:
    """Raise ``error`` or abort the process, depending on ``policy``."""
    if policy is LookupPolicy.PANIC_ON_OOB:
        logger.critical(f"Aborting on failed lookup: {error}")
        sys.stdout.flush()
        sys.stderr.write(f"panicked: {error}\n")
        sys.stderr.flush()
        os._exit(PANIC_EXIT_CODE)

    logger.debug(f"Lookup failed: {error}")
    raise error
