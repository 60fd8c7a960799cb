"""
General-purpose helpers.

This module contains miscellaneous utility functions that don't have a
dedicated home in the package, currently the logging helper used by the
``verbose`` switch of the public functions.

Classes
-------
VerboseAdapter(logger, verbose)
    Logger adapter that emits records for one call regardless of the
    logger's level.
"""

import logging


class VerboseAdapter(logging.LoggerAdapter):
    """
    Logger adapter honouring a per-call ``verbose`` switch.

    With ``verbose=False`` the adapter behaves like the wrapped logger.
    With ``verbose=True`` records below the logger's effective level are
    built and handed to the logger's handlers anyway, so a single call can
    be made chatty without changing the level of any logger.

    Parameters
    ----------
    logger : logging.Logger
        The logger to emit through.
    verbose : bool, default=False
        Emit records whatever the logger's level.

    Usage
    -----
    >>> import logging
    >>> log = VerboseAdapter(logging.getLogger("my_logger"), verbose=True)
    >>> log.info("Shown even if my_logger is at WARNING")

    Notes
    -----
    Handler levels and filters still apply. Logger levels are never
    modified, so concurrent calls do not affect each other's output.
    """

    def __init__(self, logger, verbose=False):
        super().__init__(logger, {})
        self.verbose = verbose

    def log(self, level, msg, *args, **kwargs):
        if not self.verbose or self.logger.isEnabledFor(level):
            super().log(level, msg, *args, **kwargs)
            return
        if self.logger.disabled:
            return
        fn, lno, func, _ = self.logger.findCaller()
        record = self.logger.makeRecord(
            self.logger.name, level, fn, lno, msg, args, None, func
        )
        self.logger.handle(record)
