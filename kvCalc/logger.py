import logging


_LEVELS = {
    # Above CRITICAL, nothing is emitted
    'silent': logging.CRITICAL + 1,
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warning': logging.WARNING,
    'error': logging.ERROR,
    'critical': logging.CRITICAL,
}


class makeLager:
    """
    Console logger shared by the kvCalc sizing and noise models.

    Validation errors and advisories are returned on the result objects;
    the logger mirrors them so batch callers can follow a run on the
    console.
    """

    def __init__(self, name='kvCalc', log_level=logging.WARNING):
        """
        Args:
            name (str): Name of the stdlib logger.
            log_level (int): Initial level, WARNING by default so library
                use stays quiet apart from sizing issues.
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(log_level)

        self.console_handler = logging.StreamHandler()
        self.console_handler.setLevel(log_level)
        self.console_handler.setFormatter(
            logging.Formatter('%(levelname)s - %(message)s'))

        # Re-imports must not stack handlers
        if not self.logger.handlers:
            self.logger.addHandler(self.console_handler)

    def set_level(self, level):
        """
        Set the logging level.

        Args:
            level (str or int): 'silent', 'debug', 'info', 'warning',
                'error', 'critical' or a stdlib level number.

        Raises:
            ValueError: For an unknown level name.
        """
        if isinstance(level, str):
            try:
                level = _LEVELS[level.lower()]
            except KeyError:
                raise ValueError(f"Unknown log level '{level}', expected "
                                 f"one of {list(_LEVELS)}") from None

        self.logger.setLevel(level)
        for handler in self.logger.handlers:
            handler.setLevel(level)

    def warn(self, msg):
        self.logger.warning(msg)

    def debug(self, msg):
        self.logger.debug(msg)

    def info(self, msg):
        self.logger.info(msg)

    def error(self, msg):
        self.logger.error(msg)

    def report(self, context, errors=(), warnings=()):
        """
        Mirror the errors and warnings of a result on the console.

        Both are emitted at WARNING level since neither aborts a
        calculation.

        Args:
            context (str): Prefix naming the calculation, e.g. 'Liquid'.
            errors (list): Validation errors.
            warnings (list): Advisory messages.
        """
        for msg in errors:
            self.logger.warning(f"{context} error: {msg}")
        for msg in warnings:
            self.logger.warning(f"{context}: {msg}")

    def critical(self, msg):
        """
        Log a critical message and raise.

        Raises:
            RuntimeError: Always.
        """
        self.logger.critical(msg)
        raise RuntimeError("A critical error has occurred in kvCalc. Please "
                           "check the log messages above for details.")


logger = makeLager()
