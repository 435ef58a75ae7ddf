import logging
import sys


def _create_logger(name: str) -> logging.Logger:

    logger = logging.getLogger(name)

    # Attach a single handler, also when the module is reloaded
    if not logger.handlers:

        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)-8s %(name)s :: %(message)s",
                datefmt="%H:%M:%S",
            )
        )
        logger.addHandler(handler)

    logger.setLevel("DEBUG")
    logger.propagate = False

    return logger


log = _create_logger("lightlink")
