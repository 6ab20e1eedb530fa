import logging
import sys

_FORMAT = "%(levelname)s %(asctime)s [%(name)s:%(lineno)d] %(message)s"
_DATE_FORMAT = "%m-%d %H:%M:%S"

_root_logger = logging.getLogger("adaptable_pq")
_default_handler = None

def _setup_logger() -> None:
    global _default_handler

    _root_logger.setLevel(logging.WARNING)

    if _default_handler is None:
        _default_handler = logging.StreamHandler(sys.stdout)
        _default_handler.flush = sys.stdout.flush
        _default_handler.setLevel(logging.DEBUG)
        _root_logger.addHandler(_default_handler)

    _default_handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
    _root_logger.propagate = False

# The logger is initialized when the module is imported.
_setup_logger()

def init_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)

def set_log_level(level: any) -> None:
    """ Sets the level of every adaptable_pq logger.

    params:
        level (int | str): A logging level, e.g. logging.DEBUG or "DEBUG". Sift swaps, growth
                events and rebuilds are only reported at DEBUG.
    """
    _root_logger.setLevel(level)

if __name__ == "__main__":
    pass
