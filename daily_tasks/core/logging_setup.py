import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """Configure un handler stderr unique sur le logger racine."""
    root = logging.getLogger()
    root.setLevel(level.upper())

    # Évite les doublons si l'app est importée plusieurs fois (reload, tests)
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root.addHandler(handler)
