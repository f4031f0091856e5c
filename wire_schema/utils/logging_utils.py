import logging
import sys
from typing import Optional


def configure_logging(
    *,
    verbose: bool = False,
    formatter: Optional[logging.Formatter] = None,
) -> None:
    """Configure root logging for the command line tool.

    All records go to stderr so that stdout carries only command output
    (decoded JSON, encoded bytes). ``verbose`` lowers the level to DEBUG,
    which includes union branch selection and codec sizes.
    """

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG if verbose else logging.INFO)

    if formatter is None:
        formatter = logging.Formatter("%(name)s - %(levelname)s - %(message)s")

    stderr_handler = logging.StreamHandler(stream=sys.stderr)
    stderr_handler.setFormatter(formatter)
    root.addHandler(stderr_handler)
