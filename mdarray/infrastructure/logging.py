import logging
import sys


def setup_logging(level: str | int = logging.INFO) -> None:
    """
    (Re)configure the root logger to write to stdout at the given level.

    Any handlers already on the root logger are replaced, so calling this again
    with another level takes effect.

    Parameters:
        level (str | int): Level name, case-insensitive (e.g. "debug"), or numeric level.
    """
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
