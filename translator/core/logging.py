# -*- coding: utf-8 -*-
import logging
import os
import sys


def setup_logging():
    """
    Configure stderr logging for the command line entry point: load summaries
    from the json translator and the file read or parse failures behind a LoadError.
    """
    fmt = "%(asctime)s %(levelname)s %(name)s %(message)s"
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format=fmt,
        handlers=[logging.StreamHandler(sys.stderr)],
    )
