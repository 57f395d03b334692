"""Utilities pertaining to logging."""


import logging


_MESSAGE_FORMAT = '%(asctime)s,%(msecs)03d %(levelname)-8s %(message)s'
_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def configure_root_logger(level=logging.WARNING):
    logging.basicConfig(format=_MESSAGE_FORMAT, datefmt=_DATE_FORMAT)
    logging.getLogger().setLevel(level)
