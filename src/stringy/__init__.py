"""
.. include:: ../../README.md

See individual module documentation for detailed information.
"""
from loguru import logger

from . import patterns
from . import entities
from . import exceptions
from . import settings
from . import positions
from . import cases
from . import bases
from . import wrapper
from . import frames
from .entities import CaseStyle, Base, PadSide
from .wrapper import Stringy

logger.disable(__name__)

__all__ = [
    'patterns',
    'entities',
    'exceptions',
    'settings',
    'positions',
    'cases',
    'bases',
    'wrapper',
    'frames',
    'CaseStyle',
    'Base',
    'PadSide',
    'Stringy'
]
