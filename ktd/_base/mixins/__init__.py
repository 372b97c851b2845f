from ._copy import CopyMixin
from ._logger import LoggerMixin
from ._random_state import RandomStateMixin
from ._serialization import SerializationMixin


__all__ = (
    'CopyMixin',
    'LoggerMixin',
    'RandomStateMixin',
    'SerializationMixin',
)
