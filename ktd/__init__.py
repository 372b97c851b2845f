__version__ = '0.1.0'

# expose specific classes and functions
from .td_learning import KTD, KTDQ, KTDSarsa
from .reward_tracing import Transition
from ._base.errors import (
    KTDError,
    ConfigurationError,
    MissingParameterBufferError,
    ParameterSizeMismatchError,
    DimensionMismatchError,
    NotPositiveDefiniteError,
    StreamFormatError,
)

# pre-load submodules
from . import linalg
from . import reward_tracing
from . import td_learning
from . import unscented
from . import utils


__all__ = (

    # classes and functions
    'KTD',
    'KTDQ',
    'KTDSarsa',
    'Transition',

    # errors
    'KTDError',
    'ConfigurationError',
    'MissingParameterBufferError',
    'ParameterSizeMismatchError',
    'DimensionMismatchError',
    'NotPositiveDefiniteError',
    'StreamFormatError',

    # modules
    'linalg',
    'reward_tracing',
    'td_learning',
    'unscented',
    'utils',
)
