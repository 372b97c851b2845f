r"""

Utilities
=========

This is a collection of utility (helper) functions used throughout the package.

.. autosummary::
    :nosignatures:

    ktd.utils.check_array
    ktd.utils.check_scalar
    ktd.utils.dump
    ktd.utils.dumps
    ktd.utils.enable_logging
    ktd.utils.format_float
    ktd.utils.load
    ktd.utils.loads
    ktd.utils.ravel_func
    ktd.utils.read_float
    ktd.utils.read_matrix
    ktd.utils.read_vector
    ktd.utils.tokenize
    ktd.utils.write_matrix
    ktd.utils.write_vector


Object Reference
----------------

.. autofunction:: ktd.utils.check_array
.. autofunction:: ktd.utils.check_scalar
.. autofunction:: ktd.utils.dump
.. autofunction:: ktd.utils.dumps
.. autofunction:: ktd.utils.enable_logging
.. autofunction:: ktd.utils.format_float
.. autofunction:: ktd.utils.load
.. autofunction:: ktd.utils.loads
.. autofunction:: ktd.utils.ravel_func
.. autofunction:: ktd.utils.read_float
.. autofunction:: ktd.utils.read_matrix
.. autofunction:: ktd.utils.read_vector
.. autofunction:: ktd.utils.tokenize
.. autofunction:: ktd.utils.write_matrix
.. autofunction:: ktd.utils.write_vector

"""

from ._array import check_array, check_scalar, ravel_func
from ._misc import enable_logging, dump, dumps, load, loads
from ._text import (
    tokenize,
    format_float,
    write_vector,
    write_matrix,
    read_vector,
    read_matrix,
    read_float,
)


__all__ = (
    'check_array',
    'check_scalar',
    'dump',
    'dumps',
    'enable_logging',
    'format_float',
    'load',
    'loads',
    'ravel_func',
    'read_float',
    'read_matrix',
    'read_vector',
    'tokenize',
    'write_matrix',
    'write_vector',
)
