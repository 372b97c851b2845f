# ------------------------------------------------------------------------------------------------ #
# MIT License                                                                                      #
#                                                                                                  #
# Copyright (c) 2026, ktd developers                                                               #
#                                                                                                  #
# Permission is hereby granted, free of charge, to any person obtaining a copy of this software    #
# and associated documentation files (the "Software"), to deal in the Software without             #
# restriction, including without limitation the rights to use, copy, modify, merge, publish,       #
# distribute, sublicense, and/or sell copies of the Software, and to permit persons to whom the    #
# Software is furnished to do so, subject to the following conditions:                             #
#                                                                                                  #
# The above copyright notice and this permission notice shall be included in all copies or         #
# substantial portions of the Software.                                                            #
#                                                                                                  #
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED, INCLUDING    #
# BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND       #
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM,     #
# DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,   #
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.          #
# ------------------------------------------------------------------------------------------------ #

import re

import numpy as onp

from .._base.errors import StreamFormatError


__all__ = (
    'tokenize',
    'format_float',
    'write_vector',
    'write_matrix',
    'read_vector',
    'read_matrix',
    'read_float',
)


_TOKEN = re.compile(r'[\[\]:]|[^\s\[\]:]+')


def tokenize(text):
    r"""

    Split persisted text into tokens.

    Brackets and colons are tokens on their own, even when they are glued to a number, so that
    both ``[ 3 : 1 2 3]`` and ``[3:1 2 3 ]`` are understood.

    Parameters
    ----------
    text : str

        The text to split.

    Returns
    -------
    tokens : iterator of str

        An iterator over the tokens.

    """
    return iter(_TOKEN.findall(text))


def format_float(x, precision=None):
    r"""

    Format a float such that :func:`float` reads it back.

    Parameters
    ----------
    x : float

        The number to format.

    precision : int, optional

        The number of significant digits. If left unspecified, the shortest representation that
        round-trips exactly is used.

    """
    x = float(x)
    if precision is None:
        return repr(x)
    return f'{x:.{precision}g}'


def write_vector(stream, v, precision=None):
    r""" Write a vector as ``[ size : v0 v1 ...]``. """
    v = onp.asarray(v)
    stream.write(f'[ {v.size} :')
    for x in v.ravel():
        stream.write(' ' + format_float(x, precision))
    stream.write(']')


def write_matrix(stream, m, precision=None):
    r""" Write a matrix as ``[ rows x cols : m00 m01 ...]`` (row-major). """
    m = onp.asarray(m)
    rows, cols = m.shape
    stream.write(f'[ {rows}x{cols} :')
    for x in m.ravel(order='C'):
        stream.write(' ' + format_float(x, precision))
    stream.write(']')


def _next(tokens, what):
    try:
        return next(tokens)
    except StopIteration:
        raise StreamFormatError(f"unexpected end of stream while reading {what}") from None


def _expect(tokens, expected, what):
    token = _next(tokens, what)
    if token != expected:
        raise StreamFormatError(f"expected {expected!r} while reading {what}, got: {token!r}")


def read_float(tokens, what='float'):
    token = _next(tokens, what)
    try:
        return float(token)
    except ValueError:
        raise StreamFormatError(f"expected a number while reading {what}, got: {token!r}") from None


def _read_size(token, what):
    try:
        size = int(token)
    except ValueError:
        raise StreamFormatError(f"expected a size while reading {what}, got: {token!r}") from None
    if size < 0:
        raise StreamFormatError(f"negative size while reading {what}: {size}")
    return size


def _read_values(tokens, size, what):
    values = onp.empty(size, dtype='float64')
    for i in range(size):
        values[i] = read_float(tokens, what)
    _expect(tokens, ']', what)
    return values


def read_vector(tokens, what='vector'):
    r"""

    Read a vector that was written by :func:`write_vector`.

    Parameters
    ----------
    tokens : iterator of str

        Token iterator, see :func:`tokenize`.

    Returns
    -------
    v : ndarray with ndim=1

        A newly allocated float64 array of the size encoded in the stream.

    """
    _expect(tokens, '[', what)
    size = _read_size(_next(tokens, what), what)
    _expect(tokens, ':', what)
    return _read_values(tokens, size, what)


def read_matrix(tokens, what='matrix'):
    r"""

    Read a matrix that was written by :func:`write_matrix`.

    Parameters
    ----------
    tokens : iterator of str

        Token iterator, see :func:`tokenize`.

    Returns
    -------
    m : ndarray with ndim=2

        A newly allocated float64 array of the shape encoded in the stream.

    """
    _expect(tokens, '[', what)

    # the shape may be written as '2x3' or as '2 x 3'
    shape = ''
    token = _next(tokens, what)
    while token != ':':
        shape += token
        token = _next(tokens, what)
    dims = shape.split('x')
    if len(dims) != 2:
        raise StreamFormatError(f"expected a shape like 'rows x cols' while reading {what}, "
                                f"got: {shape!r}")
    rows, cols = (_read_size(d, what) for d in dims)

    return _read_values(tokens, rows * cols, what).reshape(rows, cols)
