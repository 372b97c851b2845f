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

from ...utils import dump, load


class SerializationMixin:

    @classmethod
    def load(cls, filepath):
        r"""

        Load an instance from a file that was written by :func:`save`.

        The parameter buffer of the loaded instance is a fresh array, i.e. it is no longer shared
        with whatever object held the buffer at the time of saving. Use :func:`assign` to copy the
        loaded state into an instance whose buffer is shared.

        Parameters
        ----------
        filepath : str

            The filepath of the stored instance.

        """
        obj = load(filepath)
        if not isinstance(obj, cls):
            raise TypeError(f"loaded obj must be an instance of {cls.__name__}, got: {type(obj)}")
        obj.logger.info(f"loaded {cls.__name__} from: {filepath}")
        return obj

    def save(self, filepath):
        r"""

        Save the instance to a file (lz4-compressed pickle).

        Parameters
        ----------
        filepath : str

            The filepath to store the instance.

        """
        dump(self, filepath)
        self.logger.info(f"saved {self.__class__.__name__} to: {filepath}")
