import numbers

from ..util import numpy


class lookup_base(object):
    """Base class for all objects that do some sort of value or function lookup"""

    def __init__(self):
        pass

    def __call__(self, *args, **kwargs):
        if all(isinstance(x, (numpy.ndarray, numbers.Number)) for x in args):
            return self._evaluate(*args, **kwargs)
        elif all(isinstance(x, (list, tuple, numpy.ndarray, numbers.Number)) for x in args):
            return self._evaluate(*(numpy.asarray(x) for x in args), **kwargs)
        raise TypeError(
            "lookup base must receive numpy arrays, sequences, or numbers!"
        )

    def _evaluate(self, *args, **kwargs):
        raise NotImplementedError
