"""Utility functions not found in the standard libraries.

Important functions:
 - @typechecked: decorator that checks annotated arguments at run time
 - open_maybe_stdin: open a path, treating "-" as standard input
"""

# builtins
from functools import wraps
import sys
import os
import inspect

def check_type(value, ty, value_name="value"):
    """
    Verify that `value` is an instance of `ty`.  `ty` may be None, meaning no
    annotation was given and nothing is checked.  Exponents are annotated
    `int`, flags `bool` and names `str`; nothing richer is needed.
    """
    if ty is not None:
        assert isinstance(value, ty), "{} has type {}, not {}".format(value_name, type(value).__name__, ty.__name__)

def typechecked(f):
    """
    Use the @typechecked decorator on a function to perform run-time typechecking
    of its annotated arguments and return value.
    """
    argspec = inspect.getfullargspec(f)
    annotations = f.__annotations__
    @wraps(f)
    def g(*args, **kwargs):
        for argname, argval in zip(argspec.args, args):
            check_type(argval, annotations.get(argname), argname)
        for argname, argval in kwargs.items():
            check_type(argval, annotations.get(argname), argname)
        ret = f(*args, **kwargs)
        check_type(ret, annotations.get("return"), "return")
        return ret
    return g

def open_maybe_stdin(f : str, mode="r"):
    """Open file f, or open standard input if f is "-".

    In any case, the caller is responsible for closing the returned handle.
    """
    if f == "-":
        return os.fdopen(os.dup(sys.stdin.fileno()), mode)
    return open(f, mode)
