"""Tools to define local options.

Modules that have tunable behavior (the printing symbol, the coefficient field
used by the command line tool, logging verbosity) declare an Option instance
for each setting next to the code that reads it.  `setup` tells an argparse
parser about every Option defined so far and `read` copies the parsed values
back.
"""

# All Option objects that have ever been created.
_OPTS = []

# Default values for options.  The `restore` procedure needs this to override
# values for options in modules that have not been imported yet.
_DEFAULT_VALUE_OVERRIDES = {}

class Option(object):
    def __init__(self, name, type, default, description="", metavar=None, choices=None):
        assert type in (bool, str, int)
        assert choices is None or default in choices
        self.name = name
        self.description = description
        self.type = type
        self.default = default
        self.value = _DEFAULT_VALUE_OVERRIDES.get(name, default)
        self.metavar = metavar
        self.choices = choices
        _OPTS.append(self)

    def __bool__(self):
        raise Exception(
            "An attempt was made to convert an Option to a boolean. " +
            "If you intended to read the value of this Option, use `_.value`. " +
            "If you intended to check whether this object is None, use `_ is None`.")

    def __repr__(self):
        return "Option({!r}, {}, {!r})".format(self.name, self.type.__name__, self.value)

def _argname(o):
    if o.type is bool:
        return ("no-" + o.name) if o.default else o.name
    return o.name

def _help(o):
    default = "default={}".format(repr(o.default))
    return "{} ({})".format(o.description, default) if o.description else default

def setup(parser):
    for o in _OPTS:
        n = _argname(o)
        if o.type is bool:
            parser.add_argument("--" + n, action="store_true", default=False, help=o.description)
        else:
            parser.add_argument("--" + n, metavar=o.metavar, default=o.default, choices=o.choices, type=o.type, help=_help(o))

def read(args):
    for o in _OPTS:
        o.value = getattr(args, _argname(o).replace("-", "_"))
        if o.type is bool and o.default:
            o.value = not o.value

def snapshot():
    """Produce a snapshot of current option values."""
    return { o.name : o.value for o in _OPTS }

def restore(snap):
    """Restore a snapshot of option values."""
    global _DEFAULT_VALUE_OVERRIDES

    # Set the values for options that have already been imported.
    for o in _OPTS:
        o.value = snap.get(o.name, o.value)

    # Set the overrides for options that have not yet been imported.
    _DEFAULT_VALUE_OVERRIDES = dict(snap)
