"""Tools to define local options.

A module with a setting (for instance, whether to log progress) declares it
as an Option right next to the code that reads it.  The command-line front
end then calls `setup` to register every Option defined so far with an
argparse parser and `read` to copy the parsed values back into the Options.
"""

# Every Option ever constructed, in construction order.
_OPTS = []

# Values that Options constructed later should start with instead of their
# defaults; set by `restore`.
_DEFAULT_VALUE_OVERRIDES = {}

class Option(object):
    def __init__(self, name, type, default, description="", metavar=None):
        assert type in (bool, str, int)
        self.name = name
        self.description = description
        self.type = type
        self.default = default
        self.value = _DEFAULT_VALUE_OVERRIDES.get(name, default)
        self.metavar = metavar
        _OPTS.append(self)

    def __bool__(self):
        raise Exception(
            "An attempt was made to convert an Option to a boolean. " +
            "If you intended to read the value of this Option, use `_.value`.")

    def __repr__(self):
        return "Option({!r}, {}, {!r})".format(self.name, self.type.__name__, self.value)

def _argname(o):
    if o.type is bool:
        return ("no-" + o.name) if o.default else o.name
    return o.name

def _help(o):
    default = "default={!r}".format(o.default)
    return "{} ({})".format(o.description, default) if o.description else default

def setup(parser):
    """Register every known Option with an argparse parser or argument group."""
    for o in _OPTS:
        flag = "--" + _argname(o)
        if o.type is bool:
            parser.add_argument(flag, action="store_true", default=False, help=o.description)
        else:
            parser.add_argument(flag, metavar=o.metavar, default=o.default, help=_help(o))

def read(args):
    """Copy Option values out of a parsed argparse namespace."""
    for o in _OPTS:
        value = getattr(args, _argname(o).replace("-", "_"))
        if o.type is bool and o.default:
            value = not value
        o.value = o.type(value)

def snapshot():
    """Produce a snapshot of current option values."""
    return { o.name : o.value for o in _OPTS }

def restore(snap):
    """Restore a snapshot of option values."""
    global _DEFAULT_VALUE_OVERRIDES
    for o in _OPTS:
        o.value = snap.get(o.name, o.value)
    _DEFAULT_VALUE_OVERRIDES = dict(snap)
