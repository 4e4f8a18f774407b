"""The two error conditions that are specific to lightrig.

Everything else uses the builtin exception types.
"""


class ResourceUnavailable(RuntimeError):
    """The output surface is missing or has been closed.

    Raised by a renderer when it has nothing to draw onto. The render loop
    treats this as "skip this frame", not as a fatal condition.
    """


class InvalidConfiguration(ValueError):
    """A programming error in the static setup, e.g. a slider with min >= max.

    Raised at construction time, so that it surfaces at startup.
    """
