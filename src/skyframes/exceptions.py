"""
Exceptions raised by skyframes.
"""

__all__ = ["ParseError"]


class ParseError(ValueError):
    """
    An angle string could not be parsed.

    Parameters
    ----------
    input:
        The text which failed to parse.
    msg:
        Optional description of the failure.
    """

    def __init__(self, input: str, msg: str = None):
        self.input = input
        if msg is None:
            msg = f"Could not parse {input!r} as an angle."
        super().__init__(msg)
