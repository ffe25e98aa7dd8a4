class SeqError(Exception):
    """base class for errors raised by seqy itself"""


class InvalidRangeError(SeqError, ValueError):
    """raised when a range is built with stop < start or a non-positive step"""

    def __init__(self, message: str, start=None, stop=None, step=None):
        super().__init__(message)
        self.start = start
        self.stop = stop
        self.step = step
