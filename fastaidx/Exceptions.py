class FastaError(Exception):
    pass

class IndexFormatError(FastaError,ValueError):
    '''
        Raised when a line of a .fai index cannot be parsed. The
        entries parsed before the offending line are kept on the
        exception as `entries`.
    '''
    def __init__(self,message,lineno=None,line=None,field=None,entries=None):
        super().__init__(message)
        self.lineno = lineno
        self.line = line
        self.field = field
        self.entries = list(entries) if entries is not None else []

class MissingSequenceError(FastaError,KeyError):
    def __str__(self):
        # KeyError would repr() the message
        return str(self.args[0]) if self.args else ''

class InvalidRangeError(FastaError,ValueError):
    pass

class OutOfBoundsError(FastaError,IndexError):
    pass

class UnexpectedEOFError(FastaError,EOFError):
    pass

class SeekError(FastaError,IOError):
    pass

class NoDataSourceError(FastaError,IOError):
    pass
