
__version__ = '0.1.0'

__license__ = ('MIT License '
                  'https://opensource.org/licenses/MIT')

from .Exceptions import (FastaError, IndexFormatError, MissingSequenceError,
    InvalidRangeError, OutOfBoundsError, UnexpectedEOFError, SeekError,
    NoDataSourceError)
from .FastaIndex import IndexEntry, FastaIndex, parse_index, fai_to_reference_lengths
from .Coordinates import ReadPlan, plan_read
from .ReadCache import ReadCache
from .IndexedFasta import IndexedFasta, SequenceView
