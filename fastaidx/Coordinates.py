#!/usr/bin/env python3

from collections import namedtuple

from .Exceptions import InvalidRangeError,OutOfBoundsError


class ReadPlan(namedtuple('ReadPlan',['offset','length','line_pos','bases'])):
    '''
    Physical read needed for a logical base range.

    offset   : absolute byte offset of the first base
    length   : bytes to read, line breaks included
    line_pos : position of the first byte within its line
    bases    : number of bases the read yields
    '''
    __slots__ = ()

    @property
    def end(self):
        return self.offset + self.length


def plan_read(entry,start,end):
    '''
        Translates the half-open base range [start,end) of a
        sequence into the byte range that holds it.

        Parameters
        ----------
        entry : IndexEntry
            Layout of the sequence
        start, end : int
            0-based, half-open base coordinates

        Returns
        -------
        A ReadPlan
    '''
    if start >= end:
        raise InvalidRangeError(
            'start must be less than end: {}-{}'.format(start,end)
        )
    if start < 0:
        raise OutOfBoundsError('start is negative: {}'.format(start))
    if end > entry.length:
        raise OutOfBoundsError(
            'end is past end of sequence {}: {} > {}'.format(entry.name,end,entry.length)
        )
    newline_width = entry.line_width - entry.line_base
    full_lines,line_pos = divmod(start,entry.line_base)
    offset = entry.offset + start + newline_width*full_lines
    # Breaks between the bases we want, never the one after the last base
    n = end - start
    first_line_bases = entry.line_base - line_pos
    newlines = 0
    if n > first_line_bases:
        newlines = -(-(n - first_line_bases) // entry.line_base)
    return ReadPlan(offset, n + newlines*newline_width, line_pos, n)
