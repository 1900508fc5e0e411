#!/usr/bin/env python3

from .Exceptions import SeekError,UnexpectedEOFError,NoDataSourceError

DEFAULT_PREFETCH = 8192


class ReadCache(object):
    '''
        A read-through cache over a seekable byte source. A single
        contiguous window of the source is kept in memory; reads that
        fall inside it are served without touching the source.

        The source is borrowed: it is never closed here. The cache is
        not thread safe, callers must serialize access.
    '''
    def __init__(self,source,prefetch=DEFAULT_PREFETCH):
        if not isinstance(prefetch,int) or prefetch <= 0:
            raise ValueError('prefetch must be a positive integer: {!r}'.format(prefetch))
        self.source = source
        self.prefetch = prefetch
        self.window_start = 0
        self.window_len = 0
        self._buf = bytearray()
        self.refills = 0

    @property
    def window_end(self):
        return self.window_start + self.window_len

    def __contains__(self,span):
        start,length = span
        return start >= self.window_start and start + length <= self.window_end

    def read(self,start,length):
        '''
            Returns a read-only memoryview of `length` bytes starting at
            absolute offset `start`. The view is only valid until the
            next call to read().
        '''
        if (start,length) not in self:
            self._fill(start,length)
        lo = start - self.window_start
        return memoryview(self._buf)[lo:lo+length].toreadonly()

    def _fill(self,start,length):
        if self.source is None:
            raise NoDataSourceError('no FASTA data source to read from')
        # window stays empty unless the refill succeeds
        self.window_len = 0
        try:
            new_offset = self.source.seek(start)
        except OSError as e:
            raise SeekError('failed to seek to offset {}: {}'.format(start,e)) from e
        if new_offset is not None and new_offset != start:
            raise SeekError('failed to seek to offset {}: landed at {}'.format(start,new_offset))
        size = max(length,self.prefetch)
        if len(self._buf) < size:
            # grow only, never resize in place
            self._buf = bytearray(size)
        filled = 0
        while filled < length:
            chunk = self.source.read(size - filled)
            if not chunk:
                break
            self._buf[filled:filled+len(chunk)] = chunk
            filled += len(chunk)
        if filled < length:
            raise UnexpectedEOFError(
                'unexpected end of file reading {} bytes at offset {}, got {} '
                '(bad index? file truncated?)'.format(length,start,filled)
            )
        self.window_start = start
        self.window_len = filled
        self.refills += 1
