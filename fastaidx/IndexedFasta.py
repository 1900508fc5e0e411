#!/usr/bin/env python3

import threading

from .Tools import log
from .FastaIndex import FastaIndex
from .Coordinates import plan_read
from .ReadCache import ReadCache,DEFAULT_PREFETCH
from .Encoding import get_encoding
from .Exceptions import FastaError


def deinterleave(raw,out,line_pos,line_base,line_width):
    '''
        Copies the bases in `raw` into `out`, skipping line breaks.
        `raw` starts `line_pos` bytes into a line and must hold exactly
        the bytes needed to fill `out`.
    '''
    wanted = len(out)
    i = n = 0
    while n < wanted:
        take = min(line_base - line_pos, wanted - n)
        out[n:n+take] = raw[i:i+take]
        n += take
        i += take
        if n < wanted:
            i += line_width - line_base
            line_pos = 0
    if i != len(raw):
        raise FastaError('read {} bytes but used {}'.format(len(raw),i))
    return n


class IndexedFasta(object):
    '''
        Random access to the sequences of a FASTA file through its
        .fai index, without reading the file into memory.

        Parameters
        ----------
        fasta : binary file-like object or None
            Seekable source of the FASTA bytes. It is borrowed, not
            closed by this object. May be None if only names and
            lengths are needed.
        index : str, bytes or iterable of lines
            Contents of the .fai index
        encoding : None, str or callable
            Transform applied to extracted bases, see fastaidx.Encoding
        prefetch : int
            Minimum number of bytes fetched from the source per read

        Notes
        -----
        All reads share one cache and are serialized by a lock, so an
        instance may be shared between threads.
    '''
    def __init__(self,fasta,index,encoding=None,prefetch=DEFAULT_PREFETCH):
        if isinstance(index,FastaIndex):
            self.index = index
        else:
            self.index = FastaIndex.from_text(index)
        self.encoding = get_encoding(encoding)
        self._cache = ReadCache(fasta,prefetch=prefetch)
        self._result = bytearray()
        self._lock = threading.Lock()
        self._owned = None

    @classmethod
    def from_file(cls,fasta_file,index_file=None,**kwargs):
        '''
            Opens a FASTA file and its index (defaults to <fasta_file>.fai).
            The returned object owns the file handle, use close() or a
            with block to release it.
        '''
        if index_file is None:
            index_file = fasta_file + '.fai'
        index = FastaIndex.from_file(index_file)
        log('Loaded index for {} sequences from {}',len(index),index_file)
        handle = open(fasta_file,'rb')
        try:
            self = cls(handle,index,**kwargs)
        except Exception:
            handle.close()
            raise
        self._owned = handle
        return self

    def close(self):
        if self._owned is not None:
            self._owned.close()
            self._owned = None

    def __enter__(self):
        return self

    def __exit__(self,*exc):
        self.close()

    def seq_names(self):
        return self.index.names

    def len(self,name):
        return self.index[name].length

    def get(self,name,start,end):
        '''
        Returns bases [start,end) of a sequence.

        Parameters
        ----------
        name : str
            Sequence name
        start, end : int
            0-based, half-open coordinates

        Returns
        -------
        str of exactly end-start bases
        '''
        with self._lock:
            entry = self.index[name]
            plan = plan_read(entry,start,end)
            if len(self._result) < plan.bases:
                self._result = bytearray(plan.bases)
            with memoryview(self._result)[:plan.bases] as out:
                with self._cache.read(plan.offset,plan.length) as raw:
                    deinterleave(raw,out,plan.line_pos,entry.line_base,entry.line_width)
                if self.encoding is not None:
                    self.encoding(out)
                return bytes(out).decode('latin-1')

    def __getitem__(self,name):
        return SequenceView(self,name,self.len(name))

    def __contains__(self,name):
        return name in self.index

    def __iter__(self):
        return iter(self.seq_names())

    def __len__(self):
        return len(self.index)

    def __repr__(self):
        return '<{} of {} sequences>'.format(type(self).__name__,len(self))


class SequenceView(object):
    '''
        A lightweight handle on one sequence of an IndexedFasta which
        maps 0-based indices and slices to get() calls.
    '''
    def __init__(self,fasta,name,length):
        self.fasta = fasta
        self.name = name
        self.length = length

    def __len__(self):
        return self.length

    def __getitem__(self,pos):
        if isinstance(pos,slice):
            start,stop,step = pos.indices(self.length)
            if step != 1:
                raise ValueError('slice step is not supported')
            if start >= stop:
                return ''
            return self.fasta.get(self.name,start,stop)
        pos = int(pos)
        if pos < 0:
            pos += self.length
        if not 0 <= pos < self.length:
            raise IndexError('position {} out of range for {} (length {})'.format(pos,self.name,self.length))
        return self.fasta.get(self.name,pos,pos+1)

    def __str__(self):
        return self[:]

    def __repr__(self):
        return '<SequenceView {} ({} bases)>'.format(self.name,self.length)
