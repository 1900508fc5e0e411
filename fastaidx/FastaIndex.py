#!/usr/bin/env python3

from collections import namedtuple,OrderedDict

import pandas as pd

from .Tools import log,iter_lines
from .Exceptions import IndexFormatError,MissingSequenceError

FIELDS = ('name','length','offset','line_base','line_width')


class IndexEntry(namedtuple('IndexEntry',FIELDS)):
    '''
    Layout of a single sequence within a line-wrapped FASTA file.

    Parameters
    ----------
    name : str
        Sequence name, the first word of the FASTA header
    length : int
        Number of bases in the sequence
    offset : int
        Byte offset of the first base in the FASTA file
    line_base : int
        Bases on each full line
    line_width : int
        Bytes on each full line, including the line break
    '''
    __slots__ = ()

    @property
    def newline_width(self):
        return self.line_width - self.line_base

    def __str__(self):
        return '\t'.join(str(x) for x in self)

    @classmethod
    def from_str(cls,line):
        fields = line.split('\t')
        if len(fields) != len(FIELDS):
            raise IndexFormatError(
                'expected {} tab separated fields, found {}'.format(len(FIELDS),len(fields)),
                line=line
            )
        name,*numbers = fields
        if not name or any(c.isspace() for c in name):
            raise IndexFormatError(
                'invalid sequence name: {!r}'.format(name),
                line=line,field='name'
            )
        values = []
        for field,value in zip(FIELDS[1:],numbers):
            # isdigit() alone would accept non-ascii digits
            if not (value.isascii() and value.isdigit()):
                raise IndexFormatError(
                    'field {} is not a non-negative integer: {!r}'.format(field,value),
                    line=line,field=field
                )
            values.append(int(value))
        self = cls(name,*values)
        if self.line_width < self.line_base:
            raise IndexFormatError(
                'line_width ({}) is smaller than line_base ({})'.format(self.line_width,self.line_base),
                line=line,field='line_width'
            )
        if self.line_base == 0 and self.length > 0:
            raise IndexFormatError(
                'line_base is 0 for non-empty sequence {}'.format(name),
                line=line,field='line_base'
            )
        return self


def parse_index(index):
    '''
        Parses .fai text into a list of IndexEntry objects in file order.

        Parameters
        ----------
        index : str, bytes or iterable of lines
            The index contents, e.g. an open file handle

        Returns
        -------
        A list of IndexEntry

        Notes
        -----
        Blank lines are skipped. On the first malformed line an
        IndexFormatError is raised which holds the entries parsed so far.
    '''
    entries = []
    for lineno,line in enumerate(iter_lines(index),start=1):
        if isinstance(line,bytes):
            try:
                line = line.decode('utf8')
            except UnicodeDecodeError as e:
                raise IndexFormatError(
                    'Invalid index line {}: {!r} ({})'.format(lineno,line,e),
                    lineno=lineno,line=line,entries=entries
                ) from e
        if not line.strip():
            continue
        try:
            entries.append(IndexEntry.from_str(line))
        except IndexFormatError as e:
            raise IndexFormatError(
                'Invalid index line {}: {} ({})'.format(lineno,line,e),
                lineno=lineno,line=line,field=e.field,entries=entries
            ) from e
    return entries


class FastaIndex(object):
    '''
        Catalog of the sequences in an index: name lookup plus
        the names ordered by their byte offset in the FASTA file.
    '''
    def __init__(self,entries=()):
        self.entries = OrderedDict()
        for entry in entries:
            if entry.name in self.entries:
                log('Duplicate sequence {} in index, keeping the later entry',entry.name)
            self.entries[entry.name] = entry
        # sorted() is stable, so equal offsets keep index order
        self.names = tuple(sorted(self.entries,key=lambda x: self.entries[x].offset))

    @classmethod
    def from_text(cls,index):
        return cls(parse_index(index))

    @classmethod
    def from_file(cls,filename):
        with open(filename,'rb') as IN:
            return cls.from_text(IN)

    def __getitem__(self,name):
        try:
            return self.entries[name]
        except KeyError:
            raise MissingSequenceError('sequence not found in index: {}'.format(name)) from None

    def __contains__(self,name):
        return name in self.entries

    def __len__(self):
        return len(self.entries)

    def __iter__(self):
        return iter(self.names)

    def lengths(self):
        return OrderedDict((name,self.entries[name].length) for name in self.names)

    def to_df(self):
        return pd.DataFrame(
            [tuple(self.entries[name]) for name in self.names],
            columns=list(FIELDS)
        )

    def __str__(self):
        return '\n'.join(str(self.entries[name]) for name in self.names)


def fai_to_reference_lengths(index):
    '''
        Reads a .fai index and returns a mapping of sequence name to
        length without needing the FASTA file itself.
    '''
    return FastaIndex.from_text(index).lengths()
