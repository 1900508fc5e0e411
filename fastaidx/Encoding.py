#!/usr/bin/env python3
'''
    In-place transforms applied to extracted bases before they are
    returned. A transform is any callable taking a writable byte
    buffer and rewriting it in place.
'''

import numpy as np


def _table(default,mapping):
    table = np.full(256,default,dtype=np.uint8)
    for bases,value in mapping.items():
        for base in bases:
            table[ord(base)] = value
    return table

CLEAN_ASCII_TABLE = _table(ord('N'),{
    'Aa' : ord('A'),
    'Cc' : ord('C'),
    'Gg' : ord('G'),
    'Tt' : ord('T'),
})

SEQ8_TABLE = _table(15,{
    'Aa' : 1,
    'Cc' : 2,
    'Gg' : 4,
    'Tt' : 8,
})


def apply_table(buf,table):
    arr = np.frombuffer(buf,dtype=np.uint8)
    arr[:] = table[arr]

def clean_ascii_inplace(buf):
    ''' Capitalizes acgt and replaces every other base with N '''
    apply_table(buf,CLEAN_ASCII_TABLE)

def ascii_to_seq8_inplace(buf):
    ''' A,C,G,T -> 1,2,4,8 (either case), anything else -> 15 '''
    apply_table(buf,SEQ8_TABLE)


ENCODINGS = {
    'clean' : clean_ascii_inplace,
    'seq8'  : ascii_to_seq8_inplace,
}

def get_encoding(encoding):
    '''
        Resolves an encoding option to an in-place transform.

        Parameters
        ----------
        encoding : None, str or callable
            None for raw bases, one of the names in ENCODINGS, or a
            callable transforming a byte buffer in place

        Returns
        -------
        A callable, or None
    '''
    if encoding is None or callable(encoding):
        return encoding
    try:
        return ENCODINGS[encoding]
    except KeyError:
        raise ValueError(
            'unknown encoding {!r}, expected one of: {}'.format(encoding,', '.join(sorted(ENCODINGS)))
        ) from None
