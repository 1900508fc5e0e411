#!/usr/bin/env python3
import sys


def log(message,*formatting):
    print(message.format(*formatting),file=sys.stderr)

def iter_lines(text):
    '''
        Yields lines, without line terminators, from index text, bytes
        or any iterable of lines such as an open file. Lines are left
        as str or bytes, whichever the input holds.
    '''
    if isinstance(text,(str,bytes,bytearray)):
        text = text.splitlines()
    for line in text:
        if isinstance(line,(bytes,bytearray)):
            yield bytes(line).rstrip(b'\r\n')
        else:
            yield line.rstrip('\r\n')
