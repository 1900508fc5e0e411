#!/usr/bin/env python3
import sys
import argparse

import fastaidx
from fastaidx.Exceptions import FastaError
from fastaidx.Tools import log

from .SeqNames import SeqNames, SeqLengths
from .FastaInfo import FastaInfo
from .getSeq import getSeq


def build_parser():
    parser = argparse.ArgumentParser(
        prog='fastaidx',
        description='Random access to indexed FASTA files. v{}'.format(fastaidx.__version__)
    )
    parser.add_argument('--version',action='version',version=fastaidx.__version__)
    subparsers = parser.add_subparsers(title='commands',dest='command')
    subparsers.required = True

    names = subparsers.add_parser('names',help='List sequence names in file order')
    names.add_argument('index',help='.fai index file')
    names.set_defaults(func=SeqNames)

    lengths = subparsers.add_parser('lengths',help='List sequence lengths from an index')
    lengths.add_argument('index',help='.fai index file')
    lengths.set_defaults(func=SeqLengths)

    info = subparsers.add_parser('info',help='Print the index of a FASTA file as a table')
    info.add_argument('fasta',help='FASTA file')
    info.add_argument('--index',default=None,help='.fai index (default: FASTA.fai)')
    info.add_argument('--quiet',action='store_true',default=False)
    info.set_defaults(func=FastaInfo)

    get = subparsers.add_parser('get',help='Extract a sub-sequence')
    get.add_argument('fasta',help='FASTA file')
    get.add_argument('name',help='sequence name')
    get.add_argument('start',type=int,help='0-based start')
    get.add_argument('end',type=int,nargs='?',default=None,
        help='0-based exclusive end (default: end of sequence)')
    get.add_argument('--index',default=None,help='.fai index (default: FASTA.fai)')
    get.add_argument('--encoding',default=None,choices=['clean','seq8'],
        help='transform applied to the bases')
    get.add_argument('--width',type=int,default=60,
        help='wrap output at this many bases, 0 for a single line')
    get.add_argument('--quiet',action='store_true',default=False)
    get.set_defaults(func=getSeq)
    return parser

def main(argv=None,out=None):
    args = build_parser().parse_args(argv)
    args.out = out if out is not None else sys.stdout
    try:
        args.func(args)
    except (FastaError,OSError) as e:
        log('fastaidx {}: {}',args.command,e)
        return 1
    return 0
