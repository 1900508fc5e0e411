from fastaidx import IndexedFasta
from fastaidx.Tools import log


def wrap(seq,width):
    if not width:
        return seq
    return '\n'.join(seq[i:i+width] for i in range(0,len(seq),width))

def getSeq(args):
    '''
        Prints bases [start,end) of a sequence as a FASTA record.
    '''
    with IndexedFasta.from_file(args.fasta,args.index,encoding=args.encoding) as fasta:
        end = args.end if args.end is not None else fasta.len(args.name)
        if not args.quiet:
            log('Extracting {}:{}-{} from {}',args.name,args.start,end,args.fasta)
        seq = fasta.get(args.name,args.start,end)
    print('>{}:{}-{}'.format(args.name,args.start,end),file=args.out)
    print(wrap(seq,args.width),file=args.out)
