from fastaidx import FastaIndex, fai_to_reference_lengths


def SeqNames(args):
    index = FastaIndex.from_file(args.index)
    print('\n'.join(index.names),file=args.out)

def SeqLengths(args):
    with open(args.index,'r') as IN:
        lengths = fai_to_reference_lengths(IN)
    for name,length in lengths.items():
        print('{}\t{}'.format(name,length),file=args.out)
