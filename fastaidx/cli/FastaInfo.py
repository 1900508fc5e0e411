from fastaidx import FastaIndex
from fastaidx.Tools import log


def FastaInfo(args):
    index_file = args.index or args.fasta + '.fai'
    index = FastaIndex.from_file(index_file)
    df = index.to_df()
    if not args.quiet:
        log('Information for: {}',args.fasta)
        log('    Num Sequences: {}',len(df))
        log('    Total Bases: {}',int(df['length'].sum()))
    df.to_csv(args.out,sep='\t',index=False)
