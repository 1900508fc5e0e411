import io
import random

import pytest

from fastaidx import IndexedFasta


def make_seq(length,seed=0,alphabet='ACGTACGTACGTacgtN'):
    rng = random.Random(seed)
    return ''.join(rng.choice(alphabet) for _ in range(length))

def fasta_bytes(records,width=60,newline='\n',trailing_newline=True):
    '''
        Builds the bytes of a FASTA file and its .fai index text from
        a list of (name,seq) tuples.
    '''
    data = io.BytesIO()
    index = []
    for name,seq in records:
        data.write('>{} test sequence{}'.format(name,newline).encode('ascii'))
        offset = data.tell()
        lines = [seq[i:i+width] for i in range(0,len(seq),width)]
        data.write(newline.join(lines).encode('ascii'))
        if trailing_newline or name != records[-1][0]:
            data.write(newline.encode('ascii'))
        index.append('{}\t{}\t{}\t{}\t{}'.format(
            name,len(seq),offset,width,width+len(newline)
        ))
    return data.getvalue(),'\n'.join(index)+'\n'


@pytest.fixture
def records():
    return [
        ('chr1',make_seq(1000,seed=1)),
        ('chr2',make_seq(240,seed=2)),  # exact multiple of the line width
        ('chrM',make_seq(7,seed=3)),
        ('chr4',make_seq(61,seed=4)),
    ]

@pytest.fixture
def smpl_fasta(records):
    ''' An IndexedFasta over an in memory FASTA wrapped at 60 bases '''
    data,index = fasta_bytes(records)
    return IndexedFasta(io.BytesIO(data),index)

@pytest.fixture
def worked_fasta():
    ''' 4 bases per line: ACGT|ACGT|AC '''
    return IndexedFasta(io.BytesIO(b'ACGT\nACGT\nAC\n'),'seq1\t10\t0\t4\t5\n')

@pytest.fixture
def fasta_file(tmpdir,records):
    data,index = fasta_bytes(records)
    tmpfile = tmpdir.join('smpl.fa')
    tmpfile.write_binary(data)
    tmpdir.join('smpl.fa.fai').write(index)
    return tmpfile.strpath


class CountingSource(io.BytesIO):
    ''' A BytesIO that counts seeks and reads '''
    def __init__(self,*args,**kwargs):
        super().__init__(*args,**kwargs)
        self.seeks = 0
        self.reads = 0

    def seek(self,*args,**kwargs):
        self.seeks += 1
        return super().seek(*args,**kwargs)

    def read(self,*args,**kwargs):
        self.reads += 1
        return super().read(*args,**kwargs)

@pytest.fixture
def counting_source():
    return CountingSource(bytes(range(256))*100)
