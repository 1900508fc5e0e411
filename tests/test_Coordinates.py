'''
    Tests
'''
import pytest
import fastaidx as fi
from fastaidx.Exceptions import InvalidRangeError, OutOfBoundsError

@pytest.fixture
def seq1():
    # ACGT\nACGT\nAC\n
    return fi.IndexEntry('seq1',10,0,4,5)

@pytest.fixture
def crlf():
    return fi.IndexEntry('crlf',1000,37,60,62)

def physical(entry,base):
    ''' byte offset of a single base '''
    return entry.offset + base + (entry.line_width-entry.line_base)*(base//entry.line_base)

def test_worked_example(seq1):
    plan = fi.plan_read(seq1,2,6)
    # reads "GT\nAC"
    assert plan.offset == 2
    assert plan.length == 5
    assert plan.line_pos == 2
    assert plan.bases == 4

def test_span_across_two_breaks(seq1):
    plan = fi.plan_read(seq1,2,8)
    assert (plan.offset,plan.length,plan.line_pos) == (2,7,2)

def test_whole_line(seq1):
    plan = fi.plan_read(seq1,4,8)
    assert (plan.offset,plan.length,plan.line_pos) == (5,4,0)

def test_exact_line_multiple_does_not_read_trailing_break(seq1):
    plan = fi.plan_read(seq1,0,8)
    assert plan.length == 9
    assert plan.end == 9

def test_whole_sequence_stops_before_final_break(seq1):
    plan = fi.plan_read(seq1,0,10)
    assert plan.length == 12
    assert plan.end == 12

def test_single_base_at_line_end(seq1):
    plan = fi.plan_read(seq1,3,4)
    assert (plan.offset,plan.length,plan.line_pos) == (3,1,3)

@pytest.mark.parametrize('entry',[
    fi.IndexEntry('seq1',10,0,4,5),
    fi.IndexEntry('crlf',130,37,60,62),
    fi.IndexEntry('oneline',17,3,17,18),
    fi.IndexEntry('nobreak',25,0,5,5),
])
def test_span_covers_exactly_the_bases(entry):
    for start in range(entry.length):
        for end in range(start+1,entry.length+1):
            plan = fi.plan_read(entry,start,end)
            assert plan.offset == physical(entry,start)
            assert plan.end == physical(entry,end-1) + 1
            assert plan.line_pos == (plan.offset-entry.offset) % entry.line_width
            assert plan.bases == end - start

def test_invalid_range(seq1):
    with pytest.raises(InvalidRangeError):
        fi.plan_read(seq1,5,5)
    with pytest.raises(InvalidRangeError):
        fi.plan_read(seq1,6,5)

def test_out_of_bounds(seq1):
    with pytest.raises(OutOfBoundsError):
        fi.plan_read(seq1,0,11)
    with pytest.raises(OutOfBoundsError):
        fi.plan_read(seq1,-1,3)

def test_empty_sequence_has_no_valid_range():
    empty = fi.IndexEntry('empty',0,8,0,0)
    with pytest.raises(OutOfBoundsError):
        fi.plan_read(empty,0,1)
