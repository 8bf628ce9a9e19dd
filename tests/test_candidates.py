import io

import pytest

from soupsearch.candidates import (
    Candidate,
    CandidateCollection,
    CandidatePOD,
    FoldedSubints,
    SpectrumCandidates,
)


def make(freq=2.0, dm=10.0, acc=1.5, snr=12.0, dm_idx=3, nh=1):
    return Candidate(dm=dm, dm_idx=dm_idx, acc=acc, nh=nh, snr=snr, freq=freq)


def test_defaults_are_zero():
    c = Candidate()
    assert c.snr == 0.0 and c.folded_snr == 0.0 and c.assoc == []
    assert c.is_adjacent is False and c.is_physical is False


def test_count_assoc_is_recursive():
    a, b, c = make(), make(freq=4.0), make(freq=8.0)
    b.append(c)
    a.append(b)
    assert a.count_assoc() == 2
    assert b.count_assoc() == 1


def test_append_stores_a_copy():
    a, b = make(), make(freq=4.0)
    a.append(b)
    b.snr = 99.0
    b.append(make(freq=16.0))
    assert a.assoc[0].snr == 12.0
    assert a.assoc[0].assoc == []


def test_collect_candidates_depth_first():
    a, b, c = make(freq=1.0), make(freq=2.0), make(freq=3.0)
    b.append(c)
    a.append(b)
    pods = a.collect_candidates()
    assert [p.freq for p in pods] == [1.0, 2.0, 3.0]
    assert pods[0] == CandidatePOD(10.0, 3, 1.5, 1, 12.0, 1.0)


def test_format_fields():
    a = make(freq=2.0)
    a.append(make(freq=4.0))
    lines = a.format().splitlines()
    assert len(lines) == 2
    fields = lines[0].split("\t")
    assert len(fields) == 13
    assert float(fields[0]) == pytest.approx(0.5)
    assert float(fields[2]) == pytest.approx(2.0)
    assert fields[12] == "1"
    assert lines[1].split("\t")[12] == "0"


def test_write_matches_format():
    a = make()
    buf = io.StringIO()
    a.write(buf)
    assert buf.getvalue() == a.format()


def test_set_fold_and_short_data():
    a = make()
    a.set_fold(range(6), 3, 2)
    assert a.fold == [0.0, 1.0, 2.0, 3.0, 4.0, 5.0]
    assert (a.nbins, a.nints) == (3, 2)
    with pytest.raises(ValueError):
        a.set_fold([1.0, 2.0], 3, 2)


def test_collection_append_and_reset():
    coll = CandidateCollection()
    other = CandidateCollection([make(), make(freq=4.0)])
    coll.append(other)
    coll.append([make(freq=8.0)])
    assert [c.freq for c in coll.cands] == [2.0, 4.0, 8.0]
    buf = io.StringIO()
    coll.write(buf)
    assert len(buf.getvalue().splitlines()) == 3
    coll.reset()
    assert coll.cands == []


def test_generate_candidate_binaries(tmp_path):
    coll = CandidateCollection([make()])
    paths = coll.generate_candidate_binaries(str(tmp_path))
    assert [p.rsplit("/", 1)[-1].rsplit("\\", 1)[-1] for p in paths] == [
        "cand_0000_0.50000_10.0_1.5.peasoup"
    ]
    with open(paths[0]) as fh:
        assert fh.read() == coll.cands[0].format()


def test_write_candidate_file(tmp_path):
    path = tmp_path / "cands.txt"
    coll = CandidateCollection([make(), make(freq=4.0)])
    coll.write_candidate_file(str(path))
    lines = path.read_text().splitlines()
    assert lines[0].startswith("#Period...Optimal period")
    assert lines[1] == "#Candidate 0"
    assert lines[3] == "#Candidate 1"


def test_spectrum_candidates():
    spec = SpectrumCandidates(dm=5.0, dm_idx=2, acc=-1.0)
    spec.add_spectrum([10.0, 11.0], [3.0, 6.0], nh=2)
    assert [(c.snr, c.freq, c.nh, c.dm, c.dm_idx, c.acc) for c in spec.cands] == [
        (10.0, 3.0, 2, 5.0, 2, -1.0),
        (11.0, 6.0, 2, 5.0, 2, -1.0),
    ]
    with pytest.raises(ValueError):
        spec.add_spectrum([1.0], [1.0, 2.0], nh=0)


def test_folded_subints():
    folded = FoldedSubints(nbins=4, nints=2)
    assert len(folded.data) == 8
    folded.set_opt_fold([1, 2, 3])
    folded.set_opt_prof((0.5, 1.5))
    assert folded.opt_fold == [1.0, 2.0, 3.0]
    assert folded.opt_prof == [0.5, 1.5]