import pytest

from soupsearch.candidates import Candidate
from soupsearch.distiller import (
    AccelerationDistiller,
    BaseDistiller,
    DMDistiller,
    HarmonicDistiller,
)


def cand(freq, snr, nh=0, acc=0.0, dm=0.0):
    return Candidate(dm=dm, dm_idx=0, acc=acc, nh=nh, snr=snr, freq=freq)


def test_base_is_abstract():
    with pytest.raises(TypeError):
        BaseDistiller(False)


def test_harmonic_removes_integer_harmonic():
    cands = [cand(20.0, 10.0), cand(13.0, 5.0), cand(10.0, 20.0)]
    result = HarmonicDistiller(1e-4, 16, False).distill(cands)
    assert [c.freq for c in result] == [10.0, 13.0]
    assert [c.snr for c in cands] == [20.0, 10.0, 5.0]


def test_harmonic_keep_related_records_association():
    cands = [cand(10.0, 20.0), cand(20.0, 10.0)]
    result = HarmonicDistiller(1e-4, 16, True).distill(cands)
    assert len(result) == 1
    assert [c.freq for c in result[0].assoc] == [20.0]


def test_harmonic_fractional_depends_on_flag():
    with_frac = HarmonicDistiller(1e-4, 16, False, fractional_harms=True)
    without = HarmonicDistiller(1e-4, 16, False, fractional_harms=False)
    assert [c.freq for c in with_frac.distill([cand(10.0, 20.0), cand(5.0, 10.0, nh=1)])] == [10.0]
    assert [c.freq for c in without.distill([cand(10.0, 20.0), cand(5.0, 10.0, nh=1)])] == [10.0, 5.0]


def test_acceleration_same_acc_close_freq_removed():
    d = AccelerationDistiller(1000.0, 1e-4, False)
    result = d.distill([cand(100.0, 20.0), cand(100.005, 10.0), cand(150.0, 5.0)])
    assert [c.freq for c in result] == [100.0, 150.0]


def test_acceleration_offset_explains_frequency():
    d = AccelerationDistiller(1000.0, 1e-4, True)
    result = d.distill([cand(100.0, 20.0), cand(150.0, 5.0, acc=-3e5)])
    assert [c.freq for c in result] == [100.0]
    assert result[0].count_assoc() == 1


def test_dm_distiller():
    d = DMDistiller(1e-4, False)
    result = d.distill([cand(101.0, 3.0), cand(100.005, 10.0, dm=5.0), cand(100.0, 20.0)])
    assert [c.freq for c in result] == [100.0, 101.0]


def test_empty_input():
    assert DMDistiller(1e-4, False).distill([]) == []


def test_output_is_subset_and_sorted():
    cands = [cand(float(f), float(s)) for f, s in [(7, 1), (11, 9), (13, 4), (22, 3)]]
    result = HarmonicDistiller(1e-4, 4, False).distill(cands)
    snrs = [c.snr for c in result]
    assert snrs == sorted(snrs, reverse=True)
    assert all(any(c is o for o in cands) for c in result)
    assert 22.0 not in [c.freq for c in result]