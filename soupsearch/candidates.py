"""Pulsar search candidates, collections of them, and folded sub-integrations."""

from __future__ import annotations

import math
import os
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import TextIO, Union


@dataclass
class CandidatePOD:
    """The basic measured quantities of a candidate."""

    dm: float
    dm_idx: int
    acc: float
    nh: int
    snr: float
    freq: float


def _period(freq: float) -> float:
    return 1.0 / freq if freq else math.inf


@dataclass
class Candidate:
    """A periodicity candidate with its associated (related) detections."""

    dm: float = 0.0
    dm_idx: int = 0
    acc: float = 0.0
    nh: int = 0
    snr: float = 0.0
    freq: float = 0.0
    folded_snr: float = 0.0
    opt_period: float = 0.0
    is_adjacent: bool = False
    is_physical: bool = False
    ddm_count_ratio: float = 0.0
    ddm_snr_ratio: float = 0.0
    assoc: list[Candidate] = field(default_factory=list)
    fold: list[float] = field(default_factory=list)
    nbins: int = 0
    nints: int = 0

    def _clone(self) -> Candidate:
        return replace(
            self,
            assoc=[c._clone() for c in self.assoc],
            fold=list(self.fold),
        )

    def append(self, other: Candidate) -> None:
        """Associate a copy of another candidate with this one."""
        self.assoc.append(other._clone())

    def count_assoc(self) -> int:
        """Count all associated candidates, recursively."""
        return sum(1 + c.count_assoc() for c in self.assoc)

    def set_fold(self, values: Iterable[float], nbins: int, nints: int) -> None:
        """Store a folded profile of nints sub-integrations of nbins bins."""
        data = [float(v) for v in values]
        size = nbins * nints
        if len(data) < size:
            raise ValueError(f"fold needs {size} values, got {len(data)}")
        self.nbins = nbins
        self.nints = nints
        self.fold = data[:size]

    def collect_candidates(self) -> list[CandidatePOD]:
        """Flatten this candidate and its associations, depth first."""
        found = [CandidatePOD(self.dm, self.dm_idx, self.acc, self.nh, self.snr, self.freq)]
        for c in self.assoc:
            found.extend(c.collect_candidates())
        return found

    def format(self) -> str:
        """Tab separated lines for this candidate followed by its associations."""
        line = "%.15f\t%.15f\t%.15f\t%.2f\t%.2f\t%d\t%.1f\t%.1f\t%d\t%d\t%.4f\t%.4f\t%d\n" % (
            _period(self.freq),
            self.opt_period,
            self.freq,
            self.dm,
            self.acc,
            self.nh,
            self.snr,
            self.folded_snr,
            int(self.is_adjacent),
            int(self.is_physical),
            self.ddm_count_ratio,
            self.ddm_snr_ratio,
            len(self.assoc),
        )
        return line + "".join(c.format() for c in self.assoc)

    def write(self, stream: TextIO) -> None:
        """Write the formatted candidate to a text stream."""
        stream.write(self.format())


class CandidateCollection:
    """An ordered list of candidates."""

    def __init__(self, cands: Iterable[Candidate] | None = None) -> None:
        self.cands: list[Candidate] = list(cands) if cands is not None else []

    def __len__(self) -> int:
        return len(self.cands)

    def __iter__(self):
        return iter(self.cands)

    def append(self, other: Union[CandidateCollection, Iterable[Candidate]]) -> None:
        """Add copies of the candidates of another collection or iterable."""
        source = other.cands if isinstance(other, CandidateCollection) else other
        self.cands.extend(c._clone() for c in source)

    def reset(self) -> None:
        """Remove all candidates."""
        self.cands.clear()

    def format(self) -> str:
        return "".join(c.format() for c in self.cands)

    def write(self, stream: TextIO) -> None:
        """Write every candidate to a text stream."""
        stream.write(self.format())

    def generate_candidate_binaries(self, output_directory: str = "./") -> list[str]:
        """Write one file per candidate; return the paths written."""
        paths = []
        for index, cand in enumerate(self.cands):
            name = "cand_%04d_%.5f_%.1f_%.1f.peasoup" % (index, _period(cand.freq), cand.dm, cand.acc)
            path = os.path.join(output_directory, name)
            with open(path, "w") as fo:
                cand.write(fo)
            paths.append(path)
        return paths

    def write_candidate_file(self, filepath: str = "./candidates.txt") -> None:
        """Write all candidates to one annotated text file."""
        with open(filepath, "w") as fo:
            fo.write(
                "#Period...Optimal period...Frequency...DM...Acceleration"
                "...Harmonic number...S/N...Folded S/N\n"
            )
            for index, cand in enumerate(self.cands):
                fo.write(f"#Candidate {index}\n")
                cand.write(fo)


class SpectrumCandidates(CandidateCollection):
    """Candidates found in one spectrum of a given DM and acceleration trial."""

    def __init__(self, dm: float, dm_idx: int, acc: float) -> None:
        super().__init__()
        self.dm = dm
        self.dm_idx = dm_idx
        self.acc = acc

    def add_spectrum(self, snrs: Iterable[float], freqs: Iterable[float], nh: int) -> None:
        """Add one candidate per (snr, freq) pair at harmonic sum nh."""
        for snr, freq in zip(snrs, freqs, strict=True):
            self.cands.append(Candidate(self.dm, self.dm_idx, self.acc, nh, snr, freq))


@dataclass
class FoldedSubints:
    """A time series folded into nints sub-integrations of nbins bins."""

    nbins: int
    nints: int
    period: float = 0.0
    accel: float = 0.0
    opt_period: float = 0.0
    opt_width: int = 0
    opt_bin: int = 0
    opt_sn: float = 0.0
    tobs: float = 0.0
    data: list[float] = field(default_factory=list)
    opt_fold: list[float] = field(default_factory=list)
    opt_prof: list[float] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.data:
            self.data = [0.0] * (self.nbins * self.nints)

    def set_opt_fold(self, values: Iterable[float]) -> None:
        """Store the optimised fold."""
        self.opt_fold = [float(v) for v in values]

    def set_opt_prof(self, values: Iterable[float]) -> None:
        """Store the optimised profile."""
        self.opt_prof = [float(v) for v in values]