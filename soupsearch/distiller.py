"""Removal of related candidates (harmonics, acceleration and DM duplicates)."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from soupsearch.candidates import Candidate

SPEED_OF_LIGHT = 299792458.0


class BaseDistiller(ABC):
    """Keep the strongest candidate of every group of related candidates."""

    def __init__(self, keep_related: bool) -> None:
        self.keep_related = keep_related

    @abstractmethod
    def _condition(self, cands: list[Candidate], idx: int, unique: list[bool]) -> None:
        """Mark candidates after idx that are related to cands[idx]."""

    def _relate(self, cands: list[Candidate], idx: int, ii: int, unique: list[bool]) -> None:
        if self.keep_related:
            cands[idx].append(cands[ii])
        unique[ii] = False

    def distill(self, cands: list[Candidate]) -> list[Candidate]:
        """Sort cands by S/N (in place, descending) and return the unique ones."""
        cands.sort(key=lambda c: c.snr, reverse=True)
        unique = [True] * len(cands)
        for idx in range(len(cands)):
            if unique[idx]:
                self._condition(cands, idx, unique)
        return [c for c, keep in zip(cands, unique) if keep]


class HarmonicDistiller(BaseDistiller):
    """Remove harmonically (and optionally fractionally) related candidates."""

    def __init__(self, tol: float, max_harm: float, keep_related: bool, fractional_harms: bool = True) -> None:
        super().__init__(keep_related)
        self.tolerance = tol
        self.max_harm = max_harm
        self.fractional_harms = fractional_harms

    def _condition(self, cands: list[Candidate], idx: int, unique: list[bool]) -> None:
        upper_tol = 1 + self.tolerance
        lower_tol = 1 - self.tolerance
        fundi_freq = cands[idx].freq
        if fundi_freq == 0:
            return
        max_harm = math.floor(self.max_harm)
        for ii in range(idx + 1, len(cands)):
            freq = cands[ii].freq
            max_denominator = math.floor(2.0 ** cands[ii].nh) if self.fractional_harms else 1
            for jj in range(1, max_harm + 1):
                for kk in range(1, max_denominator + 1):
                    ratio = kk * freq / (jj * fundi_freq)
                    if lower_tol < ratio < upper_tol:
                        self._relate(cands, idx, ii, unique)


class AccelerationDistiller(BaseDistiller):
    """Remove candidates explained by an acceleration offset of a stronger one.

    Positive acceleration is away from the observer.
    """

    def __init__(self, tobs: float, tolerance: float, keep_related: bool) -> None:
        super().__init__(keep_related)
        self.tobs = tobs
        self.tolerance = tolerance
        self.tobs_over_c = tobs / SPEED_OF_LIGHT

    def _correct_for_acceleration(self, freq: float, delta_acc: float) -> float:
        return freq + delta_acc * freq * self.tobs_over_c

    def _condition(self, cands: list[Candidate], idx: int, unique: list[bool]) -> None:
        fundi_freq = cands[idx].freq
        fundi_acc = cands[idx].acc
        edge = fundi_freq * self.tolerance
        for ii in range(idx + 1, len(cands)):
            acc_freq = self._correct_for_acceleration(fundi_freq, fundi_acc - cands[ii].acc)
            freq = cands[ii].freq
            if acc_freq > fundi_freq:
                related = fundi_freq - edge < freq < acc_freq + edge
            else:
                related = acc_freq - edge < freq < fundi_freq + edge
            if related:
                self._relate(cands, idx, ii, unique)


class DMDistiller(BaseDistiller):
    """Remove weaker candidates at the same frequency (from other DM trials)."""

    def __init__(self, tolerance: float, keep_related: bool) -> None:
        super().__init__(keep_related)
        self.tolerance = tolerance

    def _condition(self, cands: list[Candidate], idx: int, unique: list[bool]) -> None:
        fundi_freq = cands[idx].freq
        if fundi_freq == 0:
            return
        upper_tol = 1 + self.tolerance
        lower_tol = 1 - self.tolerance
        for ii in range(idx + 1, len(cands)):
            ratio = cands[ii].freq / fundi_freq
            if lower_tol < ratio < upper_tol:
                self._relate(cands, idx, ii, unique)