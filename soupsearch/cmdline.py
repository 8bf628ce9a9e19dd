"""Command line options of the periodicity search and the FFA search."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, NoReturn

VERSION = "1.0"


class CmdLineError(ValueError):
    """Raised when the command line cannot be parsed."""


def get_utc_str() -> str:
    """Default output directory named after the current UTC time."""
    return datetime.now(timezone.utc).strftime("./%Y-%m-%d-%H:%M_peasoup/")


def get_default_ffa_output_filename() -> str:
    """Default FFA output filename named after the current UTC time."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%d-%H:%M_ffaster.output")


@dataclass
class CmdLineOptions:
    """Options of the acceleration search pipeline."""

    infilename: str = ""
    outdir: str = field(default_factory=get_utc_str)
    killfilename: str = ""
    zapfilename: str = ""
    max_num_threads: int = 14
    size: int = 0
    cdm: float = 0.0
    dm_start: float = 0.0
    dm_end: float = 0.0
    dm_tol: float = 1.11
    dm_pulse_width: float = 64.0
    dm_file: str = "none"
    dedisp_gulp: int = 1000000
    host_ram_limit_gb: float = 20.0
    acc_start: float = 0.0
    acc_end: float = 0.0
    acc_tol: float = 1.10
    acc_pulse_width: float = 64.0
    boundary_5_freq: float = 0.05
    boundary_25_freq: float = 0.5
    nharmonics: int = 4
    npdmp: int = 0
    limit: int = 1000
    min_snr: float = 9.0
    min_freq: float = 0.1
    max_freq: float = 1100.0
    max_harm: int = 16
    freq_tol: float = 0.0001
    verbose: bool = False
    progress_bar: bool = False
    start_sample: int = 0
    nsamples: int = 0
    timeseries_dump_dir: str = ""
    no_search: bool = False


@dataclass
class FFACmdLineOptions:
    """Options of the FFA search pipeline."""

    infilename: str = ""
    outfilename: str = field(default_factory=get_default_ffa_output_filename)
    killfilename: str = ""
    max_num_threads: int = 14
    nstreams: int = 16
    dm_start: float = 0.0
    dm_end: float = 0.0
    dm_tol: float = 0.0
    dm_pulse_width: float = 0.0
    p_start: float = 0.8
    p_end: float = 20.0
    min_dc: float = 0.001
    verbose: bool = False
    progress_bar: bool = False


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise CmdLineError(message)


class _SwitchOnce(argparse.Action):
    """A switch that may be given only once."""

    def __init__(self, option_strings: Sequence[str], dest: str, **kwargs: Any) -> None:
        kwargs.setdefault("default", False)
        super().__init__(option_strings, dest, nargs=0, **kwargs)
        self._seen = False

    def __call__(self, parser, namespace, values, option_string=None) -> None:
        if self._seen:
            raise argparse.ArgumentError(self, "Argument already set!")
        self._seen = True
        setattr(namespace, self.dest, True)


def _unsigned(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {text!r}")
    return value


def _new_parser(description: str) -> _Parser:
    parser = _Parser(description=description, allow_abbrev=False)
    parser.add_argument("--version", action="version", version=VERSION)
    return parser


def _parse(parser: _Parser, argv: Sequence[str] | None) -> argparse.Namespace:
    try:
        return parser.parse_args(argv)
    except argparse.ArgumentError as exc:
        raise CmdLineError(str(exc)) from exc
    except ValueError as exc:
        raise CmdLineError(str(exc)) from exc


def read_cmdline_options(argv: Sequence[str] | None = None) -> CmdLineOptions:
    """Parse the acceleration search options (argv excludes the program name)."""
    p = _new_parser("Peasoup - a GPU pulsar search pipeline")
    add = p.add_argument
    add("-i", "--inputfile", dest="infilename", required=True, help="File to process (.fil)")
    add("-o", "--outdir", default=None, help="The output directory")
    add("-k", "--killfile", dest="killfilename", default="", help="Channel mask file")
    add("-z", "--zapfile", dest="zapfilename", default="", help="Birdie list file")
    add("-t", "--num_threads", dest="max_num_threads", type=int, default=14,
        help="The number of GPUs to use")
    add("--limit", type=int, default=1000,
        help="upper limit on number of candidates to write out")
    add("--fft_size", dest="size", type=_unsigned, default=0,
        help="Transform size to use (defaults to lower power of two)")
    add("--dm_file", default="none", help="filename with dm list")
    add("--cdm", type=float, default=0.0, help="Coherent DM of filterbank file")
    add("--dm_start", type=float, default=0.0, help="First DM to dedisperse to")
    add("--dm_end", type=float, default=0.0, help="Last DM to dedisperse to")
    add("--dm_tol", type=float, default=1.11, help="DM smearing tolerance (1.11=10%%)")
    add("--dm_pulse_width", type=float, default=64.0,
        help="Minimum pulse width for which dm_tol is valid")
    add("--ram_limit_gb", dest="host_ram_limit_gb", type=float, default=20.0,
        help="The maximum host RAM to be used during processing")
    add("--dedisp_gulp", type=int, default=1000000,
        help="Number of samples to read at a time during dedispersion")
    add("--acc_start", type=float, default=0.0, help="First acceleration to resample to")
    add("--acc_end", type=float, default=0.0, help="Last acceleration to resample to")
    add("--acc_tol", type=float, default=1.10, help="Acceleration smearing tolerance (1.11=10%%)")
    add("--acc_pulse_width", type=float, default=64.0,
        help="Minimum pulse width for which acc_tol is valid")
    add("--boundary_5_freq", type=float, default=0.05,
        help="Frequency at which to switch from median5 to median25")
    add("--boundary_25_freq", type=float, default=0.5,
        help="Frequency at which to switch from median25 to median125")
    add("-n", "--nharmonics", type=int, default=4, help="Number of harmonic sums to perform")
    add("--npdmp", type=int, default=0, help="Number of candidates to fold and pdmp")
    add("-m", "--min_snr", type=float, default=9.0, help="The minimum S/N for a candidate")
    add("--min_freq", type=float, default=0.1, help="Lowest Fourier freqency to consider")
    add("--max_freq", type=float, default=1100.0, help="Highest Fourier freqency to consider")
    add("--max_harm_match", dest="max_harm", type=int, default=16,
        help="Maximum harmonic for related candidates")
    add("--freq_tol", type=float, default=0.0001,
        help="Tolerance for distilling frequencies (0.0001 = 0.01%%)")
    add("-v", "--verbose", action=_SwitchOnce, help="verbose mode")
    add("-p", "--progress_bar", action=_SwitchOnce, help="Enable progress bar for DM search")
    add("--start_sample", type=_unsigned, default=0, help="Start from this sample")
    add("--nsamples", type=_unsigned, default=0,
        help="Only take this many samples from start sample. Default: Until EOF")
    add("-d", "--timeseries_dump_dir", default="",
        help="dump dedispersed time series to this directory")
    add("--nosearch", dest="no_search", action=_SwitchOnce,
        help="Do not search while dumping timeseries, no effect otherwise")

    ns = _parse(p, argv)
    values = vars(ns)
    if values["outdir"] is None:
        values["outdir"] = get_utc_str()
    return CmdLineOptions(**values)


def read_ffa_cmdline_options(argv: Sequence[str] | None = None) -> FFACmdLineOptions:
    """Parse the FFA search options (argv excludes the program name)."""
    p = _new_parser("Peasoup/FFAster extension - a GPU FFA pulsar search pipeline")
    add = p.add_argument
    add("-i", "--inputfile", dest="infilename", required=True, help="File to process (.fil)")
    add("-o", "--outfilename", default=None, help="The output filename")
    add("-k", "--killfile", dest="killfilename", default="", help="Channel mask file")
    add("-t", "--num_threads", dest="max_num_threads", type=int, default=14,
        help="The number of GPUs to use")
    add("--nstreams", type=_unsigned, default=16, help="The number of CUDA streams to use")
    add("--p_start", type=float, default=0.8, help="Start period for FFA search")
    add("--p_end", type=float, default=20.0, help="End period for FFA search")
    add("--min_dc", type=float, default=0.001, help="Minimum duty cycle")
    add("-v", "--verbose", action=_SwitchOnce, help="verbose mode")
    add("-p", "--progress_bar", action=_SwitchOnce, help="Enable progress bar for DM search")

    ns = _parse(p, argv)
    values = vars(ns)
    if values["outfilename"] is None:
        values["outfilename"] = get_default_ffa_output_filename()
    return FFACmdLineOptions(**values)