# soupsearch

This package provides building blocks for handling the results of a Fourier-domain pulsar acceleration search.

- **`soupsearch.candidates`**
  - `Candidate` holds one detection: DM, DM index, acceleration, harmonic number, S/N and frequency. It also holds the candidates associated with it, which you add with `append` and count recursively with `count_assoc`. `collect_candidates` flattens a candidate and its associations into `CandidatePOD` records. `format` and `write` produce one tab-separated line per candidate. Each line holds period, optimal period, frequency, DM, acceleration, harmonic number, S/N, folded S/N, the adjacency and physical flags, the delta-DM ratios, and the number of associations.
  - `CandidateCollection` is an ordered list of candidates. Its methods are:
    - `append` adds copies of candidates from another collection or from an iterable.
    - `reset` empties the collection.
    - `write` writes every candidate to a text stream.
    - `generate_candidate_binaries` writes one `cand_NNNN_<period>_<dm>_<acc>.peasoup` file per candidate and returns the paths.
    - `write_candidate_file` writes everything to one annotated text file.
  - `SpectrumCandidates` collects the candidates of one DM/acceleration trial. Its `add_spectrum` method adds one candidate per `(snr, freq)` pair.
  - `FoldedSubints` stores a folded time series and the results of optimising it.
- **`soupsearch.distiller`**
  - `HarmonicDistiller`, `AccelerationDistiller` and `DMDistiller` each have a `distill` method. It sorts a list of candidates by S/N, in place and in descending order, and returns only the strongest member of each group of related candidates.
  - With `keep_related=True`, the weaker members are attached to the strongest one as associations.
- **`soupsearch.angles`**
  - `parse_angle_sigproc` splits a packed sigproc angle such as `123456.78` into `(sign, 12, 34, 56.78)`.
  - `sigproc_to_hhmmss` and `sigproc_to_ddmmss` format packed angles as `HH:MM:SS.ss` and `[-]DD:MM:SS.ss`.
- **`soupsearch.cmdline`**
  - `read_cmdline_options(argv)` parses the acceleration search options into a `CmdLineOptions` dataclass.
  - `read_ffa_cmdline_options(argv)` parses the FFA search options into `FFACmdLineOptions`.
  - `argv` excludes the program name.
  - An unparsable command line raises `CmdLineError`.
  - A switch given twice is also an error.
  - The default output directory and the default FFA output file are named after the current UTC time; see `get_utc_str` and `get_default_ffa_output_filename`.

## Example

```python
import sys

from soupsearch.angles import sigproc_to_hhmmss
from soupsearch.candidates import CandidateCollection, SpectrumCandidates
from soupsearch.distiller import DMDistiller, HarmonicDistiller

trial = SpectrumCandidates(100.0, 0, 0.0)
trial.add_spectrum([12.0, 9.5], [2.5, 5.0], 1)

distilled = HarmonicDistiller(0.0001, 16, True).distill(trial.cands)

collection = CandidateCollection()
collection.append(DMDistiller(0.0001, True).distill(distilled))
collection.write(sys.stdout)

print(sigproc_to_hhmmss(123456.78))  # 12:34:56.78
```

Parsing search options:

```python
from soupsearch.cmdline import CmdLineError, read_cmdline_options

try:
    options = read_cmdline_options(["-i", "observation.fil", "--dm_end", "100", "-v"])
except CmdLineError as exc:
    print("bad options:", exc)
else:
    print(options.infilename, options.dm_end, options.verbose, options.min_snr)
```

## What this package does not do

It works only on candidates and options that you hand to it. The package does not do any of the following:

- read or write filterbank or psrdada files or their headers;
- dedisperse, resample, or Fourier-transform data;
- plan acceleration trials;
- score candidates;
- install a command that runs a search. The option parsers only return the parsed settings.

## Tests

Install the `test` extra and run `pytest` from the project directory.