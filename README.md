# melodius

Building blocks for turning recorded melodies into sheet music: a note model,
a tuning table covering E2 to C6, playback buffering and a set of numerical
routines.

## What it provides

- `melodius.note`
  - `NoteType`: rhythmic figures, from `Ronde` (whole note) down to
    `DoubleCroche` (sixteenth), the rests `Pause`, `DemiPause`, `Silence`,
    `DemiSilence`, `QuartSilence`, and `UNKNOWN`.
  - `NoteValue`: pitches from `E2` to `C6` in semitone steps (sharps are
    spelled `Fs2`, `Gs2`, ...), plus `UNKNOWN`.
  - `Note`: a dataclass with `note_type`, `note_value`, `liee` (tied),
    `deux_croche` and `deuxieme_deux_croche`. `duration()` gives the length in
    beats (a quarter note is one beat) and raises `ValueError` for
    `NoteType.UNKNOWN`. `is_sharp()` tells whether the pitch is a sharp.
    `symbol_name()` returns a name such as `"NoteType::Noire"`.
    `set_deux_croche(deux_croche, derniere)` marks the note as part of a
    beamed pair of eighths and says whether it is the second of the pair.
- `melodius.tuning`
  - `NOTE_TABLE`: the table of `TuningEntry(frequency, name, value)` rows.
  - `find_freq_from_note(value)`: frequency in Hz of a `NoteValue`. It is
    `0.0` for `UNKNOWN`.
  - `find_note_from_freq(freq)`: `(name, NoteValue)` of the table entry
    nearest to `freq`. On a tie it takes the first entry.
- `melodius.playback`
  - `iter_buffers(samples, num_channels, frames_per_buffer)`: yields
    interleaved buffers of `frames_per_buffer` frames from mono (`MONO`) or
    stereo (`STEREO`) samples. The last buffer is padded with zeros. It raises
    `ValueError` for other channel counts, a non-positive buffer size, or a
    sample count that is not a whole number of frames.
- `melodius.cemath` holds plain scalar routines that return NaN or infinities
  instead of raising on overflow:
  - `checks`: `is_odd`, `is_even`, `is_nan`, `is_finite`, `any_nan`,
    `all_nan`, `any_finite`, `all_finite`.
  - `elementary`: `atan`, `tan`, `sinh`, `log1p`, `pow_integral`.
  - `special`: `erf_inv`, `incomplete_beta`, `beta`, `binomial_coef`,
    `log_binomial_coef`, `lcm`.

## Example

```python
from melodius.note import Note, NoteType, NoteValue
from melodius.tuning import find_freq_from_note, find_note_from_freq
from melodius.playback import iter_buffers

note = Note(NoteType.Noire, NoteValue.A4)
note.duration()                        # 1.0
note.is_sharp()                        # False
find_freq_from_note(NoteValue.A4)      # 440.0
find_note_from_freq(445.0)             # ("A4", NoteValue.A4)

list(iter_buffers([1, 2, 3], 1, 2))    # [[1, 2], [3, 0]]
```

## What it does not do

The package has no command, no window and no sound device access. It does not
record audio, play it through speakers, read or write WAV files, or detect
rhythm and pitch from a recording. `iter_buffers` only prepares the buffers an
audio output would consume.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```