"""Equal-tempered frequency table and note lookup by frequency."""

from __future__ import annotations

from typing import NamedTuple

from melodius.note import NoteValue


class TuningEntry(NamedTuple):
    """One row of the tuning table."""

    frequency: float
    name: str
    value: NoteValue


NOTE_TABLE: tuple[TuningEntry, ...] = (
    TuningEntry(82.41, "E2", NoteValue.E2),
    TuningEntry(87.31, "F2", NoteValue.F2),
    TuningEntry(92.50, "F#2", NoteValue.Fs2),
    TuningEntry(98.00, "G2", NoteValue.G2),
    TuningEntry(103.83, "G#2", NoteValue.Gs2),
    TuningEntry(110.00, "A2", NoteValue.A2),
    TuningEntry(116.54, "A#2", NoteValue.As2),
    TuningEntry(123.47, "B2", NoteValue.B2),
    TuningEntry(130.81, "C3", NoteValue.C3),
    TuningEntry(138.59, "C#3", NoteValue.Cs3),
    TuningEntry(146.83, "D3", NoteValue.D3),
    TuningEntry(155.56, "D#3", NoteValue.Ds3),
    TuningEntry(164.81, "E3", NoteValue.E3),
    TuningEntry(174.61, "F3", NoteValue.F3),
    TuningEntry(185.00, "F#3", NoteValue.Fs3),
    TuningEntry(196.00, "G3", NoteValue.G3),
    TuningEntry(207.65, "G#3", NoteValue.Gs3),
    TuningEntry(220.00, "A3", NoteValue.A3),
    TuningEntry(233.08, "A#3", NoteValue.As3),
    TuningEntry(246.94, "B3", NoteValue.B3),
    TuningEntry(261.63, "C4", NoteValue.C4),
    TuningEntry(277.18, "C#4", NoteValue.Cs4),
    TuningEntry(293.66, "D4", NoteValue.D4),
    TuningEntry(311.13, "D#4", NoteValue.Ds4),
    TuningEntry(329.63, "E4", NoteValue.E4),
    TuningEntry(349.23, "F4", NoteValue.F4),
    TuningEntry(369.99, "F#4", NoteValue.Fs4),
    TuningEntry(392.00, "G4", NoteValue.G4),
    TuningEntry(415.30, "G#4", NoteValue.Gs4),
    TuningEntry(440.00, "A4", NoteValue.A4),
    TuningEntry(466.16, "A#4", NoteValue.As4),
    TuningEntry(493.88, "B4", NoteValue.B4),
    TuningEntry(523.25, "C5", NoteValue.C5),
    TuningEntry(554.37, "C#5", NoteValue.Cs5),
    TuningEntry(587.33, "D5", NoteValue.D5),
    TuningEntry(622.25, "D#5", NoteValue.Ds5),
    TuningEntry(659.25, "E5", NoteValue.E5),
    TuningEntry(698.46, "F5", NoteValue.F5),
    TuningEntry(739.99, "F#5", NoteValue.Fs5),
    TuningEntry(783.99, "G5", NoteValue.G5),
    TuningEntry(830.61, "G#5", NoteValue.Gs5),
    TuningEntry(880.00, "A5", NoteValue.A5),
    TuningEntry(932.33, "A#5", NoteValue.As5),
    TuningEntry(987.77, "B5", NoteValue.B5),
    TuningEntry(1046.50, "C6", NoteValue.C6),
    TuningEntry(0.0, "UNKNOWN", NoteValue.UNKNOWN),
)


def find_freq_from_note(value: NoteValue) -> float:
    """Frequency in Hz of a pitch; 0.0 for a pitch not in the table."""
    return next((entry.frequency for entry in NOTE_TABLE if entry.value == value), 0.0)


def find_note_from_freq(freq: float) -> tuple[str, NoteValue]:
    """Name and pitch of the table entry closest to ``freq`` (first one on ties)."""
    entry = min(NOTE_TABLE, key=lambda e: abs(e.frequency - freq))
    return entry.name, entry.value