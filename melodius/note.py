"""Note durations, pitches and the note record used by the score writer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class NoteType(Enum):
    """Rhythmic figure of a note or rest."""

    Ronde = 0
    Blanche = 1
    Noire = 2
    Croche = 3
    DoubleCroche = 4
    Pause = 5
    DemiPause = 6
    Silence = 7
    DemiSilence = 8
    QuartSilence = 9
    UNKNOWN = 10


class NoteValue(IntEnum):
    """Pitch of a note, from E2 to C6 in semitone steps."""

    E2 = 0
    F2 = 1
    Fs2 = 2
    G2 = 3
    Gs2 = 4
    A2 = 5
    As2 = 6
    B2 = 7
    C3 = 8
    Cs3 = 9
    D3 = 10
    Ds3 = 11
    E3 = 12
    F3 = 13
    Fs3 = 14
    G3 = 15
    Gs3 = 16
    A3 = 17
    As3 = 18
    B3 = 19
    C4 = 20
    Cs4 = 21
    D4 = 22
    Ds4 = 23
    E4 = 24
    F4 = 25
    Fs4 = 26
    G4 = 27
    Gs4 = 28
    A4 = 29
    As4 = 30
    B4 = 31
    C5 = 32
    Cs5 = 33
    D5 = 34
    Ds5 = 35
    E5 = 36
    F5 = 37
    Fs5 = 38
    G5 = 39
    Gs5 = 40
    A5 = 41
    As5 = 42
    B5 = 43
    C6 = 44
    UNKNOWN = 45


_DURATIONS: dict[NoteType, float] = {
    NoteType.Ronde: 4.0,
    NoteType.Blanche: 2.0,
    NoteType.Noire: 1.0,
    NoteType.Croche: 0.5,
    NoteType.DoubleCroche: 0.25,
    NoteType.Pause: 4.0,
    NoteType.DemiPause: 2.0,
    NoteType.Silence: 1.0,
    NoteType.DemiSilence: 0.5,
    NoteType.QuartSilence: 0.25,
}

# Semitones within the octave (counted from C) that are sharps.
_SHARP_DEGREES = frozenset({1, 3, 6, 8, 10})
# E2 is four semitones above C2.
_E2_OFFSET_FROM_C = 4


@dataclass
class Note:
    """A note or rest of the score, with its ties and beaming flags."""

    note_type: NoteType = NoteType.UNKNOWN
    note_value: NoteValue = NoteValue.UNKNOWN
    liee: bool = False
    deux_croche: bool = False
    deuxieme_deux_croche: bool = False

    def duration(self) -> float:
        """Length of the note in beats (a quarter note lasts one beat)."""
        try:
            return _DURATIONS[self.note_type]
        except KeyError:
            raise ValueError(f"note type {self.note_type.name} has no duration") from None

    def is_sharp(self) -> bool:
        """True when the pitch is a sharp (a black key)."""
        if self.note_value is NoteValue.UNKNOWN:
            return False
        degree = (int(self.note_value) + _E2_OFFSET_FROM_C) % 12
        return degree in _SHARP_DEGREES

    def symbol_name(self) -> str:
        """Qualified name of the note type, as used to pick its symbol."""
        return f"NoteType::{self.note_type.name}"

    def set_deux_croche(self, deux_croche: bool, derniere: bool) -> None:
        """Mark the note as part of a beamed pair of eighths, and whether it is the second."""
        self.deuxieme_deux_croche = derniere
        self.deux_croche = deux_croche