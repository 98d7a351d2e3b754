"""Pitch classes and MIDI note resolution.

Module-level constants:
- `PITCH_CLASS_NAMES`: The 12 note names from C through B, using sharps
- `NOTE_NAME_TO_PC`: Maps upper-cased note names to pitch classes (0-11)
- `FLAT_TO_SHARP`: Enharmonic flat spellings accepted on lookup (e.g. `"DB"` -> `"C#"`)

Lookups are case-insensitive: ``"c#"``, ``"C#"`` and ``"Db"`` all resolve to
pitch class 1. Only the sharp names are listed by `list_pitch_classes()`.

Octaves use scientific pitch notation (C4 = 60). Resolved notes are clamped
to the MIDI range, so ``resolve_midi_note("C", -2)`` is 0 and
``resolve_midi_note("B", 9)`` is 127.
"""

import typing

import miditools.constants
import miditools.exceptions


PITCH_CLASS_NAMES: typing.List[str] = [
	"C",
	"C#",
	"D",
	"D#",
	"E",
	"F",
	"F#",
	"G",
	"G#",
	"A",
	"A#",
	"B",
]

NOTE_NAME_TO_PC: typing.Dict[str, int] = {
	name: pc for pc, name in enumerate(PITCH_CLASS_NAMES)
}

FLAT_TO_SHARP: typing.Dict[str, str] = {
	"DB": "C#",
	"EB": "D#",
	"GB": "F#",
	"AB": "G#",
	"BB": "A#",
}


def list_pitch_classes () -> typing.List[str]:

	"""Return the 12 pitch-class names in offset order (C = 0 ... B = 11)."""

	return list(PITCH_CLASS_NAMES)


def pitch_class_offset (name: str) -> int:

	"""Validate a note name and return its pitch class (0-11).

	This is the lowest MIDI note carrying that name (C-1 = 0 ... B-1 = 11).

	Parameters:
		name: Note name, any case, sharp or flat (e.g. ``"C"``, ``"f#"``, ``"Bb"``).

	Returns:
		Pitch class integer (0-11).

	Raises:
		InvalidPitchClass: If the name is not recognised.

	Example:
		```python
		pitch_class_offset("C")   # → 0
		pitch_class_offset("f#")  # → 6
		pitch_class_offset("Bb")  # → 10
		```
	"""

	if not isinstance(name, str):
		raise miditools.exceptions.InvalidPitchClass(name, PITCH_CLASS_NAMES)

	key = name.strip().upper()
	key = FLAT_TO_SHARP.get(key, key)

	if key not in NOTE_NAME_TO_PC:
		raise miditools.exceptions.InvalidPitchClass(name, PITCH_CLASS_NAMES)

	return NOTE_NAME_TO_PC[key]


def clamp_midi_note (note: int) -> int:

	"""Clamp a note number to the valid MIDI range (0-127)."""

	return min(max(note, miditools.constants.LOWEST_MIDI_NOTE), miditools.constants.HIGHEST_MIDI_NOTE)


def resolve_midi_note (
	pitch_class: str = miditools.constants.DEFAULT_PITCH_CLASS,
	octave: int = miditools.constants.DEFAULT_OCTAVE
) -> int:

	"""Return the MIDI note number for a pitch class in an octave.

	An unknown name raises rather than resolving to a sentinel note, so a
	typo can never turn silently into C-1.

	Parameters:
		pitch_class: Note name (e.g. ``"C"``, ``"A"``, ``"C#"``). Defaults to C.
		octave: Octave in scientific pitch notation. Defaults to 4 (middle octave).

	Returns:
		MIDI note number, clamped to 0-127.

	Raises:
		InvalidPitchClass: If ``pitch_class`` is not recognised.

	Example:
		```python
		resolve_midi_note()          # → 60  (C4, middle C)
		resolve_midi_note("A", 4)    # → 69
		resolve_midi_note("G", 9)    # → 127
		resolve_midi_note("B", 9)    # → 127 (clamped)
		```
	"""

	offset = pitch_class_offset(pitch_class)
	note = offset + (octave + 1) * miditools.constants.SEMITONES_PER_OCTAVE

	return clamp_midi_note(note)


def note_name (midi_note: int) -> str:

	"""Return a human-friendly name such as ``"A4"`` for a MIDI note number.

	Raises:
		InvalidMidiNote: If the note is not an integer in 0-127.
	"""

	if (
		not isinstance(midi_note, int)
		or isinstance(midi_note, bool)
		or not miditools.constants.LOWEST_MIDI_NOTE <= midi_note <= miditools.constants.HIGHEST_MIDI_NOTE
	):
		raise miditools.exceptions.InvalidMidiNote(midi_note)

	octave, pc = divmod(midi_note, miditools.constants.SEMITONES_PER_OCTAVE)

	return f"{PITCH_CLASS_NAMES[pc]}{octave - 1}"
