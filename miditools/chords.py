"""Chord construction from scales.

A chord shape is a list of scale-degree indices within one octave; the
built-in ``triad`` shape ``[0, 2, 4]`` picks the root, third and fifth.
When more notes are requested than the shape holds, the shape repeats one
octave of scale degrees (7) higher each time round:

	triad, 5 notes → degrees [0, 2, 4, 7, 9]

Degrees of 7 and above wrap back into the scale and are transposed up by
12 semitones per wrap, so the scale itself only ever needs 7 notes.

Module-level constants:
- `CHORD_SHAPES`: Registered chord shapes, name -> scale-degree indices
- `DEFAULT_CHORD_SHAPE`: ``"triad"``
"""

import logging
import typing

import miditools.constants
import miditools.exceptions
import miditools.modes
import miditools.scales


logger = logging.getLogger(__name__)


CHORD_SHAPES: typing.Dict[str, typing.List[int]] = {
	"triad": [0, 2, 4],
}

DEFAULT_CHORD_SHAPE = "triad"
DEFAULT_NOTE_COUNT = 3


def list_chord_shapes () -> typing.List[str]:

	"""Return the registered chord shape names."""

	return list(CHORD_SHAPES)


def get_chord_shape (name: str) -> typing.List[int]:

	"""Return a copy of a registered chord shape.

	Raises:
		UnknownChordShape: If no shape is registered under that name.
	"""

	if not isinstance(name, str) or name.strip().lower() not in CHORD_SHAPES:
		raise miditools.exceptions.UnknownChordShape(name, list_chord_shapes())

	return list(CHORD_SHAPES[name.strip().lower()])


def validate_chord_shape (name: str, degrees: typing.List[int]) -> typing.Tuple[str, typing.List[int]]:

	"""Check a chord shape definition without registering it.

	Returns:
		``(key, degrees)``: the lower-cased name and a copy of the degrees.

	Raises:
		InvalidDefinition: If the name or degrees are malformed.
	"""

	if not isinstance(name, str) or not name.strip():
		raise miditools.exceptions.InvalidDefinition(f"Chord shape name must be a non-empty string, got {name!r}")

	key = name.strip().lower()

	if not isinstance(degrees, (list, tuple)):
		raise miditools.exceptions.InvalidDefinition(f"Chord shape {key!r} must be a list of degrees")

	degrees = list(degrees)

	if not degrees:
		raise miditools.exceptions.InvalidDefinition(f"Chord shape {key!r} needs at least one degree")

	if not all(isinstance(d, int) and not isinstance(d, bool) and d >= 0 for d in degrees):
		raise miditools.exceptions.InvalidDefinition(
			f"Chord shape {key!r} degrees must be non-negative integers: {degrees}"
		)

	return key, degrees


def register_chord_shape (name: str, degrees: typing.List[int]) -> None:

	"""Register a custom chord shape.

	Parameters:
		name: Shape name (stored lower-case).
		degrees: Non-empty list of non-negative scale-degree indices. Indices
			of 7 and above reach into the next octave.

	Raises:
		InvalidDefinition: If the name or degrees are malformed.

	Example:
		```python
		register_chord_shape("seventh", [0, 2, 4, 6])
		build_chord("C", 4, "ionian", 4, shape="seventh")  # → [60, 64, 67, 71]
		```
	"""

	key, degrees = validate_chord_shape(name, degrees)

	CHORD_SHAPES[key] = degrees
	logger.info(f"Registered chord shape {key!r}: {degrees}")


def chord_degrees (shape: typing.Sequence[int], note_count: int) -> typing.List[int]:

	"""Extend a chord shape to ``note_count`` scale degrees.

	Each full pass over the shape adds a scale's worth of degrees (7).

	Example:
		```python
		chord_degrees([0, 2, 4], 3)  # → [0, 2, 4]
		chord_degrees([0, 2, 4], 5)  # → [0, 2, 4, 7, 9]
		```
	"""

	n = len(shape)
	step = miditools.constants.DEGREES_PER_SCALE

	return [shape[i % n] + step * (i // n) for i in range(note_count)]


def degree_to_note (scale: typing.Sequence[int], degree: int) -> int:

	"""Return the MIDI note for a scale degree, wrapping into other octaves.

	Degrees 0-6 index the scale directly; each further 7 degrees adds an
	octave. Floor division keeps negative degrees correct (degree -1 is the
	7th scale note one octave down).

	Example:
		```python
		c_major = [60, 62, 64, 65, 67, 69, 71]
		degree_to_note(c_major, 2)   # → 64
		degree_to_note(c_major, 7)   # → 72
		degree_to_note(c_major, -1)  # → 59
		```
	"""

	size = miditools.constants.DEGREES_PER_SCALE
	octave_offset = degree // size
	index = ((degree % size) + size) % size

	return scale[index] + miditools.constants.SEMITONES_PER_OCTAVE * octave_offset


def build_chord (
	root_pitch_class: str = miditools.constants.DEFAULT_PITCH_CLASS,
	octave: int = miditools.constants.DEFAULT_OCTAVE,
	mode: str = miditools.modes.DEFAULT_MODE,
	note_count: int = DEFAULT_NOTE_COUNT,
	shape: str = DEFAULT_CHORD_SHAPE
) -> typing.List[int]:

	"""Return the MIDI notes of a chord built on the first degree of a scale.

	Parameters:
		root_pitch_class: Root note name. Defaults to C.
		octave: Octave of the root in scientific pitch notation. Defaults to 4.
		mode: Mode name or alias. Defaults to ionian.
		note_count: Number of chord tones (default 3). Values beyond the shape
			length continue the shape in higher octaves.
		shape: Registered chord shape name. Defaults to ``"triad"``.

	Returns:
		New list of ``note_count`` MIDI note numbers, not clamped.

	Raises:
		InvalidNoteCount: If ``note_count`` is not a positive integer.
		UnknownChordShape: If the shape is not registered.
		UnknownMode: If the mode is not recognised.
		InvalidPitchClass: If the root name is not recognised.

	Example:
		```python
		build_chord("C", 4, "ionian")      # → [60, 64, 67]
		build_chord("A", 4, "aeolian")     # → [69, 72, 76]
		build_chord("C", 4, "ionian", 4)   # → [60, 64, 67, 72]
		```
	"""

	if not isinstance(note_count, int) or isinstance(note_count, bool) or note_count <= 0:
		raise miditools.exceptions.InvalidNoteCount(note_count)

	degrees = chord_degrees(get_chord_shape(shape), note_count)
	scale = miditools.scales.build_scale(root_pitch_class, octave, mode)

	return [degree_to_note(scale, degree) for degree in degrees]
