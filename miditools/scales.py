"""Scale construction.

A scale is a list of 7 MIDI note numbers: the resolved root plus each offset
of the chosen mode. Scale notes are not clamped, so a root near the top of
the MIDI range can produce values above 127.
"""

import typing

import miditools.constants
import miditools.modes
import miditools.notes


def build_scale (
	root_pitch_class: str = miditools.constants.DEFAULT_PITCH_CLASS,
	octave: int = miditools.constants.DEFAULT_OCTAVE,
	mode: str = miditools.modes.DEFAULT_MODE
) -> typing.List[int]:

	"""Return the 7 MIDI note numbers of a scale.

	Parameters:
		root_pitch_class: Root note name (e.g. ``"C"``, ``"F#"``). Defaults to C.
		octave: Octave of the root in scientific pitch notation. Defaults to 4.
		mode: Mode name or alias (e.g. ``"ionian"``, ``"minor"``). Defaults to ionian.

	Returns:
		New list of 7 MIDI note numbers in ascending mode order.

	Raises:
		UnknownMode: If the mode is not recognised.
		InvalidPitchClass: If the root name is not recognised.

	Example:
		```python
		build_scale("C", 4, "ionian")   # → [60, 62, 64, 65, 67, 69, 71]
		build_scale("A", 4, "aeolian")  # → [69, 71, 72, 74, 76, 77, 79]
		```
	"""

	offsets = miditools.modes.get_mode(mode)
	root = miditools.notes.resolve_midi_note(root_pitch_class, octave)

	return [root + offset for offset in offsets]
