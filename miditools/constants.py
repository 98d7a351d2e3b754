"""MIDI range constants.

Octaves follow scientific pitch notation with **C4 = 60** (Middle C), the
convention used by the MIDI Manufacturers Association. Some DAWs (Ableton
among them) call the same note C3.

- ``LOWEST_MIDI_NOTE = 0`` - C-1
- ``HIGHEST_MIDI_NOTE = 127`` - G9
- ``MIDDLE_C = 60`` - C4
"""

LOWEST_MIDI_NOTE = 0	# C-1
HIGHEST_MIDI_NOTE = 127	# G9
MIDDLE_C = 60

DEFAULT_PITCH_CLASS = "C"
DEFAULT_OCTAVE = 4

SEMITONES_PER_OCTAVE = 12
DEGREES_PER_SCALE = 7
