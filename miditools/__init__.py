"""
miditools - note, scale and chord lookups as MIDI note numbers.

Octave designations use scientific pitch notation with equal temperament
throughout: C4 is middle C, MIDI note 60 (about 261.63 Hz). Some DAWs,
Ableton among them, call the same note C3.

- **Notes.** ``resolve_midi_note("A", 4)`` → 69. Names are
  case-insensitive and flats are accepted (``"Bb"`` == ``"A#"``).
  Results are clamped to 0-127.
- **Scales.** ``build_scale("A", 4, "aeolian")`` →
  ``[69, 71, 72, 74, 76, 77, 79]``. Nine modes ship: ionian, dorian,
  phrygian, lydian, mixolydian, aeolian, locrian, harmonic and melodic,
  with the aliases major, minor and jazz.
- **Chords.** ``build_chord("A", 4, "aeolian", 3)`` → ``[69, 72, 76]``.
  Asking for more notes than the chord shape holds continues the shape an
  octave higher.
- **Customisation.** ``register_mode()``, ``register_mode_alias()`` and
  ``register_chord_shape()``, or ``configure("miditools.yaml")``.

No audio, MIDI I/O or timing: only note numbers.

Minimal example:

    ```python
    import miditools

    miditools.build_scale("C")                # [60, 62, 64, 65, 67, 69, 71]
    miditools.build_chord("A", mode="minor")  # [69, 72, 76]
    miditools.build_chord("C", note_count=4)  # [60, 64, 67, 72]
    ```
"""

import miditools.chords
import miditools.config
import miditools.exceptions
import miditools.modes
import miditools.notes
import miditools.scales


list_pitch_classes = miditools.notes.list_pitch_classes
resolve_midi_note = miditools.notes.resolve_midi_note
list_mode_names = miditools.modes.list_mode_names
build_scale = miditools.scales.build_scale
build_chord = miditools.chords.build_chord

register_mode = miditools.modes.register_mode
register_mode_alias = miditools.modes.register_mode_alias
register_chord_shape = miditools.chords.register_chord_shape
configure = miditools.config.configure

MidiToolsError = miditools.exceptions.MidiToolsError
InvalidPitchClass = miditools.exceptions.InvalidPitchClass
UnknownMode = miditools.exceptions.UnknownMode
InvalidNoteCount = miditools.exceptions.InvalidNoteCount
UnknownChordShape = miditools.exceptions.UnknownChordShape
InvalidDefinition = miditools.exceptions.InvalidDefinition
InvalidMidiNote = miditools.exceptions.InvalidMidiNote
