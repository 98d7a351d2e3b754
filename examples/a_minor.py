import logging

import miditools
import miditools.notes

logging.basicConfig(level=logging.INFO)

# A natural minor, rooted on A4 (MIDI 69).
scale = miditools.build_scale("A", 4, "aeolian")
print("The A minor scale:", " ".join(str(n) for n in scale))

chord = miditools.build_chord("A", 4, "aeolian", 3)
print("The A minor chord:", " ".join(miditools.notes.note_name(n) for n in chord))

# Shapes beyond the triad are registered by name.
miditools.register_chord_shape("ninth", [0, 2, 4, 6, 8])
chord = miditools.build_chord("A", 4, "aeolian", 5, shape="ninth")
print("The A minor ninth chord:", " ".join(str(n) for n in chord))
