import typing

import pytest

import miditools.chords
import miditools.modes


@pytest.fixture(autouse=True)
def restore_registries () -> typing.Iterator[None]:

	"""Undo any custom modes, aliases or chord shapes registered by a test."""

	modes = {name: list(offsets) for name, offsets in miditools.modes.MODE_DEFINITIONS.items()}
	aliases = dict(miditools.modes.MODE_ALIASES)
	shapes = {name: list(degrees) for name, degrees in miditools.chords.CHORD_SHAPES.items()}

	yield

	miditools.modes.MODE_DEFINITIONS.clear()
	miditools.modes.MODE_DEFINITIONS.update(modes)
	miditools.modes.MODE_ALIASES.clear()
	miditools.modes.MODE_ALIASES.update(aliases)
	miditools.chords.CHORD_SHAPES.clear()
	miditools.chords.CHORD_SHAPES.update(shapes)
