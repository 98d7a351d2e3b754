import pytest

import miditools
import miditools.exceptions
import miditools.modes
import miditools.scales


def test_canonical_mode_names () -> None:

	"""Nine canonical modes in table order, aliases excluded."""

	assert miditools.modes.list_mode_names() == [
		"ionian", "dorian", "phrygian", "lydian", "mixolydian",
		"aeolian", "locrian", "harmonic", "melodic",
	]


def test_every_mode_has_seven_ascending_offsets () -> None:

	for name in miditools.modes.list_mode_names():
		offsets = miditools.modes.get_mode(name)
		assert len(offsets) == 7, name
		assert offsets[0] == 0, name
		assert offsets == sorted(offsets), name
		assert all(0 <= o <= 11 for o in offsets), name


def test_aliases () -> None:

	assert miditools.modes.list_mode_aliases() == {"major": "ionian", "minor": "aeolian", "jazz": "melodic"}
	assert miditools.modes.resolve_mode_name("major") == "ionian"
	assert miditools.modes.resolve_mode_name("minor") == "aeolian"
	assert miditools.modes.resolve_mode_name("jazz") == "melodic"


def test_mode_names_are_case_insensitive () -> None:

	assert miditools.modes.resolve_mode_name("Dorian") == "dorian"
	assert miditools.modes.resolve_mode_name("MAJOR") == "ionian"


def test_get_mode_returns_copy () -> None:

	"""Editing the returned offsets does not touch the table."""

	offsets = miditools.modes.get_mode("ionian")
	offsets[1] = 99

	assert miditools.modes.get_mode("ionian") == [0, 2, 4, 5, 7, 9, 11]


def test_unknown_mode () -> None:

	with pytest.raises(miditools.exceptions.UnknownMode, match="'blues'"):
		miditools.modes.get_mode("blues")


def test_unknown_mode_non_string () -> None:

	with pytest.raises(miditools.exceptions.UnknownMode):
		miditools.modes.resolve_mode_name(3)


# ── register_mode ───────────────────────────────────────────────────

def test_register_mode () -> None:

	"""A registered mode works with build_scale."""

	miditools.modes.register_mode("Hungarian", [0, 2, 3, 6, 7, 8, 11])

	assert "hungarian" in miditools.modes.list_mode_names()
	assert miditools.scales.build_scale("C", 4, "hungarian") == [60, 62, 63, 66, 67, 68, 71]


def test_register_mode_via_package () -> None:

	miditools.register_mode("test_pkg", [0, 1, 4, 5, 7, 8, 11])

	assert miditools.build_scale("C", 4, "test_pkg") == [60, 61, 64, 65, 67, 68, 71]


def test_register_mode_must_have_seven_offsets () -> None:

	with pytest.raises(miditools.exceptions.InvalidDefinition, match="exactly 7"):
		miditools.modes.register_mode("bad", [0, 3, 7])


def test_register_mode_must_start_with_zero () -> None:

	with pytest.raises(miditools.exceptions.InvalidDefinition, match="start with 0"):
		miditools.modes.register_mode("bad", [1, 2, 3, 4, 5, 6, 7])


def test_register_mode_values_in_range () -> None:

	with pytest.raises(miditools.exceptions.InvalidDefinition, match="between 0 and 11"):
		miditools.modes.register_mode("bad", [0, 2, 4, 5, 7, 9, 14])


def test_register_mode_rejects_non_integers () -> None:

	with pytest.raises(miditools.exceptions.InvalidDefinition, match="integers"):
		miditools.modes.register_mode("bad", [0, 2, 4, 5, 7, 9, "B"])


def test_register_mode_rejects_alias_name () -> None:

	with pytest.raises(miditools.exceptions.InvalidDefinition, match="alias"):
		miditools.modes.register_mode("major", [0, 2, 4, 5, 7, 9, 11])


# ── register_mode_alias ─────────────────────────────────────────────

def test_register_mode_alias () -> None:

	miditools.modes.register_mode_alias("natural_minor", "aeolian")

	assert miditools.scales.build_scale("A", 4, "natural_minor") == miditools.scales.build_scale("A", 4, "aeolian")


def test_register_alias_cannot_shadow_mode () -> None:

	with pytest.raises(miditools.exceptions.InvalidDefinition, match="shadow"):
		miditools.modes.register_mode_alias("dorian", "ionian")


def test_register_alias_target_must_exist () -> None:

	with pytest.raises(miditools.exceptions.UnknownMode):
		miditools.modes.register_mode_alias("spooky", "hirajoshi")


def test_register_alias_target_must_be_canonical () -> None:

	"""Aliases point at modes, not at other aliases."""

	with pytest.raises(miditools.exceptions.UnknownMode):
		miditools.modes.register_mode_alias("happy", "major")
