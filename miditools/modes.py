"""Mode definitions.

A mode is a list of 7 semitone offsets from the scale root. Aliases are plain
name substitutions consulted before the mode table, so ``"major"`` and
``"ionian"`` share one definition.

Module-level constants:
- `MODE_DEFINITIONS`: Canonical mode names mapped to their offsets, in display order
- `MODE_ALIASES`: Alias names mapped to canonical mode names

Custom modes and aliases can be added with `register_mode()` and
`register_mode_alias()`, or from a config file (see `miditools.config`).
"""

import logging
import typing

import miditools.constants
import miditools.exceptions


logger = logging.getLogger(__name__)


MODE_DEFINITIONS: typing.Dict[str, typing.List[int]] = {

	# -- Diatonic heptatonic scales --

	"ionian": [0, 2, 4, 5, 7, 9, 11],		# W-W-H-W-W-W-H (major)
	"dorian": [0, 2, 3, 5, 7, 9, 10],		# W-H-W-W-W-H-W
	"phrygian": [0, 1, 3, 5, 7, 8, 10],		# H-W-W-W-H-W-W
	"lydian": [0, 2, 4, 6, 7, 9, 11],		# W-W-W-H-W-W-H
	"mixolydian": [0, 2, 4, 5, 7, 9, 10],	# W-W-H-W-W-H-W
	"aeolian": [0, 2, 3, 5, 7, 8, 10],		# W-H-W-W-H-W-W (natural minor)
	"locrian": [0, 1, 3, 5, 6, 8, 10],		# H-W-W-H-W-W-W

	# -- Non-diatonic heptatonic scales --

	"harmonic": [0, 2, 3, 5, 7, 8, 11],		# Harmonic minor (aeolian #7)
	"melodic": [0, 2, 3, 5, 7, 9, 11],		# Ascending melodic / jazz minor (ionian b3)
}

MODE_ALIASES: typing.Dict[str, str] = {
	"major": "ionian",
	"minor": "aeolian",
	"jazz": "melodic",
}

DEFAULT_MODE = "ionian"


def _normalise (name: typing.Any) -> str:

	if not isinstance(name, str):
		raise miditools.exceptions.UnknownMode(name, list_mode_names())

	return name.strip().lower()


def list_mode_names () -> typing.List[str]:

	"""Return the canonical mode names in table order. Aliases are not included."""

	return list(MODE_DEFINITIONS)


def list_mode_aliases () -> typing.Dict[str, str]:

	"""Return a copy of the alias table (alias -> canonical mode name)."""

	return dict(MODE_ALIASES)


def resolve_mode_name (name: str) -> str:

	"""Return the canonical mode name for a mode or alias.

	Parameters:
		name: Mode name or alias, any case (e.g. ``"Dorian"``, ``"minor"``).

	Returns:
		Canonical mode name (e.g. ``"aeolian"`` for ``"minor"``).

	Raises:
		UnknownMode: If the name, after alias resolution, is not a known mode.
	"""

	key = _normalise(name)
	key = MODE_ALIASES.get(key, key)

	if key not in MODE_DEFINITIONS:
		raise miditools.exceptions.UnknownMode(name, list_mode_names() + sorted(MODE_ALIASES))

	return key


def get_mode (name: str) -> typing.List[int]:

	"""Return a copy of the 7 semitone offsets for a mode or alias.

	Example:
		```python
		get_mode("ionian")  # → [0, 2, 4, 5, 7, 9, 11]
		get_mode("minor")   # → [0, 2, 3, 5, 7, 8, 10]
		```
	"""

	return list(MODE_DEFINITIONS[resolve_mode_name(name)])


def validate_mode (
	name: str,
	offsets: typing.List[int],
	aliases: typing.Optional[typing.Collection[str]] = None
) -> typing.Tuple[str, typing.List[int]]:

	"""Check a custom mode definition without registering it.

	Parameters:
		name: Mode name.
		offsets: 7 semitone offsets from the root, starting with 0, each 0-11.
		aliases: Alias names the mode name may not clash with. Defaults to
			the registered aliases.

	Returns:
		``(key, offsets)``: the lower-cased name and a copy of the offsets.

	Raises:
		InvalidDefinition: If the offsets are malformed or the name is an alias.
	"""

	if aliases is None:
		aliases = MODE_ALIASES

	if not isinstance(name, str) or not name.strip():
		raise miditools.exceptions.InvalidDefinition(f"Mode name must be a non-empty string, got {name!r}")

	key = name.strip().lower()

	if key in aliases:
		raise miditools.exceptions.InvalidDefinition(f"Mode name {key!r} is already an alias")

	if not isinstance(offsets, (list, tuple)):
		raise miditools.exceptions.InvalidDefinition(f"Mode {key!r} must be a list of offsets")

	offsets = list(offsets)

	if len(offsets) != miditools.constants.DEGREES_PER_SCALE:
		raise miditools.exceptions.InvalidDefinition(
			f"Mode {key!r} needs exactly {miditools.constants.DEGREES_PER_SCALE} offsets, got {len(offsets)}"
		)

	if not all(isinstance(i, int) and not isinstance(i, bool) for i in offsets):
		raise miditools.exceptions.InvalidDefinition(f"Mode {key!r} offsets must be integers: {offsets}")

	if offsets[0] != 0:
		raise miditools.exceptions.InvalidDefinition(f"Mode {key!r} offsets must start with 0")

	if any(i < 0 or i > 11 for i in offsets):
		raise miditools.exceptions.InvalidDefinition(f"Mode {key!r} offsets must be between 0 and 11")

	return key, offsets


def register_mode (name: str, offsets: typing.List[int]) -> None:

	"""Register a custom mode.

	After registration the name can be passed as ``mode`` to
	`miditools.scales.build_scale()` and `miditools.chords.build_chord()`.
	Registering an existing mode name replaces its offsets.

	Parameters:
		name: Mode name (stored lower-case).
		offsets: 7 semitone offsets from the root, starting with 0, each 0-11.

	Raises:
		InvalidDefinition: If the offsets are malformed or the name is an alias.

	Example:
		```python
		import miditools

		miditools.register_mode("hungarian", [0, 2, 3, 6, 7, 8, 11])
		miditools.build_scale("A", 3, "hungarian")
		```
	"""

	key, offsets = validate_mode(name, offsets)

	MODE_DEFINITIONS[key] = offsets
	logger.info(f"Registered mode {key!r}: {offsets}")


def validate_mode_alias (
	alias: str,
	mode: str,
	modes: typing.Optional[typing.Collection[str]] = None
) -> typing.Tuple[str, str]:

	"""Check an alias definition without registering it.

	``modes`` is the set of canonical mode names the alias may target and
	may not shadow. Defaults to the registered modes.

	Returns:
		``(alias_key, target)``, both lower-cased.

	Raises:
		InvalidDefinition: If the alias clashes with a mode name.
		UnknownMode: If the target mode does not exist.
	"""

	if modes is None:
		modes = MODE_DEFINITIONS

	if not isinstance(alias, str) or not alias.strip():
		raise miditools.exceptions.InvalidDefinition(f"Alias must be a non-empty string, got {alias!r}")

	key = alias.strip().lower()

	if key in modes:
		raise miditools.exceptions.InvalidDefinition(f"Alias {key!r} would shadow the mode of the same name")

	target = mode.strip().lower() if isinstance(mode, str) else None

	if target not in modes:
		raise miditools.exceptions.UnknownMode(mode, sorted(modes))

	return key, target


def register_mode_alias (alias: str, mode: str) -> None:

	"""Register an alternative name for an existing mode.

	The target must be a canonical mode name, not another alias, and the alias
	may not shadow a canonical mode.

	Raises:
		InvalidDefinition: If the alias clashes with a mode name.
		UnknownMode: If the target mode does not exist.
	"""

	key, target = validate_mode_alias(alias, mode)

	MODE_ALIASES[key] = target
	logger.info(f"Registered mode alias {key!r} -> {target!r}")
