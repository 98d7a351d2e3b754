"""YAML configuration for custom modes, aliases and chord shapes.

Example ``miditools.yaml``::

	modes:
	  hungarian: [0, 2, 3, 6, 7, 8, 11]
	aliases:
	  gypsy: hungarian
	chord_shapes:
	  seventh: [0, 2, 4, 6]
	  ninth: [0, 2, 4, 6, 8]

An alias may point at a mode defined in the same file. A config is applied
all or nothing: every entry is checked before any is registered.
"""

import logging
import os
import typing

import yaml

import miditools.chords
import miditools.exceptions
import miditools.modes


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "miditools.yaml"

KNOWN_SECTIONS = ("modes", "aliases", "chord_shapes")


def load_config (config_path: str = DEFAULT_CONFIG_PATH) -> dict:

	"""
	Load configuration from a YAML file. A missing file yields an empty config.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		try:
			config = yaml.safe_load(f)
		except yaml.YAMLError as exc:
			raise miditools.exceptions.InvalidDefinition(
				f"Config file {config_path} is not valid YAML: {exc}"
			) from exc

	if config is None:
		return {}

	if not isinstance(config, dict):
		raise miditools.exceptions.InvalidDefinition(
			f"Config file {config_path} must contain a mapping at the top level"
		)

	return config


def _section (config: dict, name: str) -> typing.Dict[str, typing.Any]:

	value = config.get(name) or {}

	if not isinstance(value, dict):
		raise miditools.exceptions.InvalidDefinition(f"Config section {name!r} must be a mapping")

	return value


def apply_config (config: dict) -> None:

	"""Register the modes, aliases and chord shapes described by a config mapping.

	Nothing is registered unless every entry is valid.

	Raises:
		InvalidDefinition: If a section or entry is malformed.
		UnknownMode: If an alias targets a mode that is neither registered
			nor defined in the same config.
	"""

	for key in config:
		if key not in KNOWN_SECTIONS:
			logger.warning(f"Ignoring unknown config section {key!r}")

	mode_section = _section(config, "modes")
	alias_section = _section(config, "aliases")
	shape_section = _section(config, "chord_shapes")

	pending_aliases = {str(alias).strip().lower() for alias in alias_section}
	taken_aliases = set(miditools.modes.MODE_ALIASES) | pending_aliases

	modes = dict(
		miditools.modes.validate_mode(str(name), offsets, aliases=taken_aliases)
		for name, offsets in mode_section.items()
	)

	known_modes = set(miditools.modes.MODE_DEFINITIONS) | set(modes)

	aliases = dict(
		miditools.modes.validate_mode_alias(str(alias), mode, modes=known_modes)
		for alias, mode in alias_section.items()
	)

	shapes = dict(
		miditools.chords.validate_chord_shape(str(name), degrees)
		for name, degrees in shape_section.items()
	)

	for name, offsets in modes.items():
		miditools.modes.register_mode(name, offsets)

	for alias, mode in aliases.items():
		miditools.modes.register_mode_alias(alias, mode)

	for name, degrees in shapes.items():
		miditools.chords.register_chord_shape(name, degrees)


def configure (config_path: str = DEFAULT_CONFIG_PATH) -> dict:

	"""Load a YAML config file and apply it. Returns the loaded mapping."""

	config = load_config(config_path)
	apply_config(config)

	return config
