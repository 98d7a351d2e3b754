"""Errors raised by miditools.

Every error derives from ``MidiToolsError``, which is itself a ``ValueError``
so that callers already guarding bad names with ``except ValueError`` keep
working. Each error keeps the rejected value as an attribute.
"""

import typing


class MidiToolsError (ValueError):

	"""Base class for all miditools errors."""


class InvalidPitchClass (MidiToolsError):

	"""A pitch-class name is not one of the 12 known note names."""

	def __init__ (self, name: typing.Any, valid: typing.Sequence[str]) -> None:

		self.name = name
		super().__init__(
			f"Unknown pitch class: {name!r}. Expected one of {', '.join(valid)}."
		)


class UnknownMode (MidiToolsError):

	"""A mode name (after alias resolution) is not in the mode table."""

	def __init__ (self, name: typing.Any, available: typing.Sequence[str]) -> None:

		self.name = name
		super().__init__(f"Unknown mode: {name!r}. Available: {', '.join(available)}")


class InvalidNoteCount (MidiToolsError):

	"""A chord was requested with a non-positive number of notes."""

	def __init__ (self, count: typing.Any) -> None:

		self.count = count
		super().__init__(f"Chord note count must be a positive integer, got {count!r}")


class UnknownChordShape (MidiToolsError):

	"""A chord shape name is not registered."""

	def __init__ (self, name: typing.Any, available: typing.Sequence[str]) -> None:

		self.name = name
		super().__init__(f"Unknown chord shape: {name!r}. Available: {', '.join(available)}")


class InvalidDefinition (MidiToolsError):

	"""A custom mode, alias or chord shape definition is malformed."""


class InvalidMidiNote (MidiToolsError):

	"""A MIDI note number is not an integer in 0-127."""

	def __init__ (self, note: typing.Any) -> None:

		self.note = note
		super().__init__(f"MIDI note must be an integer in range (0-127), got {note!r}")
