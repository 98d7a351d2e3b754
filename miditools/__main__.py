"""Print a scale and chord.

Examples:
	python -m miditools A --mode aeolian
	python -m miditools C --octave 3 --notes 5
	python -m miditools D --mode dorian --shape seventh --config miditools.yaml
"""

import argparse
import logging
import typing

import miditools.chords
import miditools.config
import miditools.constants
import miditools.exceptions
import miditools.modes
import miditools.scales


logger = logging.getLogger(__name__)


def build_parser () -> argparse.ArgumentParser:

	parser = argparse.ArgumentParser(prog="miditools", description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
	parser.add_argument("root",     nargs="?", default=miditools.constants.DEFAULT_PITCH_CLASS, help="Root note name (default: C)")
	parser.add_argument("--octave", type=int,  default=miditools.constants.DEFAULT_OCTAVE,      help="Octave, C4 = 60 (default: 4)")
	parser.add_argument("--mode",   type=str,  default=miditools.modes.DEFAULT_MODE,            help="Mode or alias (default: ionian)")
	parser.add_argument("--notes",  type=int,  default=miditools.chords.DEFAULT_NOTE_COUNT,     help="Chord note count (default: 3)")
	parser.add_argument("--shape",  type=str,  default=miditools.chords.DEFAULT_CHORD_SHAPE,    help="Chord shape (default: triad)")
	parser.add_argument("--config", type=str,  default=None,                                    help="YAML file with custom modes, aliases and chord shapes")

	return parser


def main (argv: typing.Optional[typing.List[str]] = None) -> None:

	parser = build_parser()
	args = parser.parse_args(argv)

	logging.basicConfig(level=logging.INFO)
	logger.info(f"miditools: {args.root} {args.mode}, octave {args.octave}")

	try:
		if args.config is not None:
			miditools.config.configure(args.config)

		scale = miditools.scales.build_scale(args.root, args.octave, args.mode)
		chord = miditools.chords.build_chord(args.root, args.octave, args.mode, args.notes, args.shape)

	except miditools.exceptions.MidiToolsError as exc:
		parser.error(str(exc))

	print(f"The {args.root} {args.mode} scale: {' '.join(str(n) for n in scale)}")
	print(f"The {args.root} {args.mode} chord: {' '.join(str(n) for n in chord)}")


if __name__ == "__main__":
	main()
