"""Interactive menu for hiding text in and extracting it from WAVE files."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from wavlsb.header import WaveFormatError, load_wave_header
from wavlsb.lsb import extract, hide

MENU = (
    "1. Embed text into a WAV file.\n"
    "2. Extract hidden text from a WAV file.\n"
    "3. Exit.\n"
)


def _embed(args: argparse.Namespace) -> None:
    hide(args.audio, args.message, args.output_audio, args.bytes_per_sample)
    load_wave_header(args.output_audio)
    print("Message successfully embedded in the audio file.")


def _extract(args: argparse.Namespace) -> None:
    extract(args.output_audio, args.output_message, args.bytes_per_sample)
    first_line = Path(args.output_message).read_bytes().split(b"\n", 1)[0]
    print(f"Extracted message: {first_line.decode('utf-8', errors='replace')}")


def _info(args: argparse.Namespace) -> None:
    header = load_wave_header(args.audio)
    print(f"Subchunk1 size: {header.subchunk1_size}")
    print(f"Audio format (PCM): {header.audio_format}")
    print(f"Channels: {header.num_channels}")
    print(f"Sample rate: {header.sample_rate} Hz")
    print(f"Bytes per second (byte rate): {header.byte_rate}")
    print(f"Bytes per sample frame: {header.block_align}")
    print(f"Bits per sample: {header.bits_per_sample}")
    print(f"Subchunk2ID: {header.subchunk2_id.decode('latin-1')}")
    print(f"Subchunk2 size: {header.subchunk2_size}")
    seconds = header.duration_seconds()
    print(f"Duration in seconds: {seconds:g}")
    print(f"Duration in minutes: {int(seconds / 60)}")


_ACTIONS = {1: _embed, 2: _extract, 4: _info}


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="wavlsb", description="Hide text in the low bits of a WAV file."
    )
    parser.add_argument("--audio", default="input.wav", help="source WAV file")
    parser.add_argument("--message", default="message.txt", help="text file to hide")
    parser.add_argument(
        "--output-audio", default="modified.wav", help="WAV file with the hidden text"
    )
    parser.add_argument(
        "--output-message",
        default="output_message.txt",
        help="file receiving the extracted text",
    )
    parser.add_argument("--bytes-per-sample", type=int, default=1)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the menu until the user exits or input ends."""
    args = _parse_args(argv)
    while True:
        print(MENU)
        try:
            line = input("Enter a number: ")
        except EOFError:
            return 0
        print()
        try:
            choice = int(line.strip())
        except ValueError:
            choice = None
        if choice == 3:
            return 0
        action = _ACTIONS.get(choice)
        if action is None:
            print("Invalid choice. Try again.\n")
            continue
        try:
            action(args)
        except (OSError, WaveFormatError, ValueError) as exc:
            print(f"Error: {exc}", file=sys.stderr)
        print()


if __name__ == "__main__":
    sys.exit(main())