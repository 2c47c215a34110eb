"""Hiding text in the least significant bits of audio samples."""

from __future__ import annotations

from os import PathLike
from pathlib import Path

from wavlsb.bits import WORD_BITS, bits_to_int, char_to_bits, int_to_bits

HEADER_SAMPLES = 176

StrPath = str | PathLike[str]


def _check_sample_size(bytes_per_sample: int) -> None:
    if bytes_per_sample < 1:
        raise ValueError("bytes_per_sample must be at least 1")


def _payload_bits(message: bytes) -> str:
    body = "".join(char_to_bits(byte) for byte in message)
    return int_to_bits(len(body)) + body


def embed(audio: bytes, message: bytes, bytes_per_sample: int) -> bytes:
    """Return ``audio`` with ``message`` written into the low bit of each sample.

    The first 176 samples are copied untouched, a 32-bit length prefix comes
    first, bits that do not fit are dropped, and a trailing partial sample is
    discarded.
    """
    _check_sample_size(bytes_per_sample)
    skip = HEADER_SAMPLES * bytes_per_sample
    if len(audio) <= skip:
        return bytes(audio)
    header, body = audio[:skip], audio[skip:]
    full = len(body) - len(body) % bytes_per_sample
    samples = bytearray(body[:full])
    last_bytes = range(bytes_per_sample - 1, full, bytes_per_sample)
    for index, bit in zip(last_bytes, _payload_bits(message)):
        samples[index] = (samples[index] & 0xFE) | int(bit)
    return bytes(header) + bytes(samples)


def recover(audio: bytes, bytes_per_sample: int) -> bytes:
    """Return the message hidden in ``audio`` by :func:`embed`."""
    _check_sample_size(bytes_per_sample)
    skip = HEADER_SAMPLES * bytes_per_sample
    bits = "".join(str(byte & 1) for byte in audio[skip + bytes_per_sample - 1 :: bytes_per_sample])
    if len(bits) < WORD_BITS:
        return b""
    length = max(bits_to_int(bits[:WORD_BITS]), 0)
    payload = bits[WORD_BITS : WORD_BITS + length]
    return bytes(
        int(payload[start : start + 8], 2)
        for start in range(0, len(payload) - len(payload) % 8, 8)
    )


def hide(
    audio_path: StrPath,
    message_path: StrPath,
    output_path: StrPath,
    bytes_per_sample: int,
) -> None:
    """Embed the first line of the message file into a copy of the audio file."""
    audio = Path(audio_path).read_bytes()
    message = Path(message_path).read_bytes().split(b"\n", 1)[0]
    Path(output_path).write_bytes(embed(audio, message, bytes_per_sample))


def extract(audio_path: StrPath, output_path: StrPath, bytes_per_sample: int) -> bytes:
    """Write the message hidden in the audio file to ``output_path`` and return it."""
    message = recover(Path(audio_path).read_bytes(), bytes_per_sample)
    Path(output_path).write_bytes(message)
    return message