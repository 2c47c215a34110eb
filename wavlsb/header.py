"""Reading the header of a WAVE file."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from os import PathLike
from typing import BinaryIO

DATA_CHUNK_OFFSET = 176

_FORMAT_CHUNK = struct.Struct("<4sI4s4sIHHIIHH")
_DATA_CHUNK = struct.Struct("<4sI")


class WaveFormatError(ValueError):
    """Raised when a stream does not hold a usable WAVE header."""


@dataclass(frozen=True)
class WaveHeader:
    """Fields of a RIFF/WAVE header."""

    chunk_id: bytes
    chunk_size: int
    format: bytes
    subchunk1_id: bytes
    subchunk1_size: int
    audio_format: int
    num_channels: int
    sample_rate: int
    byte_rate: int
    block_align: int
    bits_per_sample: int
    subchunk2_id: bytes
    subchunk2_size: int

    def duration_seconds(self) -> float:
        """Duration computed from the data chunk size, scaled down by 1000."""
        bytes_per_sample = self.bits_per_sample // 8
        if not (bytes_per_sample and self.num_channels and self.sample_rate):
            raise WaveFormatError("header does not describe a playable stream")
        return (
            self.subchunk2_size
            / bytes_per_sample
            / self.num_channels
            / self.sample_rate
            / 1000
        )


def read_wave_header(stream: BinaryIO) -> WaveHeader:
    """Parse a WAVE header from a seekable binary stream."""
    head = stream.read(_FORMAT_CHUNK.size)
    if head[:4] != b"RIFF":
        raise WaveFormatError("invalid RIFF chunk id")
    if head[8:12] != b"WAVE":
        raise WaveFormatError("invalid WAVE format tag")
    if head[12:16] != b"fmt ":
        raise WaveFormatError("invalid fmt subchunk id")
    if len(head) < _FORMAT_CHUNK.size:
        raise WaveFormatError("truncated fmt subchunk")
    fields = _FORMAT_CHUNK.unpack(head)

    stream.seek(DATA_CHUNK_OFFSET)
    tail = stream.read(_DATA_CHUNK.size)
    if len(tail) < _DATA_CHUNK.size:
        raise WaveFormatError("truncated data subchunk")
    return WaveHeader(*fields, *_DATA_CHUNK.unpack(tail))


def load_wave_header(path: str | PathLike[str]) -> WaveHeader:
    """Parse the WAVE header of the file at ``path``."""
    with open(path, "rb") as stream:
        return read_wave_header(stream)