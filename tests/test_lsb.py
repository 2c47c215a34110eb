import random

import pytest

from wavlsb.lsb import HEADER_SAMPLES, embed, extract, hide, recover


def make_audio(bytes_per_sample, samples, seed=7, extra=0):
    rng = random.Random(seed)
    return rng.randbytes((HEADER_SAMPLES + samples) * bytes_per_sample + extra)


@pytest.mark.parametrize("bps", [1, 2, 4])
@pytest.mark.parametrize("message", [b"hello", b"", b"\x00\xff binary \x80"])
def test_round_trip(bps, message):
    audio = make_audio(bps, 32 + 8 * len(message) + 50)
    assert recover(embed(audio, message, bps), bps) == message


@pytest.mark.parametrize("bps", [1, 3])
def test_only_low_bit_of_last_byte_changes(bps):
    audio = make_audio(bps, 200)
    out = embed(audio, b"secret text", bps)
    skip = HEADER_SAMPLES * bps
    assert out[:skip] == audio[:skip]
    assert len(out) == len(audio)
    for index, (before, after) in enumerate(zip(audio, out)):
        diff = before ^ after
        assert diff in (0, 1)
        if diff:
            assert index >= skip
            assert (index - skip) % bps == bps - 1


def test_trailing_partial_sample_is_dropped():
    audio = make_audio(2, 120, extra=1)
    out = embed(audio, b"hi", 2)
    assert len(out) == len(audio) - 1
    assert recover(out, 2) == b"hi"


def test_message_longer_than_capacity_is_truncated():
    message = b"abcdef"
    audio = make_audio(1, 32 + 8 * 3)
    result = recover(embed(audio, message, 1), 1)
    assert message.startswith(result)
    assert len(result) == 3


def test_short_audio_is_returned_unchanged():
    audio = make_audio(1, 0)
    assert embed(audio, b"x", 1) == audio
    assert recover(audio, 1) == b""


def test_invalid_sample_size():
    with pytest.raises(ValueError):
        embed(b"abc", b"x", 0)
    with pytest.raises(ValueError):
        recover(b"abc", 0)


def test_hide_and_extract_files(tmp_path):
    audio_path = tmp_path / "in.wav"
    message_path = tmp_path / "message.txt"
    output_audio = tmp_path / "out.wav"
    output_message = tmp_path / "recovered.txt"
    audio_path.write_bytes(make_audio(2, 400))
    message_path.write_bytes(b"first line\nsecond line\n")

    hide(audio_path, message_path, output_audio, 2)
    result = extract(output_audio, output_message, 2)

    assert result == b"first line"
    assert output_message.read_bytes() == b"first line"


def test_hide_missing_message_file(tmp_path):
    audio_path = tmp_path / "in.wav"
    audio_path.write_bytes(make_audio(1, 100))
    with pytest.raises(FileNotFoundError):
        hide(audio_path, tmp_path / "nope.txt", tmp_path / "out.wav", 1)