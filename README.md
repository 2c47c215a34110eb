# wavlsb

Hide a short text message inside a WAV file by rewriting the least
significant bit of its samples, and read it back out of the modified file.

## How it works

- A *sample unit* is `bytes_per_sample` bytes. The first 176 sample units
  of the input are treated as the header region and copied unchanged.
- The message is the first line of the message file (everything before the
  first `\n`). Each byte becomes 8 bits, most significant first. A 32-bit
  count of those message bits, most significant bit first, is put in front.
- Each following sample unit carries one bit, written into the lowest bit of
  the unit's last byte. Units after the last message bit are copied through
  unchanged.
- If the audio has too few sample units, the bits that do not fit are
  dropped. A trailing partial sample unit is discarded. Input no longer than
  the header region is returned unchanged.

Recovery skips the same header region and reads the 32-bit length; a
negative length counts as zero. It then takes that many bits, as far as
the audio holds them, and turns each complete group of eight into a byte.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
wavlsb [--audio PATH] [--message PATH] [--output-audio PATH]
       [--output-message PATH] [--bytes-per-sample N]
```

Defaults: `input.wav`, `message.txt`, `modified.wav`, `output_message.txt`
and `1`.

This starts an interactive menu that reads a number each round:

- `1` embeds the first line of `--message` into `--audio` and writes
  `--output-audio`. Afterwards it reads the header of the written file.
- `2` extracts the hidden message from `--output-audio` into
  `--output-message` and prints its first line.
- `3` exits. End of input exits too.
- `4` is not listed in the menu. It prints the header fields of `--audio`,
  with a duration in seconds and whole minutes.

Anything else prints "Invalid choice". File, format and value errors are
printed to standard error, and the menu continues.

## Library use

```python
from wavlsb.lsb import embed, recover, hide, extract
from wavlsb.header import load_wave_header, read_wave_header, WaveFormatError
from wavlsb.bits import char_to_bits, int_to_bits, bits_to_int

# In memory
stego = embed(audio_bytes, b"meet at noon", 1)
assert recover(stego, 1) == b"meet at noon"

# Between files; extract also returns the message
hide("input.wav", "message.txt", "output.wav", 1)
message = extract("output.wav", "recovered.txt", 1)

# Inspect a header
try:
    header = load_wave_header("input.wav")
    print(header.sample_rate, header.duration_seconds())
except WaveFormatError as exc:
    print(f"not a usable WAV file: {exc}")
```

Both `embed` and `recover` raise `ValueError` when `bytes_per_sample` is
less than 1.

### Headers

`read_wave_header(stream)` takes a seekable binary stream and
`load_wave_header(path)` takes a path to a file. Both return a frozen
`WaveHeader` dataclass, and both raise `WaveFormatError` (a subclass of
`ValueError`) on errors.

- The `RIFF`, `WAVE` and `fmt ` tags and the format fields are read from
  the first 36 bytes.
- The data chunk id and size are read at the fixed byte offset 176. They are
  not searched for.
- A wrong tag or a truncated header raises `WaveFormatError`.
- `WaveHeader.duration_seconds()` returns the data size ÷ bytes per sample
  ÷ channels ÷ sample rate, then divides the result by a further 1000.
- `duration_seconds()` raises `WaveFormatError` when any of those divisors
  is zero.

### Bit helpers

- `char_to_bits(ch)` turns one character or byte value (0–255) into 8 binary
  digits. It raises `ValueError` for anything else.
- `int_to_bits(number)` gives the 32-digit two's complement form of
  `number`.
- `bits_to_int(bits)` reads up to 32 leading digits as a signed 32-bit
  integer. It raises `ValueError` for characters other than `0` and `1`.

## What it does not do

- Audio is never decoded. Sample positions are counted in raw bytes from
  the start of the file, whatever the header says.
- The embedded message is not encrypted and not checked for integrity.