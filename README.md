# solidkit

A small toolkit with three parts:

- **LZHUF compression** (`solidkit.lzhuf`): LZSS with a 4096-byte sliding
  window and a 60-byte lookahead. Its output is coded with adaptive
  Huffman codes.
- **bin2c** (`solidkit.bin2c`): turns a binary file into a C header that
  holds the bytes as a `static unsigned char` array, plus a `#define` for
  its length.
- **Sorting algorithms with statistics** (`solidkit.sorting`): bubble,
  selection, insertion, binary insertion, Shell sort and quicksort. Each
  one counts its loop iterations, element exchanges and satisfied
  conditions. An interactive menu (`solidkit.sortdemo`) drives them.

The package has no runtime dependencies.

## Installation

```
pip install .
```

## Compression

```python
from solidkit.lzhuf import compress, decompress, LZHufError

data = b"abracadabra " * 100
packed = compress(data)
assert decompress(packed, len(data)) == data
```

The compressed stream has no header and does not record the length of the
original data. Keep that length and pass it to `decompress`. Empty input
compresses to `b""`. `decompress` raises `LZHufError` (a `ValueError`) in
three cases: the stream is truncated, a match would run past
`original_size`, or `original_size` is negative.

## Binary to C header

From Python:

```python
from solidkit.bin2c import to_c_header, define_name, convert_file

print(define_name("logo"))                 # LOGO_LEN
print(to_c_header(b"\x01\x02", "logo"))
convert_file("logo.bin", "logo", "logo")   # writes logo.h, returns its path
```

`to_c_header` writes ten bytes per line as `0xNN` values. `convert_file`
adds `.h` to the target name itself. If the source cannot be read or the
target cannot be written, it raises `Bin2CError` (an `OSError`).

From the command line:

```
bin2c <BINARY file name> <TARGET file name> <STRUCT name>
```

With fewer than three arguments the command prints its usage and exits
with status 0. On an error it prints the message to standard error and
exits with status 1.

## Sorting

```python
from solidkit.sorting import quick_sort, merge_sorted, format_array, benchmark

result, stats = quick_sort([5, -3, 12, 0])
print(result, stats.iterations, stats.exchanges, stats.conditions)
print(merge_sorted([-1, 1, 2, 3, 3], [-2, 0, 2, 4, 4]))
print(format_array(result))
```

Each sort function returns a sorted new list and a `SortStats` and leaves
its input unchanged. `SortStats` objects add up with `+=`.
`benchmark(size=15, rounds=100, rng=None)` sorts fresh random arrays with
every algorithm. It returns the integer-averaged `SortStats` for each
algorithm, keyed by name.

## Interactive demo

```
sortdemo [--seed N]
```

The demo shows a menu, then reads key presses from standard input one
character at a time and skips line breaks:

- `1`–`6` sort a random 15-element array with the chosen algorithm and
  print the counters.
- `7` merges two fixed sorted arrays.
- `8` runs the benchmark.
- ESC, or the end of input, quits.

After each action the demo takes one more key as "any key". Input is read
as ordinary text, so in a terminal each key has to be followed by Enter.
It is also possible to pipe the keys in, for example
`printf '1x7x' | sortdemo --seed 1`.

From Python, `solidkit.sortdemo.run(keys, out, rng)` drives the same menu
from any sequence of keys and writes to any text stream.