"""LZSS + adaptive Huffman compression (LZHUF) with a 4 KiB window."""

from __future__ import annotations

N = 4096  # sliding window size
F = 60  # lookahead buffer size
THRESHOLD = 2  # matches this short or shorter are sent as literals
NIL = N  # tree node null
_MASK = N - 1

N_CHAR = 256 - THRESHOLD + F  # literal bytes plus match lengths
T = N_CHAR * 2 - 1  # Huffman table size
R = T - 1  # root node
MAX_FREQ = 0x8000  # rebuild the tree when the root frequency reaches this

# Code lengths for the upper 6 bits of a match position.
P_LEN = (
    (3,) * 1 + (4,) * 3 + (5,) * 8 + (6,) * 12 + (7,) * 24 + (8,) * 16
)


def _position_tables():
    """Derive the prefix codes and the byte-indexed decoding tables from P_LEN."""
    p_code = []
    d_code = []
    d_len = []
    for upper, length in enumerate(P_LEN):
        p_code.append(len(d_code))
        span = 1 << (8 - length)
        d_code.extend([upper] * span)
        d_len.extend([length] * span)
    return tuple(p_code), tuple(d_code), tuple(d_len)


P_CODE, D_CODE, D_LEN = _position_tables()


class LZHufError(ValueError):
    """Raised when a compressed stream cannot be decoded."""


class _BitWriter:
    def __init__(self):
        self._out = bytearray()
        self._acc = 0
        self._count = 0

    def write(self, value, width):
        self._acc = (self._acc << width) | value
        self._count += width
        while self._count >= 8:
            self._count -= 8
            self._out.append((self._acc >> self._count) & 0xFF)
        self._acc &= (1 << self._count) - 1

    def finish(self):
        if self._count:
            self._out.append((self._acc << (8 - self._count)) & 0xFF)
            self._acc = 0
            self._count = 0
        return bytes(self._out)


class _BitReader:
    def __init__(self, data):
        self._data = data
        self._pos = 0

    def read_bit(self):
        index = self._pos >> 3
        if index >= len(self._data):
            raise LZHufError("compressed stream is truncated")
        bit = (self._data[index] >> (7 - (self._pos & 7))) & 1
        self._pos += 1
        return bit

    def read_bits(self, width):
        value = 0
        for _ in range(width):
            value = (value << 1) | self.read_bit()
        return value


class _Huffman:
    """Adaptive Huffman tree over literals and match lengths."""

    def __init__(self):
        self.freq = [0] * (T + 1)
        self.son = [0] * T
        self.prnt = [0] * (T + N_CHAR)
        for i in range(N_CHAR):
            self.freq[i] = 1
            self.son[i] = i + T
            self.prnt[i + T] = i
        i, j = 0, N_CHAR
        while j <= R:
            self.freq[j] = self.freq[i] + self.freq[i + 1]
            self.son[j] = i
            self.prnt[i] = self.prnt[i + 1] = j
            i += 2
            j += 1
        self.freq[T] = 0xFFFF
        self.prnt[R] = 0

    def _reconstruct(self):
        freq, son, prnt = self.freq, self.son, self.prnt
        # Collect the leaves in the first half, halving their frequencies.
        j = 0
        for i in range(T):
            if son[i] >= T:
                freq[j] = (freq[i] + 1) // 2
                son[j] = son[i]
                j += 1
        # Rebuild the internal nodes, keeping frequencies sorted.
        i, j = 0, N_CHAR
        while j < T:
            f = freq[i] + freq[i + 1]
            freq[j] = f
            k = j - 1
            while f < freq[k]:
                k -= 1
            k += 1
            freq[k + 1 : j + 1] = freq[k:j]
            freq[k] = f
            son[k + 1 : j + 1] = son[k:j]
            son[k] = i
            i += 2
            j += 1
        for i in range(T):
            k = son[i]
            if k >= T:
                prnt[k] = i
            else:
                prnt[k] = prnt[k + 1] = i

    def update(self, c):
        freq, son, prnt = self.freq, self.son, self.prnt
        if freq[R] == MAX_FREQ:
            self._reconstruct()
        c = prnt[c + T]
        while True:
            freq[c] += 1
            k = freq[c]
            l = c + 1
            if k > freq[l]:
                l += 1
                while k > freq[l]:
                    l += 1
                l -= 1
                freq[c] = freq[l]
                freq[l] = k

                i = son[c]
                prnt[i] = l
                if i < T:
                    prnt[i + 1] = l

                j = son[l]
                son[l] = i

                prnt[j] = c
                if j < T:
                    prnt[j + 1] = c
                son[c] = j

                c = l
            c = prnt[c]
            if c == 0:
                break

    def encode_char(self, c, writer):
        bits = []
        k = self.prnt[c + T]
        while True:
            bits.append(k & 1)
            k = self.prnt[k]
            if k == R:
                break
        for bit in reversed(bits):
            writer.write(bit, 1)
        self.update(c)

    @staticmethod
    def encode_position(c, writer):
        upper = c >> 6
        length = P_LEN[upper]
        writer.write(P_CODE[upper] >> (8 - length), length)
        writer.write(c & 0x3F, 6)

    def decode_char(self, reader):
        c = self.son[R]
        while c < T:
            c = self.son[c + reader.read_bit()]
        c -= T
        self.update(c)
        return c

    @staticmethod
    def decode_position(reader):
        i = reader.read_bits(8)
        c = D_CODE[i] << 6
        for _ in range(D_LEN[i] - 2):
            i = (i << 1) + reader.read_bit()
        return c | (i & 0x3F)


class _Tree:
    """Binary search trees over the window used to find the longest match."""

    def __init__(self):
        self.text = bytearray(N + F - 1)
        self.lson = [NIL] * (N + 1)
        self.rson = [NIL] * (N + 257)
        self.dad = [NIL] * (N + 1)
        self.match_position = 0
        self.match_length = 0

    def insert(self, r):
        text, lson, rson, dad = self.text, self.lson, self.rson, self.dad
        cmp = 1
        p = N + 1 + text[r]
        rson[r] = lson[r] = NIL
        self.match_length = 0
        while True:
            if cmp >= 0:
                if rson[p] != NIL:
                    p = rson[p]
                else:
                    rson[p] = r
                    dad[r] = p
                    return
            else:
                if lson[p] != NIL:
                    p = lson[p]
                else:
                    lson[p] = r
                    dad[r] = p
                    return
            i = 1
            while i < F:
                cmp = text[r + i] - text[p + i]
                if cmp != 0:
                    break
                i += 1
            if i > THRESHOLD:
                distance = ((r - p) & _MASK) - 1
                if i > self.match_length:
                    self.match_position = distance
                    self.match_length = i
                    if i >= F:
                        break
                if i == self.match_length and distance < self.match_position:
                    self.match_position = distance
        # Replace node p by r.
        dad[r] = dad[p]
        lson[r] = lson[p]
        dad[lson[p]] = r
        rson[r] = rson[p]
        dad[rson[p]] = r
        i = dad[p]
        if rson[i] == p:
            rson[i] = r
        else:
            lson[i] = r
        dad[p] = NIL

    def delete(self, p):
        lson, rson, dad = self.lson, self.rson, self.dad
        if dad[p] == NIL:
            return
        if rson[p] == NIL:
            q = lson[p]
        elif lson[p] == NIL:
            q = rson[p]
        else:
            q = lson[p]
            if rson[q] != NIL:
                while rson[q] != NIL:
                    q = rson[q]
                rson[dad[q]] = lson[q]
                dad[lson[q]] = dad[q]
                lson[q] = lson[p]
                dad[lson[p]] = q
            rson[q] = rson[p]
            dad[rson[p]] = q
        dad[q] = dad[p]
        i = dad[q]
        if rson[i] == p:
            rson[i] = q
        else:
            lson[i] = q
        dad[p] = NIL


def compress(data):
    """Compress bytes; the original length must be kept to decompress."""
    data = bytes(data)
    if not data:
        return b""
    huff = _Huffman()
    tree = _Tree()
    writer = _BitWriter()
    text = tree.text

    s = 0
    r = N - F
    text[:r] = b" " * r
    length = min(F, len(data))
    text[r : r + length] = data[:length]
    pos = length
    for i in range(1, F + 1):
        tree.insert(r - i)
    tree.insert(r)

    while length > 0:
        match_length = min(tree.match_length, length)
        if match_length <= THRESHOLD:
            match_length = 1
            huff.encode_char(text[r], writer)
        else:
            huff.encode_char(255 - THRESHOLD + match_length, writer)
            huff.encode_position(tree.match_position, writer)

        incoming = data[pos : pos + match_length]
        pos += len(incoming)
        for c in incoming:
            tree.delete(s)
            text[s] = c
            if s < F - 1:
                text[s + N] = c
            s = (s + 1) & _MASK
            r = (r + 1) & _MASK
            tree.insert(r)
        for _ in range(match_length - len(incoming)):
            tree.delete(s)
            s = (s + 1) & _MASK
            r = (r + 1) & _MASK
            length -= 1
            if length:
                tree.insert(r)

    return writer.finish()


def decompress(data, original_size):
    """Decompress a stream produced by compress() back to original_size bytes."""
    if original_size < 0:
        raise LZHufError("original size must not be negative")
    huff = _Huffman()
    reader = _BitReader(bytes(data))
    text = bytearray(N)
    r = N - F
    text[:r] = b" " * r
    out = bytearray()

    while len(out) < original_size:
        c = huff.decode_char(reader)
        if c < 256:
            out.append(c)
            text[r] = c
            r = (r + 1) & _MASK
            continue
        start = (r - huff.decode_position(reader) - 1) & _MASK
        count = c - 255 + THRESHOLD
        if len(out) + count > original_size:
            raise LZHufError("match runs past the end of the output")
        for k in range(count):
            c = text[(start + k) & _MASK]
            out.append(c)
            text[r] = c
            r = (r + 1) & _MASK

    return bytes(out)