# cortexcache

A fixed-block slab allocator for cache entries, and a `cortexd` command.

`cortexcache.slab.Slab` sets aside one contiguous region when it is created. It
splits the region into 512-byte blocks (`BLOCK_SIZE`) and hands them out from
a free list. Each block holds one entry in this layout:

```text
[ TTL (8 bytes) ][ KeyLen (2 bytes) ][ ValLen (2 bytes) ][ Key ][ Value ]
```

Integers are stored little-endian. The 12-byte header, the key and the value
must all fit in a single block.

## Installation

```sh
pip install .
```

To run the tests:

```sh
pip install ".[test]"
pytest
```

## Using the slab

```python
from cortexcache.slab import Slab, DoubleFreeError

slab = Slab(1024)                      # two 512-byte blocks
handle = slab.allocate(b"key", b"value", 1)

slab.get_value(handle)                 # b"value"
slab.get_meta(handle)                  # (1, b"key", b"value")
print(slab.debug_dump(handle))         # hex and ASCII view of the block

slab.total_blocks                      # 2
slab.free_blocks                       # 1

slab.deallocate(handle)                # the block is zeroed and freed
try:
    slab.deallocate(handle)
except DoubleFreeError:
    print("block already freed")
```

- `Slab(capacity_bytes)` rounds the capacity down to a whole number of
  blocks. A negative capacity raises `ValueError`.
- `allocate(key, value, ttl)` returns a `Handle`. It returns `None` when no
  block is free, or when the header, key and value together do not fit in one
  block. Blocks are handed out lowest index first, and a freed block is the
  next one reused. A `ttl` outside the unsigned 64-bit range raises
  `ValueError`.
- `get_value(handle)` returns the value bytes. `get_meta(handle)` returns
  `(ttl, key, value)`. Both return `None` for a handle outside the slab.
- `debug_dump(handle)` returns the block as lines of 16 bytes. Each line shows
  the offset, the bytes in hex and the bytes as ASCII, with `.` for bytes that
  cannot be printed. It returns `None` for a handle outside the slab.
- `deallocate(handle)` does nothing for a handle outside the slab. It raises
  `DoubleFreeError` (a `RuntimeError`) when the block is already free.
- `Handle` is a frozen dataclass that holds the block's `index`.

## The `cortexd` command

```sh
cortexd
```

The command prints `cortexd starting` and exits with status 0. It accepts
`--help` and no other options.

## What this package does not do

The package does not run a cache server. `cortexd` does not listen on any
port, does not serve requests and does not keep entries. The package has no
lookup index, no sharding and no eviction policies. A TTL is stored with each
entry but is never checked, so no entry ever expires. The package does not
record metrics. Entries live in memory only and are lost when the process
ends.