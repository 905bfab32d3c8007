# fenix

Pieces of a small kernel as plain Python objects, with no dependencies
outside the standard library.

## Modules

- `fenix.klist`: intrusive lists. `ListNode` is embedded in an owner object
  and linked into a circular `LinkedList` (`add`, `add_tail`, `move`,
  `move_tail`, `first`, `last`, iteration in both directions, `len`).
  `HListNode` and `HListHead` form single-headed hash-chain lists
  (`add_head`, `add_before`, `add_behind`, `delete`, `delete_init`,
  `move_to`). Misuse such as adding a node that is already linked raises
  `ListError`.
- `fenix.inet`: `inet_aton` accepts the `a`, `a.b`, `a.b.c` and `a.b.c.d`
  forms with decimal, octal or hexadecimal parts and returns a 32-bit integer,
  raising `AddressError` on bad input. `inet_addr` returns `INADDR_NONE`
  instead of raising. `inet_pton(AF_INET | AF_INET6, text)` returns the
  address bytes; other families raise `OSError` with `EAFNOSUPPORT`.
  `htonl` and `htons` leave values in host order, masked to 32 and 16 bits.
- `fenix.nameser`: DNS wire constants (`RRType`, `RRClass`, `Opcode`,
  `Rcode`, `Section`, `Flag`, `UpdateOperation`, `KeyType`, `CertType`, field
  sizes, KEY flags, SIG offsets), big-endian `get16`/`get32`/`put16`/`put32`,
  type predicates (`is_qtype`, `is_rtype`, `is_meta_rr`, `is_xfr_type`,
  `is_udp_type`) and the NXT bitmap helpers `nxt_bit_set`, `nxt_bit_clear`,
  `nxt_bit_isset`.
- `fenix.nameser_compat`: the short aliases (`T_A`, `C_IN`, `NOERROR`, ...)
  and `Header`, the 12-byte message header with `pack()` and
  `Header.unpack(data)`.
- `fenix.sockdefs`: `AddressFamily`, `SocketType`, `ShutdownHow`,
  `MessageFlag`, `IPProto`, the `SOL_*` and `SO_*` option numbers, and
  `SockAddrIn`, a 16-byte little-endian IPv4 socket address with `pack()` and
  `SockAddrIn.unpack(data)`.
- `fenix.printk`: `Console(stream)` with printf-style `printk(fmt, *args)`,
  output cut to 511 characters, and `panic(fmt, *args)`, which writes the
  message and raises `KernelPanic`.
- `fenix.sched`: `Task` owns a 2048-byte stack whose first 12 bytes hold a
  guard pattern (`stack_intact()`). `Scheduler(console)` queues tasks with
  `create_task(entry)`; the first becomes `current`. `schedule(tick_ms)` wakes
  sleeping tasks whose `timeout_ms` has passed, picks the next runnable task
  other than the current one, moves it to the back of the queue and makes it
  current. `check_stack()` panics through the console when the current task's
  guard is damaged.
- `fenix.shell`: `Shell(tty, display)` over binary streams. `step()` reads up
  to 63 bytes, applies `set log=debug` or `set log=info` to `log_level`
  (a `LogLevel`), copies the bytes to the display and returns how many it
  read.

## Install

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
import io
from fenix.inet import inet_aton, inet_pton, AF_INET6
from fenix.printk import Console
from fenix.sched import Scheduler

print(hex(inet_aton("192.168.1.10")))      # 0xc0a8010a
print(inet_pton(AF_INET6, "::1").hex())

console = Console(io.StringIO())
sched = Scheduler(console)
idle = sched.create_task(lambda: None)
worker = sched.create_task(lambda: None)
assert sched.schedule(tick_ms=0) is worker
```

## What it does not do

The scheduler only decides which task is current; it never calls a task's
entry function or switches stacks. `fenix.sockdefs` defines socket numbers
and the address layout but there is no socket implementation, network stack,
file system or device layer behind them. The package installs no command;
the shell is driven by calling `Shell.step()` with streams you supply.