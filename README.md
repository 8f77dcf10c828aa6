# aesdkit

A small toolkit of systems-programming building blocks, using only the
standard library.

## Modules

- **`aesdkit.circular_buffer`**: `CircularBuffer` holds `BufferEntry`
  records, ten by default (`capacity` sets another size). When it is full,
  `add_entry` overwrites the oldest entry and returns it. Plain `bytes` are
  accepted as entries too. `find_entry_offset_for_fpos(n)` treats all entries
  as one run of bytes, oldest first. It returns `(entry, offset_in_entry)` for
  byte `n`, or `None` when not that much data has been written. The buffer
  also supports `clear()`, `len()` and iteration from oldest to newest.
- **`aesdkit.device`**: `AesdDevice` is an in-memory model of a character
  device. Written bytes are gathered until a newline ends a command. Each
  complete command becomes one buffer entry, and bytes without a newline are
  kept in `pending`. `read(count, offset)` returns stored commands in order.
  `open()` returns an `AesdFile`, which has its own read `position` and can be
  used as a context manager. `AesdDevice.close()` drops all stored commands and
  any pending bytes.
- **`aesdkit.slist`, `aesdkit.stailq`, `aesdkit.dlist`, `aesdkit.tailq`**:
  four classic linked structures:
  - `SList`: a singly linked list.
  - `STailQ`: a singly linked tail queue.
  - `DList`: a doubly linked list.
  - `TailQ`: a doubly linked tail queue.

  Each one supports insertion, removal, `concat`, `swap`, `first`,
  `is_empty`, `len()` and iteration. The insert methods return the new node.
  `TailQ` can also be walked backwards with `reversed()`.
- **`aesdkit.ring`**: `RingBuffer` is a bounded FIFO. `put` raises
  `BufferError` when the buffer is full, and `get` raises `IndexError` when it
  is empty. `create_circular_buffer(size)` builds a new one.
- **`aesdkit.shannon`**: `ShannonRandom` is a deterministic pseudo-random
  generator. `random()` returns values in [0, 1).
- **`aesdkit.systemcalls`**: run commands and report how they ended.
  - `do_system(cmd)` runs a command through the shell and returns a bool.
  - `do_exec(*args)` runs a program by path and returns a bool.
  - `do_exec_redirect(outputfile, *args)` does the same, with standard output
    sent to a file.
  - `my_system(cmd)` runs `sh -c` and returns the exit status.
  - `exec_and_wait(argv)` runs a program and returns its exit status.

  Programs are run by path: a bare name means a file in the current directory,
  not a `PATH` lookup.
- **`aesdkit.mutex_thread`**: `start_thread_obtaining_mutex(mutex, wait_ms,
  hold_ms)` starts a thread and returns without waiting for it. The thread
  sleeps, takes the lock, holds it, then releases it. The returned thread
  carries a `ThreadData` as `thread_data`. After `join()`,
  `thread_data.thread_complete_success` is `True`.
- **`aesdkit.writer`**, **`aesdkit.timestamp`**, **`aesdkit.args_check`**,
  **`aesdkit.structs`**, **`aesdkit.validate`**, **`aesdkit.queue_demo`**,
  **`aesdkit.thread_demos`**: small utilities and demonstrations, each with a
  command (see below).

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

```python
from aesdkit.device import AesdDevice

device = AesdDevice()
with device.open() as handle:
    handle.write(b"first command\n")
    handle.write(b"second ")
    handle.write(b"command\n")

with device.open() as handle:
    print(handle.read(100))  # b"first command\nsecond command\n"
```

By default only the ten most recent commands are kept. Older ones are
dropped as new ones arrive.

```python
from aesdkit.shannon import ShannonRandom

rng = ShannonRandom()
values = [rng.random() for _ in range(3)]  # same sequence on every run
```

## Commands

Write a string to a file, creating or truncating it:

```
aesd-writer /tmp/output.txt "some text"
```

The command needs exactly two arguments. It exits with status 1 if either
is missing, if more are given, or if the file cannot be opened.

Print the current local time, formatted as `%a %d %b %y %I:%M:%S %p %z`.
Given a file name, the time is written to that file instead:

```
aesd-timestamp
aesd-timestamp /tmp/time.txt
```

Check that exactly two arguments were given. Any other count prints a
message and exits with status 1:

```
aesd-args-check first second
```

Print what `this_function_returns_true` and `this_function_returns_false`
return:

```
aesd-validate
```

Show the struct merge example:

```
aesd-structs
```

Fill a singly linked list with N pseudo-random values, then read it back
and empty it:

```
aesd-queue-demo 5
```

Upper-case each argument in its own thread and print the results in order.
`-s` sets the worker threads' stack size. A size the platform rejects exits
with status 1:

```
aesd-thread-demos hello world
aesd-thread-demos -s 65536 hello world
```

## What it does not do

`AesdDevice` lives entirely in the memory of the Python process. It does
not register a device node with the operating system, so other programs
cannot open it as a file.