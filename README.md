# poolkit

Small, dependency-free building blocks for reusing objects and sharing
single instances.

| Module | What it holds |
| --- | --- |
| `poolkit.object_pool` | `ObjectPool` (generic, optionally bounded, with a factory and a disposer), `PoolFullError`, `SharedObject` and `SharedObjectPool` |
| `poolkit.actors` | `Actor`, `Missile` and `Alien`: game objects recycled by toggling their `visible` flag |
| `poolkit.actor_pool` | `ActorPool` (keyed by type name, with registered creators), `default_actor_pool()` and `MissilePool` |
| `poolkit.game` | `Game`, a loop that fires, animates and explodes pooled actors, and the `poolkit-game` command |
| `poolkit.singleton` | `Singleton`, a base class giving each subclass one lazily built instance, and `GameManager` |
| `poolkit.logger` | `Logger`, which writes `[tag] message` lines to a file, with a shared `instance()` |
| `poolkit.printers` | `Printer`, `LocalPrinter`, `PDFPrinter`, the `PrinterProvider` registry, `default_provider()` and the `poolkit-printers` command |
| `poolkit.clock` | `Clock`, a monostate reading the local time, and the `poolkit-clock` command |

Pools report what they do (creating or reusing an object) through the
standard `logging` module, not on standard output.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Object pools

```python
from poolkit.object_pool import ObjectPool, PoolFullError

pool = ObjectPool(factory=list, max_size=2, disposer=None)
a = pool.acquire()
b = pool.acquire()
try:
    pool.acquire()
except PoolFullError:
    print("pool is full")

pool.release(a)
assert pool.acquire() is a   # released objects are handed out again
pool.destroy()               # calls the disposer, if any, on every object
```

`max_size=None` lets the pool grow without bound. `destroy()` logs a
warning for each object still in use. `SharedObjectPool` does the same for
`SharedObject`, calling its `reset()` before handing a released object out
again.

Keyed actor pools create actors through registered creators:

```python
from poolkit.actor_pool import ActorPool, default_actor_pool
from poolkit.actors import Missile

pool = default_actor_pool()          # creators for "missile" and "alien"
missile = pool.acquire("missile")
pool.release("missile", missile)
assert pool.acquire("missile") is missile

custom = ActorPool()
custom.register_creator("missile", Missile)
assert custom.acquire("ship") is None   # no creator registered
```

`ActorPool.release` raises `KeyError` for a key the pool has never seen.
`MissilePool` is the same idea for missiles alone.

## Singletons and registries

```python
from poolkit.singleton import GameManager
from poolkit.printers import default_provider

gm = GameManager.instance()
assert gm is GameManager.instance()
gm.load_assets()

provider = default_provider()
provider.get_printer_ref("local").print("Sales data")   # [LOCALPRINTER]Sales data
```

Calling a `Singleton` subclass directly, or copying its instance, raises
`TypeError`. `PrinterProvider.register_printer` takes either a printer or a
callable that builds one on first lookup; a key already registered keeps
its first printer. `get_printer` returns `None` for an unknown key,
`get_printer_ref` raises `KeyError`.

## Logger

```python
from poolkit.logger import Logger

with Logger("session.log") as log:
    log.set_tag("10.0.0.1")
    log.write_log("Application has started")   # [10.0.0.1] Application has started
```

The file is truncated when opened and flushed after every line; writing
after `close()` raises `ValueError`. `Logger.instance()` returns one logger
for the whole process, writing to `applog.txt` in the current directory and
closed at interpreter exit.

## Clock

`Clock` is never instantiated. `Clock.hour()`, `Clock.minute()`,
`Clock.second()` and `Clock.time_string()` each read the local time afresh;
`time_string()` gives `hour:minute:second` without zero padding.

## Commands

```
poolkit-game       # missile-and-alien loop backed by an actor pool
poolkit-clock      # print the current local time as H:M:S
poolkit-printers   # print sample data on the PDF and local printers
```

`poolkit-game` takes `--mode {actors,missiles,fresh,basic}` (where actors
come from; `basic` runs the shared-object pool demo instead), `--rounds N`
(default 2; 0 plays forever) and `--tick SECONDS` (length of each pause,
default 1.0).

## Limits

The pools keep no lock of their own: share one between threads only behind
your own locking. `PrinterProvider`, `Logger` and `Singleton.instance()` are
the thread-safe parts.