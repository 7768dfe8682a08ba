# abslog

`abslog` gives you one small logging API and lets you choose the backend
behind it. It has no dependencies outside the standard library. Two backends
are built on the `logging` module:

- a **zap-style** backend (`abslog.backends.zap_logger`): debug, info and
  warn records go to stdout. Error and above go to stderr with a stack trace.
  Output is tab-separated console text (`ZapConsoleFormatter`) or one JSON
  object per line (`ZapJsonFormatter`), with the keys `severity`,
  `timestamp`, `caller`, `message` and, when there is a stack trace, `trace`.
- a **logrus-style** backend (`abslog.backends.logrus_logger`): every
  enabled record goes to stderr. Output is `key=value` text
  (`LogrusTextFormatter`) or a cloud-logging style JSON entry
  (`StackdriverFormatter`).

Logging goes through module-level functions in `abslog.core`, so every part
of a program uses the same global logger. You can replace that logger at any
time. Until you set one, the first call creates a zap-style logger at info
level with console output.

## Installation

```
pip install abslog
```

For the test suite:

```
pip install "abslog[test]"
```

## Logging

```python
from abslog import core

core.info("service started")
core.warnf("disk usage at %d%%", 91)
core.error("could not reach database")
```

Each of the levels `debug`, `info`, `warn`, `error`, `fatal` and `panic`
has four functions:

| function    | use                                                 |
|-------------|-----------------------------------------------------|
| `info`      | log the arguments joined together                   |
| `infof`     | log a printf-style format string with its arguments |
| `info_ctx`  | like `info`, with the context values first          |
| `info_ctxf` | like `infof`, with the context values first         |

The plain form joins its arguments and puts a space only between two
neighbours that are both not strings. The `f` form accepts verbs such as
`%v`, `%s`, `%d`, `%q`, `%f`, `%x` and `%%`. A missing argument shows as
`%!v(MISSING)` and leftover arguments are appended as `%!(EXTRA ...)`.

`fatal` and `fatalf` log the message and then raise `SystemExit(1)`.
`panic` and `panicf` log the message and then raise
`abslog.adapter.LoggerPanic` with the message.

## Context values

A context is a mapping. The logger looks up the value stored under the
context key, which is `"abslog"` unless you change it. That value can be:

- a mapping: written as `[key1=value1, key2=value2]`
- a sequence of strings: written as `[item1, item2]`
- a string: written as `[value]`

The rendered value is followed by the separator (`" -> "` by default) and
put in front of the message with one more space. A context of `None`, a
missing key or a value of any other type adds nothing.

```python
from abslog import core

ctx = {core.get_ctx_key(): {"id": "1234567", "name": "John Doe", "age": 30}}
core.info_ctx(ctx, "request handled")
# message: "[id=1234567, name=John Doe, age=30] ->  request handled"
```

`core.get_ctx_values(ctx)` returns that prefix on its own.

Use `set_ctx_key` and `set_ctx_separator` to change the key and the
separator, and `get_ctx_key` and `get_ctx_separator` to read them.
`reset_ctx_key` and `reset_ctx_separator` restore the defaults. A blank key
or a blank separator also restores the default.

## Choosing a backend

Switch the global logger to a backend with its default settings (info
level, console output):

```python
from abslog import core
from abslog.levels import LoggerType

core.set_logger_type(LoggerType.LOGRUS)
```

For more control, use the builder:

```python
from abslog.builder import get_abs_log_builder
from abslog.levels import EncoderType, LogLevel, LoggerType

log = (
    get_abs_log_builder()
    .logger_type(LoggerType.ZAP)
    .log_level(LogLevel.DEBUG)
    .encoder_type(EncoderType.JSON)
    .build_and_set_as_global()
)
log.debug("visible now")
```

- `build()` returns a logger and leaves the global logger as it is.
- `build_and_set_as_global()` also installs the new logger as the global one.
- `logger_gen(fn)` sets your own factory. It is called as
  `fn(log_level, encoder_type)`.
- `context_key(key)` sets the global context key when the logger is built.
  An empty key leaves the key unchanged.

An encoder type or logger type that is not supported raises `ValueError`.

Levels are `LogLevel.DEBUG`, `INFO`, `WARN`, `ERROR`, `PANIC` and `FATAL`.
`backends.zap_level` and `backends.logrus_level` give the `logging` level
number each backend uses for them. A value they do not know maps to info.

To install any object that has the twelve level methods (see the
`core.AbsLog` protocol), pass it to `core.set_logger`. To wrap an object
that has those methods, use `abslog.adapter.LoggerAdapter`.
`core.get_logger()` returns the logger now in use.

## Example

This command runs a short demonstration of both backends and all three
context forms:

```
abslog-example
```

## What it does not do

`abslog` writes only to the process's stdout and stderr. It has no file
output, log rotation or configuration file, and it keeps no settings
between runs.