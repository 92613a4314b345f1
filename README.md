# practools

A handful of small command-line tools, building blocks for forwarding log
output over HTTP, and a set of worked calculation exercises, bundled as one
Python package.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

### practools-cgrep

Searches every file under a directory, recursively, for lines matching a
regular expression. `.git` directories are not searched. Matching file names
are printed in sorted order, relative to the current directory.

```
practools-cgrep PATTERN
practools-cgrep --dir ./src --with-content 'def \w+'
```

Options:

- `-d`, `--dir`: directory to search (default `./`)
- `-c`, `--with-content`: also print each matching line as `NUMBER: TEXT`,
  with a blank line between files

Errors met while reading files are collected and reported together after the
search finishes; the command then exits with status 1. An invalid regular
expression is reported the same way. Directories that cannot be listed are
skipped.

### practools-curl

A small HTTP/HTTPS client that prints a summary of the request it sent and
the response it received (status, headers in sorted order, body).

```
practools-curl https://example.com
practools-curl -X POST -d '{"name":"value"}' -H 'Connection: keep-alive' https://example.com/items
```

Options:

- `-X`, `--request`: HTTP method: `GET`, `POST`, `PUT`, `DELETE` or `PATCH` (default `GET`)
- `-d`, `--data`: JSON body; required for `POST`, `PUT` and `PATCH`, which are sent as `application/json`
- `-H`, `--header`: extra header in `Name: value` form; may be repeated

Exactly one URL must be given. It must use the `http` or `https` scheme, the
data must be a JSON object, and each header must have exactly one name and
one value. A `Content-Type` header is dropped for `GET` and `DELETE`.

### practools-log-browser

A small web server that relays posted log text to browsers:

- serves static files from a directory at `/` (an `index.html` is served for
  a directory, otherwise a plain listing),
- accepts log batches by `POST /logs`,
- pushes each received batch, as text, to a client connected on the `/ws`
  websocket.

```
practools-log-browser
practools-log-browser --port 8080 --dir ./public
```

Options:

- `-p`, `--port`: port to listen on (default `3000`)
- `-d`, `--dir`: directory of static files (default `./dist`)

`practools.logtransfer.browser.create_app(static_dir)` returns the same
`aiohttp` application for use in your own server.

## Log forwarding building blocks

`practools.logtransfer` holds the pieces for collecting a stream's lines and
POSTing them in batches. Each is a function meant to run in its own thread,
talking through `queue.Queue` objects and stopped by a `threading.Event`:

- `watcher.monitor(stop, lines, errors, stream)`: puts each line read from
  `stream`, without its line ending, on `lines`
- `storage.LineBuffer`: a thread-safe byte buffer with `write(data)` and
  `drain()`
- `storage.listen(stop, lines, errors, buffer)`: appends each received line
  and a newline to the buffer
- `storage.load(stop, out, errors, span, buffer)`: every `span` seconds puts
  the whole buffer content on `out`, unless it is empty
- `forwarder.forward(stop, out, errors, url)`: POSTs each chunk from `out` to
  `url` with `Content-Type: plain/text`; failed requests go to `errors`

When `stop` is set, `monitor` and `load` close their output queue with a
trailing `None`, and the readers of those queues return.

### Not included

There is no command that starts a program and forwards its output, and
nothing writes the collected errors to a file. To forward a program's output,
start it yourself (for example with `subprocess`), pass its standard output
to `monitor`, run the functions above in threads, and read the `errors`
queue as you see fit.

## Library use

The pieces behind the commands can be used directly, for example
`practools.cgrep.cli.exec_search`, `practools.curl.validation.validate_flags`
or `practools.curl.client.build_client`.

`practools.tutorial` holds self-contained calculation exercises:

```python
from practools.tutorial.distance import parse_distance
from practools.tutorial.chapter01 import taxi
from practools.tutorial.chapter03 import inner_charge_from_tokyo
from practools.tutorial.chapter05 import matrix_multiple

parse_distance("1.55km")          # 1550
taxi("1.8km")                     # (600, 720): normal and late-night fare
inner_charge_from_tokyo("新宿")    # 270
matrix_multiple([1, 2, 3])        # [[1, 2, 3], [2, 4, 6], [3, 6, 9]]
```

Other modules cover loop-line stations and distances (`stations`), change-making
with the fewest coins (`chapter02`), ticket gates with cards and tickets
(`chapter04`, `chapter09`), dropping the middle of a list (`chapter05`), a
restaurant receipt (`chapter07`) and car-sharing prices (`chapter08`).