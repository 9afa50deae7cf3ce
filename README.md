# concurrencylab

A collection of small concurrent and networked programs, usable both as a
library and from the command line.

## Installation

```
pip install concurrencylab
```

For running the test suite:

```
pip install "concurrencylab[test]"
pytest
```

## Library

### Thread-safe map (`concurrencylab.safemap`)

`ConcurrentSafeMap` guards a dictionary with a lock so many threads can read
and write it at once.

```python
from concurrencylab.safemap import ConcurrentSafeMap

m = ConcurrentSafeMap()
m.set("Z", 999)
m.get("Z")         # 999
m.get("Y", 0)      # 0 (default when the key is absent)
m.exists("Z")      # True
"Z" in m           # True
len(m)             # 1
m.keys()           # ["Z"], a snapshot
m.delete("Z")      # deleting a missing key does nothing
```

### Chunking (`concurrencylab.chunkify`)

`chunkify(items, chunk_size)` splits a sequence into consecutive slices of
`chunk_size` items; the last may be shorter. A `chunk_size` of zero or less
raises `ValueError`.

```python
from concurrencylab.chunkify import chunkify

chunkify(list(range(10)), 3)   # [[0, 1, 2], [3, 4, 5], [6, 7, 8], [9]]
chunkify(b"abcde", 2)          # [b"ab", b"cd", b"e"]
```

### Token bucket rate limiter (`concurrencylab.ratelimiter`)

`TokenBucketRateLimiter(capacity=10, tokens=10, tokens_per_refill=5,
refill_interval=5.0)` hands out tokens from a bucket.

- `try_acquire()` takes one token and returns `True`, or returns `False` when
  the bucket is empty.
- `refill_once()` adds `tokens_per_refill` tokens, capped at `capacity`.
- `start()` / `stop()` run `refill_once` every `refill_interval` seconds in a
  background thread.
- `rate_limit(handler)` wraps a callable so each call costs a token; when none
  is left the wrapper raises `RateLimitExceeded` instead of calling it.

```python
from concurrencylab.ratelimiter import RateLimitExceeded, TokenBucketRateLimiter

limiter = TokenBucketRateLimiter(capacity=2, tokens=2)
greet = limiter.rate_limit(lambda: "hello")
greet(); greet()
try:
    greet()
except RateLimitExceeded:
    print("Too Many Requests")
```

### Worker pool (`concurrencylab.workerpool`)

`WorkerPool(worker_count)` starts that many `Worker` threads sharing one job
queue. `add_job(job)` queues a `Job(data, sleep_duration)`, whose `process()`
sleeps and then prints `Processed job with data: <data>`. `shutdown()` stops
accepting jobs, waits for every worker to finish and prints
`All workers have stopped.`; adding a job or shutting down again afterwards
raises `RuntimeError`. The pool is also a context manager that shuts down on
exit.

### Simulated API calls (`concurrencylab.concurrent_requests`)

`fetch_user_post`, `fetch_user_friends` and `make_api_request` each sleep for
a given delay and return canned data; `generate_user_name()` returns
`"Alice"`.

### Port scanner (`concurrencylab.portscanner`)

`is_port_open(port, host="127.0.0.1")` tries a TCP connection.
`open_ports_sequential(start_port, end_port, host)` and
`open_ports_concurrent(start_port, end_port, host, max_workers)` scan the
inclusive range and return the open ports in ascending order.

### TCP (`concurrencylab.tcp_server`, `concurrencylab.tcp_client`)

`TcpServer(host="", port=3000)` accepts connections, serving each in its own
thread: it reads until the peer half-closes, then replies with
`build_response()` (`"Hi from server! "` followed by `"foo"` 1000 times).
`start()` blocks until `stop()` is called; `ready` is set and `address` filled
in once it is listening. `send_and_receive(host, port, data)` sends the data,
half-closes and returns everything the server sent back.

### HTTP

- `concurrencylab.http_server.make_server(host, port)` answers every path and
  method with `Hello, World! You've requested: <path>`, printing the request
  body.
- `concurrencylab.http_client.post_message(url, data)` POSTs text and returns
  the response body; any status other than 200 raises `UnexpectedStatus`.
- `concurrencylab.ratelimit_server.make_server(host, port, limiter)` answers
  `Request served successfully`, or 429 `Too Many Requests` when its limiter
  (exposed as `server.limiter`) is empty.
- `concurrencylab.ratelimit_client.make_request(url)` returns a one-line
  outcome (`Success: 200`, `Rate-limited: 429 Too Many Requests` or
  `Error: ...`); `make_requests(url, count)` sends `count` at once.

### Uploads (`concurrencylab.upload_server`, `concurrencylab.upload_client`)

The upload server answers `/upload/initiate` with the session id `123` and
every other path with 404. On the client side, `generate_file_data(size)`
returns random bytes, `initialize_upload_session(base_url)` returns a session
id, `upload_file_chunk(chunk, upload_id, base_url)` posts one chunk to
`/upload/<id>/chunk`, and `upload_file(file_data, base_url)` sends 100-byte
chunks concurrently and returns an `UploadResult` with the id, the chunk count
and the failures. Non-200 answers raise `UploadError`.

### Chat (`concurrencylab.chat_server`, `concurrencylab.chat_client`)

`ChatServer(history_size=100)` serves WebSocket connections with
`handle_ws`. Clients send `join <name>`, `msg <text>`, `history` or `leave`;
broadcasts reach every client as `Server: <message>` and the last
`history_size` of them are kept (`history()`). `classify_input(line)` tells the
client whether a typed line is sent, ends the session, or is invalid.

### File watching (`concurrencylab.file_watcher`)

`watch(path=".")` is a context manager that yields a queue of file system
events for the directory (not its subdirectories); `describe_event(event)`
returns the lines printed for one event, such as `Created: <path>`,
`Modified: <path>`, `Removed: <path>` or `Renamed: <path>`.

## Commands

| Command | Options | What it does |
| --- | --- | --- |
| `concurrencylab-workerpool` | `--workers 3`, `--jobs 8`, `--sleep 2.0` | Runs sleeping jobs through a worker pool. |
| `concurrencylab-concurrent-requests` | `--delay-scale 1.0` | Runs the simulated API calls at once and reports the total time. |
| `concurrencylab-portscan` | `--host 127.0.0.1`, `--start 0`, `--end 65535` | Scans sequentially and concurrently and prints whether the results agree. |
| `concurrencylab-ratelimit-server` | `--port 8080` | HTTP server guarded by a token bucket that refills in the background. |
| `concurrencylab-ratelimit-client` | `--url http://localhost:8080` | Sends 20 requests at once, waits 5 seconds, sends 10 more, printing each outcome. |
| `concurrencylab-tcp-server` | `--host`, `--port 3000` | TCP server that reads until EOF, then replies. |
| `concurrencylab-tcp-client` | `--host localhost`, `--port 3000` | Sends `"Hi"` 2000 times, half-closes and prints the reply. |
| `concurrencylab-http-server` | `--port 8080` | HTTP server that echoes the requested path. |
| `concurrencylab-http-client` | `--url http://localhost:8080` | Posts `Hello, server!` and prints the response. |
| `concurrencylab-upload-server` | `--port 8080` | HTTP server that starts upload sessions. |
| `concurrencylab-upload-client` | `--url http://localhost:8080` | Reads commands from standard input: `upload`, `download`, `pause`, `resume`, `abort`, `exit`. |
| `concurrencylab-chat-server` | `--port 8080` | WebSocket chat server. |
| `concurrencylab-chat-client` | `--url ws://localhost:8080/chat` | Interactive chat client. |
| `concurrencylab-watch` | `path` (default `.`) | Prints file system events in a directory until interrupted. |

For example, start the chat server in one terminal:

```
concurrencylab-chat-server
```

and a client in another:

```
concurrencylab-chat-client
```

## What it does not do

- The upload server only opens sessions: it does not accept chunks, so every
  chunk sent by `upload_file` against it ends up among the result's failures,
  and nothing is stored. The upload client's `download`, `pause`, `resume` and
  `abort` commands are only acknowledged; there is no download or resumable
  transfer.
- The chat server keeps its history in memory only.