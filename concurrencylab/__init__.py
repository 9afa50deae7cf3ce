"""Small concurrent and networked programs: a thread-safe map, a worker pool, a rate limiter, TCP, HTTP and WebSocket servers and clients, a port scanner and a file watcher."""

__version__ = "0.1.0"