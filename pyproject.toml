[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "concurrencylab"
version = "0.1.0"
description = "Small concurrent and networked programs: a thread-safe map, a worker pool, a token bucket rate limiter, TCP/HTTP/WebSocket servers and clients, a port scanner and a file watcher."
requires-python = ">=3.10"
keywords = [
    "concurrency",
    "threading",
    "worker-pool",
    "rate-limiter",
    "token-bucket",
    "tcp",
    "http",
    "websockets",
    "port-scanner",
    "file-watcher",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: System :: Networking",
]
dependencies = [
    "websockets",
    "watchdog",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
concurrencylab-workerpool = "concurrencylab.workerpool:main"
concurrencylab-ratelimit-server = "concurrencylab.ratelimit_server:main"
concurrencylab-ratelimit-client = "concurrencylab.ratelimit_client:main"
concurrencylab-concurrent-requests = "concurrencylab.concurrent_requests:main"
concurrencylab-portscan = "concurrencylab.portscanner:main"
concurrencylab-tcp-server = "concurrencylab.tcp_server:main"
concurrencylab-tcp-client = "concurrencylab.tcp_client:main"
concurrencylab-http-server = "concurrencylab.http_server:main"
concurrencylab-http-client = "concurrencylab.http_client:main"
concurrencylab-upload-server = "concurrencylab.upload_server:main"
concurrencylab-upload-client = "concurrencylab.upload_client:main"
concurrencylab-chat-server = "concurrencylab.chat_server:main"
concurrencylab-chat-client = "concurrencylab.chat_client:main"
concurrencylab-watch = "concurrencylab.file_watcher:main"

[tool.hatch.build.targets.wheel]
packages = ["concurrencylab"]

[tool.hatch.build.targets.sdist]
include = ["concurrencylab", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
