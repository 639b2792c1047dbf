"""Bind the listener and run the API under uvicorn."""

import copy
import errno
import logging
import socket
import sys

import uvicorn
from uvicorn.config import LOGGING_CONFIG

from greeter.config import get_settings
from greeter.errors import BindError, GreeterError

logger = logging.getLogger(__name__)

# The startup line is the one thing written to stdout, whatever the log setup.
announcer = logging.getLogger("greeter.announce")
announcer.setLevel(logging.INFO)
announcer.propagate = False
_stdout_handler = logging.StreamHandler(sys.stdout)
_stdout_handler.setFormatter(logging.Formatter("%(message)s"))
announcer.addHandler(_stdout_handler)

_REASONS = {
    errno.EADDRINUSE: "port is already in use",
    errno.EACCES: "permission denied",
    errno.EADDRNOTAVAIL: "address not available",
}


def bind_socket(host: str | None, port: int) -> socket.socket:
    """Create a listening TCP socket on host:port or raise BindError.

    With no host the socket listens on every interface, IPv6 and IPv4 both
    where the platform supports a dual-stack socket.
    """
    label = host or "*"
    if not 0 <= port <= 65535:
        raise BindError(label, port, "invalid port number")

    try:
        if host is None:
            dualstack = socket.has_dualstack_ipv6()
            family = socket.AF_INET6 if dualstack else socket.AF_INET
            sock = socket.create_server(
                ("", port), family=family, dualstack_ipv6=dualstack
            )
        else:
            family = socket.getaddrinfo(host, port, type=socket.SOCK_STREAM)[0][0]
            sock = socket.create_server((host, port), family=family)
    except OSError as e:
        reason = _REASONS.get(e.errno, e.strerror or str(e))
        raise BindError(label, port, reason) from e
    sock.set_inheritable(True)
    return sock


def _log_config() -> dict:
    # uvicorn sends access lines to stdout by default; keep them on stderr.
    config = copy.deepcopy(LOGGING_CONFIG)
    config["handlers"]["access"]["stream"] = "ext://sys.stderr"
    return config


def start(port: int, host: str | None = None) -> None:
    """Serve the greeter on the given port until the process is stopped."""
    from greeter.main import app

    sock = bind_socket(host, port)
    announcer.info(f"Backend server is running on port {port}")

    config = uvicorn.Config(
        app,
        host=host or "0.0.0.0",
        port=port,
        log_config=_log_config(),
    )
    server = uvicorn.Server(config)
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()


def main() -> None:
    """Console entry point: exits non-zero on any fatal start-up error."""
    try:
        start(get_settings().port)
    except GreeterError as e:
        logging.basicConfig(format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        logger.error(str(e))
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover - manual execution
    main()
