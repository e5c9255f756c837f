"""
Snippetbox: Server Runner
==========================

What:  Binds the listening socket and serves the app with uvicorn.
How:   The socket is bound here (not inside uvicorn) so a bind failure
       surfaces as an OSError we can log before exiting.
Who:   `python -m snippetbox` and the `snippetbox` console script.

Exit behaviour:
    - Cannot bind the bind address → CRITICAL log, exit status 1
    - Server loop raises → CRITICAL log with traceback, exit status 1
    - Server never finished startup (uvicorn returned early) → exit status 1
    - Clean shutdown (SIGINT/SIGTERM) → INFO log, normal return
"""

import logging
import socket
import sys

import uvicorn

from snippetbox.config import settings
from snippetbox.main import app, setup_logging

logger = logging.getLogger(__name__)

# Pending-connection queue length handed to listen()
LISTEN_BACKLOG = 2048


def bind_listener(host: str, port: int) -> socket.socket:
    """
    Create a listening TCP socket for host:port.

    An empty host listens on every interface, over IPv4 and IPv6 together
    when the OS supports dual-stack sockets.

    Raises:
        OSError: The address cannot be bound (in use, not local, no permission).
    """
    if not host:
        if socket.has_dualstack_ipv6():
            return socket.create_server(
                ("", port),
                family=socket.AF_INET6,
                backlog=LISTEN_BACKLOG,
                dualstack_ipv6=True,
            )
        return socket.create_server(("", port), backlog=LISTEN_BACKLOG)

    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    return socket.create_server((host, port), family=family, backlog=LISTEN_BACKLOG)


def run() -> None:
    """
    Serve Snippetbox on the configured bind address until stopped.

    Never returns after a failure: the process exits with status 1.
    """
    setup_logging()
    host, port = settings.listen_address

    try:
        sock = bind_listener(host, port)
    except OSError as exc:
        logger.critical("Cannot listen on %s: %s", settings.bind_address, exc)
        sys.exit(1)

    logger.info("Snippetbox server listening on %s", settings.bind_address)

    config = uvicorn.Config(
        app,
        log_config=None,
        access_log=False,
        log_level=settings.log_level.lower(),
    )
    server = uvicorn.Server(config)
    try:
        server.run(sockets=[sock])
    except Exception:
        logger.critical("Snippetbox server failed", exc_info=True)
        sys.exit(1)
    finally:
        sock.close()

    # uvicorn returns quietly when lifespan startup fails
    if not server.started:
        logger.critical("Snippetbox server failed to start")
        sys.exit(1)

    logger.info("Snippetbox server stopped")
