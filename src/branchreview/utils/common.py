import socket
from typing import Tuple


def get_random_port() -> Tuple[socket.socket, int]:
    """Bind a listening socket to a free port and return it with the port number.

    The socket is kept open and handed to uvicorn so the port cannot be taken
    between picking it and serving on it.
    """
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    sock.bind(("127.0.0.1", 0))
    sock.listen(128)
    port = sock.getsockname()[1]
    return sock, port
