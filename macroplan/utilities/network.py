"""Startup helpers: the addresses the planner page can be opened at."""
import logging
import socket
from typing import List

logger = logging.getLogger(__name__)

LOOPBACK = ("127.0.0.1", "localhost")


def get_local_ip(probe_host: str = "8.8.8.8") -> str:
    """LAN address of the outgoing interface, or '127.0.0.1' when there is no route.

    A UDP connect picks the interface without sending a packet.
    """
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as s:
        try:
            s.connect((probe_host, 80))
            return str(s.getsockname()[0])
        except OSError as e:
            logger.debug(f"No route to {probe_host} ({e}); using loopback")
            return "127.0.0.1"


def planner_urls(port: int, local_ip: str = None) -> List[str]:
    """URLs to print at startup: localhost first, then the LAN address if there is one."""
    ip = local_ip if local_ip is not None else get_local_ip()
    urls = [f"http://localhost:{port}"]
    if ip not in LOOPBACK:
        urls.append(f"http://{ip}:{port}")
    return urls
