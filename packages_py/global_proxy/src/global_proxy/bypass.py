"""
NO_PROXY bypass evaluation.

Entries take the form ``host``, ``host:port`` or ``*``. A host entry matches
the host itself and every subdomain of it; ``.example.com`` matches the same
subdomains as ``example.com`` but not the bare ``example.com``.
"""
import logging
from typing import Optional, Sequence, Tuple
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)

WILDCARD = "*"

def parse_bypass_entry(entry: str) -> Tuple[Optional[str], Optional[str]]:
    """Split a bypass entry into ``(host, port)``.

    The port is returned as written; it may not be a number.
    """
    parts = [part.strip() for part in entry.split(":")]
    parts = [part for part in parts if part]
    if not parts:
        return None, None
    host = parts[0].lower()
    port = parts[1] if len(parts) > 1 else None
    return host, port

def _port_number(port: str) -> Optional[int]:
    try:
        return int(port)
    except ValueError:
        return None

def _split_target(target_url: str) -> Optional[Tuple[str, Optional[int]]]:
    try:
        parts = urlsplit(target_url)
        hostname = parts.hostname
        port = parts.port
    except ValueError:
        return None
    if not parts.scheme or not hostname:
        return None
    return hostname, port

def _host_matches(hostname: str, host: str) -> bool:
    if hostname == host:
        return True
    suffix = host if host.startswith(".") else f".{host}"
    return hostname.endswith(suffix)

def is_bypassed(target_url: str, bypass_entries: Sequence[str]) -> bool:
    """Check whether a request to ``target_url`` should skip the proxy.

    Relative or unparseable URLs are never bypassed.
    """
    target = _split_target(target_url)
    if target is None:
        return False
    if not bypass_entries:
        return False
    if WILDCARD in bypass_entries:
        logger.debug("NO_PROXY contains '*', bypassing all proxies")
        return True

    hostname, port = target
    for entry in bypass_entries:
        host, entry_port = parse_bypass_entry(entry)
        if host is None:
            continue
        # a non-numeric entry port never equals an explicit target port
        if entry_port is not None and port is not None and _port_number(entry_port) != port:
            continue
        if _host_matches(hostname, host):
            logger.debug(f"NO_PROXY match '{entry}' for {hostname}")
            return True
    return False
