from __future__ import annotations

import re
from urllib.parse import urlsplit


_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")
SPECIAL_SCHEMES = {"http", "https", "ftp", "ws", "wss"}
# Characters a host may never contain (WHATWG forbidden host code points).
_FORBIDDEN_HOST_CHARS = set(" \t\n\r#/:<>?@[\\]^|%")


def _host_ok(host: str) -> bool:
    if not host:
        return False
    if host.startswith("[") and host.endswith("]"):
        return len(host) > 2
    return not any(ch in _FORBIDDEN_HOST_CHARS for ch in host)


def is_valid_url(value: object) -> bool:
    """Return True when ``value`` parses as an absolute URL.

    Mirrors what a browser's ``new URL(value)`` accepts closely enough for form
    validation: a scheme is mandatory, and http(s)/ftp/ws(s) URLs need a host.
    Like the browser, special schemes tolerate missing or extra slashes before
    the host, so ``https:example.com`` is accepted.
    """
    if not isinstance(value, str):
        return False
    candidate = value.strip()
    match = _SCHEME_RE.match(candidate)
    if not candidate or not match:
        return False
    scheme = match.group(0)[:-1]
    if scheme.lower() in SPECIAL_SCHEMES:
        # "https:example.com" and "http:/example.com" parse as "scheme://host".
        rest = candidate[len(scheme) + 1 :].lstrip("/\\")
        candidate = f"{scheme}://{rest}"
    try:
        parts = urlsplit(candidate)
        port = parts.port
    except ValueError:
        return False
    if parts.scheme.lower() not in SPECIAL_SCHEMES:
        return True
    hostinfo = parts.netloc.rpartition("@")[2]
    if hostinfo.startswith("["):
        host = hostinfo[: hostinfo.find("]") + 1]
    else:
        host = hostinfo.split(":", 1)[0]
    if not _host_ok(host):
        return False
    return port is None or 0 <= port <= 65535
