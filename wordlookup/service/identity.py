from __future__ import annotations

from typing import Protocol

from fastapi import Request


def client_key(remote_address: str, user_agent: str) -> str:
    """Concatenate the connection's address and its User-Agent.

    Not unique: clients behind the same NAT/proxy with the same browser share
    a key.
    """
    return remote_address + user_agent


class ClientIdentityResolver(Protocol):
    def client_key(self, request: Request) -> str: ...


class ConnectionIdentityResolver:
    """Derive the client key from the transport (host:port + User-Agent)."""

    def client_key(self, request: Request) -> str:
        address = ""
        if request.client:
            host = request.client.host
            # IPv6 hosts are bracketed so the port stays distinguishable
            if ":" in host:
                host = f"[{host}]"
            address = f"{host}:{request.client.port}"
        return client_key(address, request.headers.get("user-agent", ""))
