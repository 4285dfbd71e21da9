"""Parsing of SSH connection commands."""

from __future__ import annotations

import re
from typing import NamedTuple

from .errors import ParseError, ParseFailure

_PORT = re.compile(r"\+?\d+")


class SshTarget(NamedTuple):
    host: str
    port: int
    user: str


def _parse_port(text: str) -> int:
    if _PORT.fullmatch(text):
        port = int(text)
        if port <= 65535:
            return port
    raise ParseError(ParseFailure.INVALID_FORMAT, "Invalid port number")


def parse_ssh_command(ssh_cmd: str) -> SshTarget:
    """Extract host, port and user from a command such as 'ssh -p 2222 user@host'."""
    parts = ssh_cmd.split()
    if len(parts) < 2:
        raise ParseError(ParseFailure.INVALID_FORMAT, "Invalid SSH command format")

    args = parts[1:]
    user_host = next((part for part in args if "@" in part), None)
    if user_host is None:
        raise ParseError(ParseFailure.INVALID_FORMAT, "No user@host found in SSH command")

    port = 22
    for flag, value in zip(args, args[1:]):
        if flag == "-p":
            port = _parse_port(value)
            break

    pieces = user_host.split("@")
    if len(pieces) != 2:
        raise ParseError(ParseFailure.INVALID_FORMAT, "Invalid user@host format")
    user, host = pieces
    return SshTarget(host=host, port=port, user=user)