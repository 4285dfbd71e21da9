"""Remote command execution and file transfer over the ssh, scp and rsync tools."""

from __future__ import annotations

import os
import subprocess
import sys
import threading
from typing import IO, Mapping, NamedTuple

from .errors import SshError, SshFailure

_HOST_KEY_OPTIONS = (
    "-o",
    "StrictHostKeyChecking=no",
    "-o",
    "UserKnownHostsFile=/dev/null",
)


class RemoteResult(NamedTuple):
    stdout: str
    stderr: str
    exit_code: int


def _quote(value: str) -> str:
    return value.replace("'", "'\"'\"'")


def _key_options(private_key_path: str | os.PathLike) -> list[str]:
    return [*_HOST_KEY_OPTIONS, "-i", os.fspath(private_key_path)]


def _remote(user: str, host: str, path: str | None = None) -> str:
    target = f"{user}@{host}"
    return target if path is None else f"{target}:{path}"


def _with_env(command: str, env_vars: Mapping[str, str] | None) -> str:
    if not env_vars:
        return command
    exports = "; ".join(f"export {key}='{_quote(value)}'" for key, value in env_vars.items())
    return f"{exports}; {command}"


def _pump(stream: IO[str], sink: IO[str], lines: list[str]) -> None:
    try:
        for line in stream:
            line = line.rstrip("\n")
            print(line, file=sink)
            lines.append(line)
    finally:
        stream.close()


def _decode(data: bytes | str | None) -> str:
    if data is None:
        return ""
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="replace")
    return data


def execute_remote_command(
    host: str,
    port: int,
    user: str,
    private_key_path: str | os.PathLike,
    command: str,
    env_vars: Mapping[str, str] | None = None,
) -> RemoteResult:
    """Run a command on a remote host, echoing its output while collecting it."""
    argv = [
        "ssh",
        *_key_options(private_key_path),
        "-p",
        str(port),
        _remote(user, host),
        _with_env(command, env_vars),
    ]
    try:
        process = subprocess.Popen(
            argv,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as exc:
        raise SshError(SshFailure.COMMAND_FAILED, f"Failed to execute SSH command: {exc}") from exc

    stdout_lines: list[str] = []
    stderr_lines: list[str] = []
    err_reader = threading.Thread(
        target=_pump, args=(process.stderr, sys.stderr, stderr_lines), daemon=True
    )
    err_reader.start()
    _pump(process.stdout, sys.stdout, stdout_lines)
    err_reader.join()

    try:
        code = process.wait()
    except OSError as exc:
        raise SshError(
            SshFailure.COMMAND_FAILED, f"Failed to wait for SSH command: {exc}"
        ) from exc

    return RemoteResult(
        stdout="\n".join(stdout_lines),
        stderr="\n".join(stderr_lines),
        exit_code=code if code >= 0 else -1,
    )


def _transfer(argv: list[str], direction: str) -> None:
    try:
        completed = subprocess.run(argv, capture_output=True)
    except OSError as exc:
        raise SshError(
            SshFailure.TRANSFER_FAILED, f"Failed to execute SCP command: {exc}"
        ) from exc
    if completed.returncode != 0:
        raise SshError(
            SshFailure.TRANSFER_FAILED,
            f"SCP {direction} failed: {_decode(completed.stderr)}",
        )


def upload_file(
    host: str,
    port: int,
    user: str,
    private_key_path: str | os.PathLike,
    local_path: str | os.PathLike,
    remote_path: str,
) -> None:
    """Copy a local file to the remote host."""
    argv = [
        "scp",
        *_key_options(private_key_path),
        "-P",
        str(port),
        os.fspath(local_path),
        _remote(user, host, remote_path),
    ]
    _transfer(argv, "upload")


def download_file(
    host: str,
    port: int,
    user: str,
    private_key_path: str | os.PathLike,
    remote_path: str,
    local_path: str | os.PathLike,
) -> None:
    """Copy a remote file to the local machine."""
    argv = [
        "scp",
        *_key_options(private_key_path),
        "-P",
        str(port),
        _remote(user, host, remote_path),
        os.fspath(local_path),
    ]
    _transfer(argv, "download")


def execute_ssh_interactive(
    host: str, port: int, user: str, private_key_path: str | os.PathLike
) -> None:
    """Open an interactive SSH session attached to the current terminal."""
    argv = ["ssh", *_key_options(private_key_path), "-p", str(port), _remote(user, host)]
    try:
        completed = subprocess.run(argv)
    except OSError as exc:
        raise SshError(
            SshFailure.CONNECTION_FAILED, f"Failed to execute SSH command: {exc}"
        ) from exc
    if completed.returncode != 0:
        raise SshError(SshFailure.CONNECTION_FAILED, "SSH session failed")


def _endpoints(
    user: str, host: str, source: str, destination: str, is_upload: bool
) -> list[str]:
    if is_upload:
        return [source, _remote(user, host, destination)]
    return [_remote(user, host, source), destination]


def execute_scp_command(
    host: str,
    port: int,
    user: str,
    private_key_path: str | os.PathLike,
    source: str,
    destination: str,
    is_upload: bool,
) -> None:
    """Copy between the local machine and the remote host with output on the terminal."""
    argv = [
        "scp",
        *_key_options(private_key_path),
        "-P",
        str(port),
        *_endpoints(user, host, source, destination, is_upload),
    ]
    try:
        completed = subprocess.run(argv)
    except OSError as exc:
        raise SshError(
            SshFailure.TRANSFER_FAILED, f"Failed to execute SCP command: {exc}"
        ) from exc
    if completed.returncode != 0:
        raise SshError(SshFailure.TRANSFER_FAILED, "SCP command failed")


def execute_rsync_command(
    host: str,
    port: int,
    user: str,
    private_key_path: str | os.PathLike,
    source: str,
    destination: str,
    options: str | None,
    is_upload: bool,
) -> None:
    """Synchronise files with the remote host using rsync over SSH."""
    ssh_transport = (
        "ssh -o StrictHostKeyChecking=no -o UserKnownHostsFile=/dev/null "
        f"-i {os.fspath(private_key_path)} -p {port}"
    )
    argv = [
        "rsync",
        "-avz",
        "--progress",
        *(options.split() if options else []),
        "-e",
        ssh_transport,
        *_endpoints(user, host, source, destination, is_upload),
    ]
    try:
        completed = subprocess.run(argv)
    except OSError as exc:
        raise SshError(
            SshFailure.TRANSFER_FAILED, f"Failed to execute rsync command: {exc}"
        ) from exc
    if completed.returncode != 0:
        raise SshError(SshFailure.TRANSFER_FAILED, "Rsync command failed")


def ensure_remote_directory(
    host: str,
    port: int,
    user: str,
    private_key_path: str | os.PathLike,
    remote_path: str,
) -> None:
    """Create a directory, with parents, on the remote host."""
    command = f"mkdir -p '{_quote(remote_path)}'"
    result = execute_remote_command(host, port, user, private_key_path, command)
    if result.exit_code != 0:
        raise SshError(
            SshFailure.COMMAND_FAILED, f"Failed to create remote directory: {remote_path}"
        )