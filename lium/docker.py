"""Building, pushing and housekeeping of Docker images through the docker tool."""

from __future__ import annotations

import os
import subprocess
import threading
from pathlib import Path

from .errors import DockerError, DockerFailure

_DIGEST_FORMAT = "{{index .RepoDigests 0}}"
_ID_FORMAT = "{{.Id}}"
_VERSION_FORMAT = "{{.Server.Version}}"


def _run_captured(argv: list[str], failure_message: str, **kwargs) -> subprocess.CompletedProcess:
    try:
        return subprocess.run(argv, capture_output=True, text=True, **kwargs)
    except OSError as exc:
        raise DockerError(DockerFailure.COMMAND_FAILED, f"{failure_message}: {exc}") from exc


def _run_streaming(argv: list[str], action: str, failure: DockerFailure) -> None:
    """Run a docker command, echoing stdout line by line; raise on failure."""
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
        raise DockerError(
            DockerFailure.COMMAND_FAILED, f"Failed to start docker {action}: {exc}"
        ) from exc

    stderr_chunks: list[str] = []
    reader = threading.Thread(
        target=lambda: stderr_chunks.append(process.stderr.read()), daemon=True
    )
    reader.start()
    for line in process.stdout:
        print(line.rstrip("\n"))
    reader.join()

    try:
        code = process.wait()
    except OSError as exc:
        raise DockerError(
            DockerFailure.COMMAND_FAILED, f"Failed to wait for docker {action}: {exc}"
        ) from exc
    if code != 0:
        raise DockerError(failure, "".join(stderr_chunks))


def _login(username: str, token: str) -> None:
    argv = ["docker", "login", "-u", username, "--password-stdin"]
    completed = _run_captured(argv, "Failed to start docker login", input=token)
    if completed.returncode != 0:
        raise DockerError(DockerFailure.LOGIN_FAILED, completed.stderr or "")
    print("Successfully logged in to Docker Hub")


def _image_digest(image_name: str) -> str:
    completed = _run_captured(
        ["docker", "inspect", "--format", _DIGEST_FORMAT, image_name],
        "Failed to inspect image",
    )
    if completed.returncode != 0:
        by_id = _run_captured(
            ["docker", "inspect", "--format", _ID_FORMAT, image_name],
            "Failed to get image ID",
        )
        if by_id.returncode == 0:
            return (by_id.stdout or "").strip()
        raise DockerError(
            DockerFailure.COMMAND_FAILED,
            f"Failed to get image digest: {completed.stderr or ''}",
        )

    digest = (completed.stdout or "").strip()
    _, at, after = digest.partition("@")
    return after if at else digest


def _build(image_name: str, dockerfile_path: Path) -> str:
    context = dockerfile_path.parent
    if context == dockerfile_path:
        raise DockerError(DockerFailure.INVALID_PATH, "Invalid Dockerfile path")

    argv = [
        "docker",
        "build",
        "-t",
        image_name,
        "--progress=plain",
        "-f",
        os.fspath(dockerfile_path),
        os.fspath(context),
    ]
    print(f"Building Docker image: {image_name}")
    _run_streaming(argv, "build", DockerFailure.BUILD_FAILED)

    digest = _image_digest(image_name)
    print(f"Successfully built image with digest: {digest}")
    return digest


def _push(image_name: str) -> None:
    print(f"Pushing Docker image: {image_name}")
    _run_streaming(["docker", "push", image_name], "push", DockerFailure.PUSH_FAILED)
    print(f"Successfully pushed image: {image_name}")


def build_and_push_image(
    image_name: str,
    dockerfile_path: str | os.PathLike,
    docker_user: str,
    docker_token: str,
) -> str:
    """Log in, build and push an image; return its digest."""
    _login(docker_user, docker_token)
    digest = _build(image_name, Path(dockerfile_path))
    _push(image_name)
    return digest


def check_docker_available() -> str:
    """Check that the Docker daemon answers; return its server version."""
    argv = ["docker", "version", "--format", _VERSION_FORMAT]
    try:
        completed = subprocess.run(argv, capture_output=True, text=True)
    except OSError as exc:
        raise DockerError(
            DockerFailure.NOT_AVAILABLE, f"Docker not available: {exc}"
        ) from exc
    if completed.returncode != 0:
        raise DockerError(
            DockerFailure.NOT_AVAILABLE, f"Docker not running: {completed.stderr or ''}"
        )
    version = (completed.stdout or "").strip()
    print(f"Docker version: {version}")
    return version


def validate_image_name(image_name: str) -> None:
    """Check that an image name is usable on Docker Hub."""
    if not image_name:
        raise DockerError(DockerFailure.INVALID_IMAGE_NAME, "Image name cannot be empty")
    if any(char.isupper() for char in image_name):
        raise DockerError(
            DockerFailure.INVALID_IMAGE_NAME, "Image name cannot contain uppercase letters"
        )
    if "/" not in image_name:
        raise DockerError(
            DockerFailure.INVALID_IMAGE_NAME,
            "Image name should include username (e.g., username/image-name)",
        )


def cleanup_local_image(image_name: str) -> None:
    """Remove a local image, ignoring any failure."""
    try:
        subprocess.run(
            ["docker", "rmi", image_name],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError:
        pass