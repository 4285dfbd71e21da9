import pytest

from lium.errors import (
    DockerError,
    DockerFailure,
    DomainRuleViolation,
    GpuError,
    GpuFailure,
    InvalidInputError,
    LiumError,
    NotFoundError,
    OperationFailedError,
    ParseError,
    ParseFailure,
    ProcessError,
    ResourceConflict,
    SshError,
    SshFailure,
    UtilsError,
    ValidationFailedError,
)


@pytest.mark.parametrize(
    "cls, prefix",
    [
        (InvalidInputError, "Invalid input"),
        (NotFoundError, "Not found"),
        (OperationFailedError, "Operation failed"),
        (ValidationFailedError, "Validation failed"),
        (DomainRuleViolation, "Domain rule violation"),
        (ResourceConflict, "Resource conflict"),
        (ProcessError, "Process error"),
    ],
)
def test_simple_error_messages(cls, prefix):
    err = cls("something")
    assert str(err) == f"{prefix}: something"
    assert err.message == "something"
    assert isinstance(err, LiumError)


def test_ssh_error_message_includes_kind():
    err = SshError(SshFailure.COMMAND_FAILED, "boom")
    assert str(err) == "SSH error: SSH command failed: boom"
    assert err.kind is SshFailure.COMMAND_FAILED


def test_docker_error_message():
    err = DockerError(DockerFailure.LOGIN_FAILED, "denied")
    assert str(err) == "Docker error: Docker login failed: denied"


def test_gpu_and_parse_error_messages():
    assert str(GpuError(GpuFailure.NOT_AVAILABLE, "x")) == "GPU error: GPU not available: x"
    assert str(ParseError(ParseFailure.MISSING_FIELD, "id")) == (
        "Parse error: Missing required field: id"
    )


def test_infrastructure_errors_are_utils_errors():
    docker_err = DockerError(DockerFailure.BUILD_FAILED, "bad")
    assert isinstance(docker_err, UtilsError)
    assert docker_err.kind is DockerFailure.BUILD_FAILED
    assert str(docker_err) == "Docker error: Docker build failed: bad"

    ssh_err = SshError(SshFailure.TRANSFER_FAILED, "bad")
    assert isinstance(ssh_err, LiumError)
    assert isinstance(ssh_err, UtilsError)
    assert str(ssh_err) == "SSH error: SSH file transfer failed: bad"


def test_input_errors_are_value_errors():
    invalid = InvalidInputError("bad")
    assert isinstance(invalid, ValueError)
    assert str(invalid) == "Invalid input: bad"

    parse_err = ParseError(ParseFailure.INVALID_FORMAT, "bad")
    assert isinstance(parse_err, ValueError)
    assert str(parse_err) == "Parse error: Failed to parse: bad"

    missing = NotFoundError("missing")
    assert isinstance(missing, LookupError)
    assert missing.message == "missing"