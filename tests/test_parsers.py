import pytest

from lium.errors import ParseError, ParseFailure
from lium.parsers import SshTarget, parse_ssh_command


def test_basic_format_without_port():
    assert parse_ssh_command("ssh root@192.168.1.10") == ("192.168.1.10", 22, "root")


def test_port_before_user_host():
    result = parse_ssh_command("ssh -p 2222 ubuntu@example.com")
    assert result == SshTarget(host="example.com", port=2222, user="ubuntu")


def test_port_after_user_host():
    result = parse_ssh_command("ssh root@198.145.127.160 -p 45480")
    assert result == ("198.145.127.160", 45480, "root")
    assert result.port == 45480


@pytest.mark.parametrize("command", ["ssh", "ssh invalid", "", "   "])
def test_invalid_format(command):
    with pytest.raises(ParseError) as info:
        parse_ssh_command(command)
    assert info.value.kind is ParseFailure.INVALID_FORMAT


def test_invalid_port_number():
    with pytest.raises(ParseError, match="Invalid port number"):
        parse_ssh_command("ssh -p abc root@host")


def test_port_out_of_range():
    with pytest.raises(ParseError, match="Invalid port number"):
        parse_ssh_command("ssh -p 70000 root@host")


def test_trailing_port_flag_is_ignored():
    assert parse_ssh_command("ssh root@host -p") == ("host", 22, "root")


def test_several_at_signs_rejected():
    with pytest.raises(ParseError, match="Invalid user@host format"):
        parse_ssh_command("ssh a@b@c")


def test_extra_whitespace_and_options():
    result = parse_ssh_command("  ssh   -o StrictHostKeyChecking=no   admin@node1  -p 2200 ")
    assert result == ("node1", 2200, "admin")


def test_first_user_host_wins():
    assert parse_ssh_command("ssh one@first two@second") == ("first", 22, "one")