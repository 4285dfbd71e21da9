import pytest

from lium.errors import ParseError, ParseFailure
from lium.models import PodInfo
from lium.parsers import SshTarget
from lium.pods import extract_ssh_details, filter_ready_pods, get_executor_id_from_pod


def make_pod(pod_id="pod1", huid="brave-cat-1234", status="running", ssh_cmd=None, executor=None):
    return PodInfo(
        id=pod_id,
        name=f"test-{pod_id}",
        status=status,
        huid=huid,
        ssh_cmd=ssh_cmd,
        executor={} if executor is None else executor,
        template={},
    )


def test_filter_ready_pods():
    pods = [
        make_pod("pod1", "brave-cat-1234", "running"),
        make_pod("pod2", "smart-dog-5678", "stopped"),
    ]
    ready = filter_ready_pods(pods)
    assert len(ready) == 1
    assert ready[0].status == "running"


@pytest.mark.parametrize("status", ["RUNNING", "Active", "ready", "up"])
def test_filter_ready_pods_ignores_case(status):
    pod = make_pod(status=status)
    assert filter_ready_pods([pod]) == [pod]


def test_filter_ready_pods_keeps_order():
    pods = [make_pod("a", status="up"), make_pod("b", status="pending"), make_pod("c", status="ready")]
    assert [p.id for p in filter_ready_pods(pods)] == ["a", "c"]


def test_get_executor_id_from_pod():
    pod = make_pod(executor={"id": "exec123"})
    assert get_executor_id_from_pod(pod) == "exec123"


def test_get_executor_id_from_string_executor():
    pod = make_pod(executor="exec456")
    assert get_executor_id_from_pod(pod) == "exec456"


def test_get_executor_id_missing_raises():
    pod = make_pod(executor={"name": "x"})
    with pytest.raises(ParseError) as info:
        get_executor_id_from_pod(pod)
    assert info.value.kind is ParseFailure.INVALID_FORMAT
    assert "brave-cat-1234" in str(info.value)


def test_get_executor_id_non_string_id_raises():
    pod = make_pod(executor={"id": 7})
    with pytest.raises(ParseError):
        get_executor_id_from_pod(pod)


def test_extract_ssh_details():
    pod = make_pod(ssh_cmd="ssh -p 2222 root@192.168.1.10")
    host, port, user = extract_ssh_details(pod)
    assert host == "192.168.1.10"
    assert port == 2222
    assert user == "root"


def test_extract_ssh_details_fallback():
    pod = make_pod(huid="smart-dog-5678")
    assert extract_ssh_details(pod) == SshTarget(host="smart-dog-5678", port=22, user="root")


def test_extract_ssh_details_bad_command():
    pod = make_pod(ssh_cmd="ssh")
    with pytest.raises(ParseError):
        extract_ssh_details(pod)