# lium

Building blocks for working with rented GPU machines ("executors") and the
pods that run on them. Everything is plain Python with no third-party
dependencies.

## What is in the package

- **`lium.models`**: dataclasses `ExecutorInfo`, `PodInfo` and `TemplateInfo`,
  and `executor_from_api`, `pod_from_api` and `template_from_api` to build them
  from raw API records (dictionaries). `determine_gpu_count` works out an
  executor's GPU count from `gpu_count`, `specs["gpu_count"]` or a machine name
  such as `machine-4x-rtx4090`, falling back to 1. Malformed records raise
  `ParseError`.
- **`lium.filters`**: `filter_by_gpu_type`, `filter_by_price_range`,
  `filter_by_availability`, `sort_by_price`, `sort_by_gpu_count`,
  `group_by_gpu_type`, `find_pareto_optimal`, and input parsers
  `parse_executor_index`, `parse_gpu_filter`, `parse_price_range`,
  `parse_env_vars`, `parse_port_mappings` and `validate_docker_image`. The sort
  functions return new lists.
- **`lium.optimization`**: `ParetoOptimizer` (takes a metrics-extracting
  callable), `dominates`, `calculate_pareto_frontier`,
  `extract_executor_metrics` and `extract_metrics`. Prices are negated in the
  metrics so that higher is always better.
- **`lium.formatters`**: `format_uptime`, `calculate_cost_spent`, `format_cost`.
- **`lium.gpu`**: `extract_gpu_model` finds a GPU model in a machine name.
- **`lium.ids`**: `generate_uuid`, `is_valid_uuid`, and `generate_human_id`,
  which derives a stable `adjective-noun-xxxx` name from a UUID (the suffix is
  the UUID's last four characters).
- **`lium.parsers`**: `parse_ssh_command` returns an `SshTarget`
  (`host`, `port`, `user`) from commands such as `ssh -p 2222 user@host`.
- **`lium.pods`**: `filter_ready_pods`, `get_executor_id_from_pod`,
  `extract_ssh_details`.
- **`lium.resolvers`**: `resolve_pod_targets`, `resolve_single_pod_target` and
  `resolve_executor_indices` turn 1-based indices, HUIDs, names, ids or `all`
  into pods or executor ids.
- **`lium.ssh`**: `execute_remote_command` (returns a `RemoteResult` of
  `stdout`, `stderr`, `exit_code`), `upload_file`, `download_file`,
  `execute_ssh_interactive`, `execute_scp_command`, `execute_rsync_command`
  and `ensure_remote_directory`. These run the `ssh`, `scp` and `rsync`
  programs, which must be installed.
- **`lium.docker`**: `build_and_push_image`, `check_docker_available`,
  `validate_image_name` and `cleanup_local_image`, which run the `docker`
  program.
- **`lium.errors`**: the exception hierarchy. Everything derives from
  `LiumError`; infrastructure failures (`SshError`, `DockerError`, `GpuError`,
  `ParseError`) carry a `kind` from `SshFailure`, `DockerFailure`,
  `GpuFailure` or `ParseFailure`.

## Installation

```
pip install .
```

## Examples

```python
from lium.filters import parse_price_range, parse_env_vars
from lium.formatters import format_uptime, format_cost
from lium.parsers import parse_ssh_command

low, high = parse_price_range("0.5-2.0")        # (0.5, 2.0)
parse_env_vars("KEY1=value1,KEY2=value2")       # {"KEY1": "value1", "KEY2": "value2"}
format_uptime(90061)                            # "1d 1h 1m"
format_cost(3600, 1.5)                          # "$1.50"

target = parse_ssh_command("ssh root@192.0.2.10 -p 45480")
target.host, target.port, target.user           # ("192.0.2.10", 45480, "root")
```

Picking pods the way a user names them:

```python
from lium.resolvers import resolve_pod_targets

for pod, label in resolve_pod_targets(pods, ["1", "brave-cat-1234"]):
    print(label, pod.id)
```

Running a command on a pod:

```python
from lium.pods import extract_ssh_details
from lium.ssh import execute_remote_command

host, port, user = extract_ssh_details(pod)
result = execute_remote_command(host, port, user, "~/.ssh/id_ed25519", "nvidia-smi")
print(result.exit_code)
```

Invalid input raises an exception from `lium.errors`, such as
`InvalidInputError` or `ParseError`.

## What the package does not do

- It has no command-line program; it is a library to call from Python.
- It does not talk to any compute-provider API. Pod and executor records must
  be fetched elsewhere and passed in, for example to `pod_from_api` or
  `resolve_pod_targets`.
- It keeps no configuration or stored selections. `resolve_executor_indices`
  takes the selection data (a dictionary with an `executors` list) as an
  argument.

## Running the tests

```
pip install .[test]
pytest
```