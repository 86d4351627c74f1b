"""Process metrics of the NameNode JVM, located through a PID file."""

from pathlib import Path

import psutil

from namenode_exporter.core.exceptions import PidFileError
from namenode_exporter.core.logs import get_logger
from namenode_exporter.core.metrics import counter_descriptor, gauge_descriptor, sample
from namenode_exporter.core.models import MetricDescriptor, MetricSample

logger = get_logger(__name__)


def read_pid(pid_file: str | Path) -> int:
    """Read a process id from ``pid_file``.

    Surrounding whitespace is ignored.

    Raises:
        PidFileError: The file is unreadable or does not hold a positive
            integer.
    """
    try:
        content = Path(pid_file).read_text()
    except OSError as e:
        raise PidFileError(f"can't read pid file {str(pid_file)!r}: {e}") from e
    try:
        pid = int(content.strip())
    except ValueError as e:
        raise PidFileError(f"can't parse pid file {str(pid_file)!r}: {e}") from e
    if pid <= 0:
        raise PidFileError(f"invalid pid {pid} in pid file {str(pid_file)!r}")
    return pid


class ProcessCollector:
    """Collects CPU, memory and file descriptor metrics of one process.

    The PID is re-read on every scrape so a restarted NameNode is picked
    up without restarting the exporter.
    """

    def __init__(self, pid_file: str | Path, namespace: str = "namenode") -> None:
        self.pid_file = Path(pid_file)
        self.cpu_seconds = counter_descriptor(
            namespace,
            "process",
            "cpu_seconds_total",
            "Total user and system CPU time spent in seconds.",
        )
        self.open_fds = gauge_descriptor(
            namespace, "process", "open_fds", "Number of open file descriptors."
        )
        self.max_fds = gauge_descriptor(
            namespace,
            "process",
            "max_fds",
            "Maximum number of open file descriptors.",
        )
        self.virtual_memory = gauge_descriptor(
            namespace,
            "process",
            "virtual_memory_bytes",
            "Virtual memory size in bytes.",
        )
        self.resident_memory = gauge_descriptor(
            namespace,
            "process",
            "resident_memory_bytes",
            "Resident memory size in bytes.",
        )
        self.start_time = gauge_descriptor(
            namespace,
            "process",
            "start_time_seconds",
            "Start time of the process since unix epoch in seconds.",
        )

    def describe(self) -> list[MetricDescriptor]:
        return [
            self.cpu_seconds,
            self.open_fds,
            self.max_fds,
            self.virtual_memory,
            self.resident_memory,
            self.start_time,
        ]

    async def collect(self) -> list[MetricSample]:
        try:
            pid = read_pid(self.pid_file)
            return self._collect_pid(pid)
        except (PidFileError, psutil.Error) as e:
            logger.with_fields(pid_file=str(self.pid_file)).error(
                "Failed to collect process metrics: %s", e
            )
            return []

    def _collect_pid(self, pid: int) -> list[MetricSample]:
        process = psutil.Process(pid)
        with process.oneshot():
            cpu = process.cpu_times()
            memory = process.memory_info()
            samples = [
                sample(self.cpu_seconds, cpu.user + cpu.system),
            ]
            # num_fds and rlimit are only available on POSIX / Linux
            if hasattr(process, "num_fds"):
                samples.append(sample(self.open_fds, process.num_fds()))
            if hasattr(process, "rlimit"):
                soft, _hard = process.rlimit(psutil.RLIMIT_NOFILE)
                samples.append(sample(self.max_fds, soft))
            samples.extend(
                [
                    sample(self.virtual_memory, memory.vms),
                    sample(self.resident_memory, memory.rss),
                    sample(self.start_time, process.create_time()),
                ]
            )
        return samples
