"""
Host and process resource sampling.

Load average and resident memory are read on every call and
normalized against the pod's configured limits. No history is kept.
"""

import psutil

from spreadwatch.core.types import SystemSnapshot


class SystemSampler:
    """Produces a SystemSnapshot of the current process and host."""

    def __init__(
        self,
        ip: str,
        cpu_cores: float,
        ram_limit_bytes: int,
        process: psutil.Process | None = None,
    ) -> None:
        """
        Initialize the sampler.

        Args:
            ip: Pod identifier, passed through unchanged.
            cpu_cores: Cores allotted to the pod.
            ram_limit_bytes: Memory limit of the pod.
            process: Process to measure, the current one if omitted.
        """
        self._ip = ip
        self._cpu_cores = cpu_cores
        self._ram_limit_bytes = ram_limit_bytes
        self._process = process or psutil.Process()

    def cpu_percent(self) -> float:
        """1-minute load average as a percentage of allotted cores."""
        load_1m = psutil.getloadavg()[0]
        return round(load_1m / self._cpu_cores * 100, 1)

    def ram_percent(self) -> float:
        """Resident memory as a percentage of the RAM limit."""
        rss = self._process.memory_info().rss
        return round(rss / self._ram_limit_bytes * 100, 1)

    def sample(self) -> SystemSnapshot:
        return SystemSnapshot(
            ip=self._ip,
            cpu_percent=self.cpu_percent(),
            ram_percent=self.ram_percent(),
        )
