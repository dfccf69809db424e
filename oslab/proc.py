"""Simulated processes for a fair scheduler."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Process:
    """A process with a virtual runtime and remaining work in ticks."""

    pid: int
    vruntime: int
    residual_duration: int

    def run_one_tick(self) -> None:
        """Run for one tick, advancing vruntime and consuming one unit of work."""
        if self.residual_duration == 0:
            raise RuntimeError(f"process: {self.pid} is already terminated")
        print(
            f"process {self.pid} is running\tcurrent vruntime: {self.vruntime}"
            f"\tcurrent residual_duration: {self.residual_duration}"
        )
        self.residual_duration -= 1
        self.vruntime += 1
        print(
            f"after running for one tick:\tvruntime: {self.vruntime}"
            f"\tresidual_duration: {self.residual_duration}"
        )
        if self.residual_duration == 0:
            self.terminate()

    def terminate(self) -> None:
        """End the process: drop any remaining work and announce it."""
        self.residual_duration = 0
        print(f"process {self.pid} terminated.")

    def is_terminated(self) -> bool:
        return self.residual_duration == 0