from typing import Any, Optional, Sequence, Union

import numpy as np

from env.slot_machine.GaussianSlotMachine import GaussianSlotMachine
from env.slot_machine.ParameterInitializer import init_arm_params
from utils.GaussianSampler import GaussianSampler
from utils.utils import check_arm_index


class MultiArmedBandit:
    def __init__(self, base_params: Optional[Sequence[tuple]]=None, configured_means: Any=None,
                 rng: Optional[np.random.Generator]=None, sampler: Optional[GaussianSampler]=None) -> None:
        self.rng = rng if rng is not None else np.random.default_rng()
        self.sampler = sampler if sampler is not None else GaussianSampler(uniform=lambda: float(self.rng.random()))
        # Shuffled unless valid means are configured
        arm_params = init_arm_params(base_params, configured_means, rng=self.rng)
        self.machine_nb = len(arm_params)
        self.slot_machines = [
            GaussianSlotMachine(index=i, mean=params.mean, stddev=params.stddev, sampler=self.sampler)
            for i, params in enumerate(arm_params)
        ]

    def play(self, machine_index: int) -> int:
        machine_index = check_arm_index(machine_index, self.machine_nb)
        return self.slot_machines[machine_index].play()

    def get_state(self) -> list[dict]:
        return [slot_machine.get_state() for slot_machine in self.slot_machines]

    def display(self) -> None:
        for slot_machine in self.slot_machines:
            slot_machine.display()

    def get_means(self) -> list[Union[int, float]]:
        return [slot_machine.get_mean() for slot_machine in self.slot_machines]

    def get_stddevs(self) -> list[Union[int, float]]:
        return [slot_machine.get_stddev() for slot_machine in self.slot_machines]

    def get_max_mean(self) -> Union[int, float]:
        return max(self.get_means())
