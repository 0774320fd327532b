import copy
import logging

import numpy as np
from typing import Any, Optional, Sequence, Union

from env.slot_machine.MultiArmedBandit import MultiArmedBandit
from env.abstract.Environment import AbstractEnvironment
from utils.utils import check_arm_index


class PlayHistory:
    def __init__(self):
        self.actions = []
        self.rwd_mean_played_machine = []
        self.rwd_mean_max = []
        self.reward = []

    def __str__(self):
        return ",".join(self.actions)

    def __len__(self):
        return len(self.actions)

    def update(self, action, rwd_mean=None, rwd_mean_max=None, reward=None):
        self.actions.append(str(action))
        self.rwd_mean_played_machine.append(rwd_mean)
        self.rwd_mean_max.append(rwd_mean_max)
        self.reward.append(reward)


class GaussianBanditEnv(AbstractEnvironment):
    def __init__(self, round_nb: int=10, base_params: Optional[Sequence[tuple]]=None, configured_means: Any=None,
                 seed: Optional[int]=None, display: bool=False) -> None:
        """
        A session of round_nb pulls over Gaussian slot machines.

        :param round_nb: number of pulls before the session is done
        :param base_params: (mean, stddev) pairs shuffled on every reset, DEFAULT_ARM_PARAMS if None
        :param configured_means: optional means used verbatim instead of the shuffled base params
        :param seed: seed of the generator shared by the shuffle and the rewards
        :param display: print each pull and the history when done
        """
        assert type(round_nb) is int and round_nb > 0, f"round_nb should be an int > 0. Current value:{round_nb}"
        self.round_nb = round_nb
        self.horizon = round_nb
        self.base_params = copy.deepcopy(base_params)
        self.configured_means = copy.deepcopy(configured_means)
        self.seed = seed
        self.rng = np.random.default_rng(seed)
        self.machines = MultiArmedBandit(
            base_params=self.base_params, configured_means=self.configured_means, rng=self.rng)
        self.machine_nb = self.machines.machine_nb
        self.history = PlayHistory()
        self.display = display

    def env_snap(self, keys: Union[list[str], None]=None) -> dict:
        dict_env_snap_ = dict(vars(self))
        dict_env_snap_["rwd_means"] = self.get_rwd_means()
        if keys is None:
            keys = list(dict_env_snap_.keys())
            keys_to_remove = ["machines", "history", "rng"]
            keys = list(set(keys) - set(keys_to_remove))
        dict_env_snap = {key: dict_env_snap_[key] for key in keys}
        return dict_env_snap

    def reset(self) -> list[dict]:
        self.machines = MultiArmedBandit(
            base_params=self.base_params, configured_means=self.configured_means, rng=self.rng)
        self.horizon = self.round_nb
        self.history = PlayHistory()
        return self.get_raw_state()

    def get_rwd_means(self) -> list[Union[int, float]]:
        return self.machines.get_means()

    def get_stddevs(self) -> list[Union[int, float]]:
        """
        Noise scale of each arm, the only true parameter handed to the bandit engine
        """
        return self.machines.get_stddevs()

    def step(self, action: Union[int, np.integer], display: Union[bool, None]=None) -> tuple[int, bool]:
        assert self.horizon > 0, "The session is done, reset the env before playing again"
        action = check_arm_index(action, self.machine_nb)
        display = self.display if display is None else display

        if display:
            print(f"Playing machine: {action}")

        reward = self.machines.play(action)
        self.horizon -= 1
        done = True if self.horizon <= 0 else False

        self.history.update(
            action,
            self.machines.get_means()[action],
            self.machines.get_max_mean(),
            reward=reward
        )
        logging.debug(f"Machine {action} gave reward {reward}, horizon: {self.horizon}")

        if display and done:
            self.display_history()

        return reward, done

    def get_raw_state(self) -> list[dict]:
        """
        Return output of states as list of dict
        :return:
        """
        return self.machines.get_state()

    def render(self) -> None:
        print(f"No.{self.round_nb - self.horizon} round, {self.round_nb} rounds in total, "
              f"Horizon: {self.horizon}")
        self.machines.display()

    def get_best_arms(self) -> list[int]:
        rwd_means = np.array(self.machines.get_means())
        return np.where(rwd_means == rwd_means.max())[0].tolist()

    def display_history(self) -> None:
        logging.info(f"Best arms: {self.get_best_arms()}, reward means:{self.machines.get_means()}, "
                     f"History:{self.history}")
        print(f"Best arms: {self.get_best_arms()}, reward means:{self.machines.get_means()}, "
              f"History:{self.history}")

    def get_action_space(self) -> int:
        return self.machine_nb

    def get_play_history(self) -> PlayHistory:
        return self.history
