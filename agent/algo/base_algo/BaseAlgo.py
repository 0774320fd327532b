import logging
from abc import ABC
from typing import Optional, Sequence, Union

import numpy as np
from tqdm import tqdm

from agent.abstract.AbstractAlgo import AbstractAlgo
from agent.result_recorder.TestResult import TestResult
from agent.result_recorder.SingleResult import SingleResult

# Shared by every arm without observation, never derived from the true means
DEFAULT_PRIOR_MEAN = 300


class BaseAlgo(AbstractAlgo, ABC):
    """
    Scores arms from their observed statistics. The prior mean and the sampler belong to the engine and are
    handed over on every choice, see BanditEngine.select
    """

    def choose_action(self, arms: Sequence, prior_mean: Union[int, float]=DEFAULT_PRIOR_MEAN, sampler=None,
                      *args, **kwargs) -> int:
        assert len(arms) > 0, "At least one arm is needed to choose an action"
        scores = self.score_arms(arms, prior_mean, sampler, *args, **kwargs)
        # np.argmax keeps the first maximum, so ties go to the lowest index
        return int(np.argmax(scores))

    def single_test(self, env, engine, max_moves: Optional[int]=None, display: bool=False) -> SingleResult:
        """
        Play one session: reset env and engine, then choose, pull and update until the env is done
        :param env: GaussianBanditEnv
        :param engine: BanditEngine with as many arms as the env, its prior mean and sampler drive the choices
        :param max_moves: stop earlier than the env horizon if given
        :param display: print the progression
        :return: SingleResult of the session
        """
        assert engine.num_arms == env.get_action_space(), \
            f"Engine has {engine.num_arms} arms, env has {env.get_action_space()}"
        env.reset()
        engine.reset(env.get_stddevs())
        result = SingleResult(env_snap=env.env_snap())
        finish = False
        moves_count = 0
        if display:
            logging.info(f"Model name:{self.name}")
            print(f"Model name:{self.name}")

        while not finish:
            action_ = engine.select(self)

            reward, done = env.step(action_, display)
            engine.update(action_, reward)
            moves_count += 1

            history = env.get_play_history()
            result.update(reward, history.rwd_mean_played_machine[-1], history.rwd_mean_max[-1])
            if done or (max_moves is not None and moves_count >= max_moves):
                finish = True

        if display:
            engine.display()
            print(f"Total rewards: {result.get_total_reward()}")

        result.update_history(env.get_play_history())
        result.update_estimated_stats(engine.get_estimated_stats())
        return result

    def multi_test(self, env, engine, max_games: int=100, max_moves: Optional[int]=None,
                   display: bool=False) -> TestResult:
        algo_result = TestResult(self.name)
        for i in tqdm(range(max_games), disable=not display):
            test_result = self.single_test(env, engine, max_moves, display=False)
            algo_result.update_from_single_result(test_result, epoch=i)

        algo_result.log(display=display)
        return algo_result
