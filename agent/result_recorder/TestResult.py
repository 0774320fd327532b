import logging

from typing_extensions import override

from agent.abstract.AbstractResultRecorder import AbstractResultRecorder


class TestResult(AbstractResultRecorder):
    # Not a pytest test class
    __test__ = False

    def __init__(self, agent_name=None):
        self.agent_name = agent_name
        self.total_rewards = 0
        self.total_regret = 0
        self.best_arm_count = 0
        self.total_moves = 0
        self.nb_games = 0

        # Key: epoch
        self.play_history = {}
        self.estimated_stats = {}
        self.env_snaps = {}

    @override
    def update(self, total_reward=0, regret=0, best_arm_count=0, moves=0, play_history=None,
               estimated_stats=None, env_snap=None, epoch=None) -> None:
        epoch = self.nb_games if epoch is None else epoch
        self.total_rewards += total_reward
        self.total_regret += regret
        self.best_arm_count += best_arm_count
        self.total_moves += moves
        self.nb_games += 1
        self.play_history[epoch] = play_history
        self.estimated_stats[epoch] = estimated_stats
        self.env_snaps[epoch] = env_snap

    def update_from_single_result(self, single_result, epoch=None):
        self.update(**single_result.get_result_dict(), epoch=epoch)

    def get_env_snaps(self):
        return self.env_snaps

    def get_history(self):
        return self.play_history

    @override
    def get_summary(self):
        assert self.nb_games > 0, "No game recorded yet"
        average_reward = float(self.total_rewards) / float(self.nb_games)
        average_regret = float(self.total_regret) / float(self.nb_games)
        best_arm_perc = float(self.best_arm_count) / float(self.total_moves) if self.total_moves > 0 else 0.0

        return average_reward, average_regret, best_arm_perc

    def get_summary_dict(self):
        average_reward, average_regret, best_arm_perc = self.get_summary()
        output_dict = {
            "agent_name": self.agent_name,
            "average_reward": average_reward,
            "average_regret": average_regret,
            "best_arm_perc": best_arm_perc,
            "nb_games": self.nb_games,
        }
        return output_dict

    def log(self, display=False):
        average_reward, average_regret, best_arm_perc = self.get_summary()
        logging.info(f"Agent name:{self.agent_name}")
        logging.info(f"Games played: {self.nb_games}")
        logging.info(f"Average reward :{average_reward}")
        logging.info(f"Average regret :{average_regret}")
        logging.info(f"Best arm percentage: {100.0 * best_arm_perc}%")
        if display:
            print(f"Agent name:{self.agent_name}")
            print(f"Average reward :{average_reward}")
            print(f"Average regret :{average_regret}")
