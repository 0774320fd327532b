from typing_extensions import override

from agent.abstract.AbstractResultRecorder import AbstractResultRecorder


class SingleResult(AbstractResultRecorder):
    def __init__(self, total_reward=0, env_snap=None):
        self.total_reward = total_reward
        self.regret = 0
        self.best_arm_count = 0
        self.moves = 0
        self.play_history = None
        self.estimated_stats = None
        self.env_snap = env_snap

    @override
    def update(self, reward=0, rwd_mean=None, rwd_mean_max=None) -> None:
        """
        Record one pull. Regret is the expected one: gap between the best true mean and the true mean played
        """
        self.total_reward += reward
        self.moves += 1
        if rwd_mean is not None and rwd_mean_max is not None:
            self.regret += rwd_mean_max - rwd_mean
            if rwd_mean == rwd_mean_max:
                self.best_arm_count += 1

    def get_total_reward(self):
        return self.total_reward

    def get_regret(self):
        return self.regret

    def get_result_dict(self):
        return vars(self)

    def update_history(self, play_history):
        self.play_history = play_history

    def update_estimated_stats(self, estimated_stats):
        self.estimated_stats = estimated_stats

    @override
    def get_summary(self) -> dict:
        return {"total_reward": self.total_reward, "regret": self.regret,
                "best_arm_count": self.best_arm_count, "moves": self.moves}
