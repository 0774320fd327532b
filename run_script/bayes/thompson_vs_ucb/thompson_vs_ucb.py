import sys
import os
import csv
import copy
import logging
from pathlib import Path

from tqdm import tqdm

# Ensure project root is in sys.path so imports like `agent.*` and `env.*` work
# when running this script directly. The project root is 3 parents
# above this file: (.../run_script/bayes/thompson_vs_ucb/thompson_vs_ucb.py).
project_root = Path(__file__).resolve().parents[3]
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from agent.algo.ThompsonSampling import ThompsonSampling
from agent.algo.BayesianUCB import BayesianUCB
from agent.engine.BanditEngine import BanditEngine
from env.GaussianBanditEnv import GaussianBanditEnv
from env.slot_machine.ParameterInitializer import DEFAULT_ARM_PARAMS
from utils.GaussianSampler import GaussianSampler
from utils.utils import combination_dict
from run_script.utils import prepare_results_directory

# TEST_DIR will be set in main(); keep as None so importing this module
# doesn't create directories or start the runs.
TEST_DIR = None

PRIOR_MEAN = 300
GAMES = 200

env_config = {
    "round_nb": 20,
    "base_params": DEFAULT_ARM_PARAMS,
    # e.g. "?means=300,500,700" to fix the arms instead of shuffling them
    "configured_means": None,
    "seed": 0,
    "display": False,
}

sweep_config = {
    "algo": ["ThompsonSampling", "BayesianUCB"],
    "round_nb": [2, 20, 200],
}


def _ensure_test_dirs_and_logging():
    """Configure logging when TEST_DIR is available."""
    if TEST_DIR is None:
        return

    log_path = os.path.join(TEST_DIR, 'record.log')
    logging.basicConfig(filename=log_path, level=logging.DEBUG)


def build_algo(algo_name: str):
    if algo_name == "ThompsonSampling":
        return ThompsonSampling()
    if algo_name == "BayesianUCB":
        return BayesianUCB()
    raise ValueError(f"Unknown algo: {algo_name}")


def export_summaries_to_csv(summaries: list[dict], path: str) -> None:
    fieldnames = ["agent_name", "round_nb", "average_reward", "average_regret", "best_arm_perc", "nb_games"]
    with open(path, 'w', newline='') as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        writer.writerows(summaries)


def main():
    global TEST_DIR

    TEST_DIR = prepare_results_directory()
    _ensure_test_dirs_and_logging()

    summaries = []
    for setting in tqdm(combination_dict(sweep_config)):
        config = copy.deepcopy(env_config)
        config["round_nb"] = setting["round_nb"]
        env = GaussianBanditEnv(**config)
        sampler = GaussianSampler(seed=env_config["seed"])
        engine = BanditEngine(env.get_stddevs(), prior_mean=PRIOR_MEAN, sampler=sampler)
        algo = build_algo(setting["algo"])

        logging.info(f"Running {setting['algo']} for {GAMES} games of {setting['round_nb']} rounds")
        result = algo.multi_test(env, engine, max_games=GAMES)
        summary = result.get_summary_dict()
        summary["round_nb"] = setting["round_nb"]
        summaries.append(summary)
        print(f"{setting['algo']} / {setting['round_nb']} rounds: average reward {summary['average_reward']:.1f}, "
              f"average regret {summary['average_regret']:.1f}")

    export_summaries_to_csv(summaries, os.path.join(TEST_DIR, 'summary.csv'))


if __name__ == '__main__':
    main()
