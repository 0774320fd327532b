import pytest

from conftest import FixedSampler
from env.GaussianBanditEnv import GaussianBanditEnv
from env.slot_machine.GaussianSlotMachine import GaussianSlotMachine
from env.slot_machine.MultiArmedBandit import MultiArmedBandit
from env.slot_machine.ParameterInitializer import DEFAULT_ARM_PARAMS
from utils.utils import InvalidArmIndexError


def test_slot_machine_rounds_half_up():
    machine = GaussianSlotMachine(index=0, mean=10, stddev=1, sampler=FixedSampler(0.5))
    assert machine.play() == 11
    assert machine.get_state() == {"played": 1, "total_rewards": 11}


def test_slot_machine_clamps_at_zero():
    machine = GaussianSlotMachine(index=0, mean=100, stddev=150, sampler=FixedSampler(-3.0))
    assert machine.play() == 0


def test_slot_machine_rewards_are_non_negative_ints():
    machine = GaussianSlotMachine(index=0, mean=50, stddev=150)
    for _ in range(200):
        reward = machine.play()
        assert isinstance(reward, int)
        assert reward >= 0


def test_multi_armed_bandit_with_configured_means():
    machines = MultiArmedBandit(configured_means="?means=300,500,700")
    assert machines.get_means() == [300, 500, 700]
    assert machines.get_stddevs() == [150, 150, 150]
    assert machines.get_max_mean() == 700


def test_multi_armed_bandit_rejects_unknown_machine():
    machines = MultiArmedBandit()
    with pytest.raises(InvalidArmIndexError):
        machines.play(3)


def test_env_session_is_done_after_round_nb_steps():
    env = GaussianBanditEnv(round_nb=3, configured_means=[300, 500, 700], seed=0)
    assert env.get_action_space() == 3
    assert env.get_rwd_means() == [300, 500, 700]
    assert env.get_stddevs() == [150, 150, 150]

    dones = []
    for action in (0, 2, 2):
        reward, done = env.step(action)
        assert reward >= 0
        dones.append(done)
    assert dones == [False, False, True]

    history = env.get_play_history()
    assert len(history) == 3
    assert history.actions == ["0", "2", "2"]
    assert history.rwd_mean_played_machine == [300, 700, 700]
    assert history.rwd_mean_max == [700, 700, 700]
    assert env.get_raw_state()[2]["played"] == 2


def test_env_step_rejects_invalid_arm():
    env = GaussianBanditEnv(round_nb=3, seed=0)
    with pytest.raises(InvalidArmIndexError):
        env.step(5)
    assert len(env.get_play_history()) == 0


def test_env_reset_restores_horizon_and_history():
    env = GaussianBanditEnv(round_nb=2, seed=0)
    env.step(0)
    env.step(1)
    env.reset()
    assert env.horizon == 2
    assert len(env.get_play_history()) == 0
    assert sorted(env.get_rwd_means()) == [400, 600, 800]


def test_env_reset_keeps_configured_order():
    env = GaussianBanditEnv(round_nb=2, configured_means=[800, 100, 400], seed=4)
    for _ in range(5):
        env.reset()
        assert env.get_rwd_means() == [800, 100, 400]


def test_same_seed_same_session():
    first = GaussianBanditEnv(round_nb=5, seed=21)
    second = GaussianBanditEnv(round_nb=5, seed=21)
    assert first.get_rwd_means() == second.get_rwd_means()
    assert [first.step(i % 3)[0] for i in range(5)] == [second.step(i % 3)[0] for i in range(5)]


def test_best_arms():
    assert GaussianBanditEnv(configured_means=[300, 300, 300]).get_best_arms() == [0, 1, 2]
    assert GaussianBanditEnv(configured_means=[300, 900, 300]).get_best_arms() == [1]


def test_env_snap_hides_machines():
    snap = GaussianBanditEnv(round_nb=4, base_params=DEFAULT_ARM_PARAMS, seed=0).env_snap()
    assert snap["round_nb"] == 4
    assert sorted(snap["rwd_means"]) == [400, 600, 800]
    assert "machines" not in snap
    assert "history" not in snap


def test_invalid_round_nb():
    with pytest.raises(AssertionError):
        GaussianBanditEnv(round_nb=0)


def test_env_refuses_steps_once_done():
    env = GaussianBanditEnv(round_nb=2, seed=0)
    env.step(0)
    _, done = env.step(1)
    assert done
    with pytest.raises(AssertionError):
        env.step(2)
    assert env.horizon == 0
    assert len(env.get_play_history()) == 2
    env.reset()
    _, done = env.step(2)
    assert not done
