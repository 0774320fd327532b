import math
import itertools
import numbers
from typing import Union, Callable, Optional, Any


class RandomGeneratorError(Exception):
    def __init__(self, inf: Union[int, float, None], sup: Union[int, float, None], trial: int) -> None:
        error_message = f"The random generator can't generate a number between ({inf}, {sup}) within {trial} trials."
        super().__init__(error_message)


class InvalidArmIndexError(IndexError):
    def __init__(self, arm_index: Any, arm_nb: int) -> None:
        error_message = f"Arm index should be an int in [0, {arm_nb}), received {arm_index!r}."
        super().__init__(error_message)


class InvalidRewardError(ValueError):
    def __init__(self, reward: Any) -> None:
        error_message = f"Reward should be a finite number >= 0, received {reward!r}."
        super().__init__(error_message)


def random_verifier(rand_func: Callable, low: Optional[Union[int, float]]=None,
                    up: Optional[Union[int, float]]=None, trial: int=100, low_open: bool=False) -> float:
    '''
    Use a given generator to generate random number, if the random number do not fall in the defined interval,
    retry until correct number generated or max trial reached.

    :param rand_func: Random generator function
    :param low: Lower bound of target interval
    :param up: Upper bound of target interval
    :param trial: Max trial number
    :param low_open: Exclude the lower bound itself (e.g. to keep log(u) finite)
    :return: Generated random number
    '''
    for i in range(trial):
        output = rand_func()
        if low is None:
            inf_valid = True
        else:
            inf_valid = output > low if low_open else output >= low
        sup_valid = True if (up is None) or (output <= up) else False
        if inf_valid and sup_valid:
            return output
    raise RandomGeneratorError(low, up, trial)


def round_half_up(value: Union[int, float]) -> int:
    """
    Round to the nearest int, halves going up (2.5 -> 3), unlike the banker's rounding of round()
    """
    return int(math.floor(value + 0.5))


def is_valid_reward(reward: Any) -> bool:
    if isinstance(reward, bool) or not isinstance(reward, numbers.Real):
        return False
    return bool(math.isfinite(reward) and reward >= 0)


def check_arm_index(arm_index: Any, arm_nb: int) -> int:
    """
    Return the arm index as an int, or raise InvalidArmIndexError if it is not in [0, arm_nb)
    """
    if isinstance(arm_index, bool) or not isinstance(arm_index, numbers.Integral):
        raise InvalidArmIndexError(arm_index, arm_nb)
    if not 0 <= arm_index < arm_nb:
        raise InvalidArmIndexError(arm_index, arm_nb)
    return int(arm_index)


def combination_dict(dicts: dict[Any, list]={}) -> list[dict]:
    """
    When dicts contains more than one option for certain value, and options for one key are presented as a
    list, this function unpack the dicts and return a list of dictionary with all possible combination, which
    only have one option of each key.

    For example, if dicts = {x: [a, b], y: [c, d], z: [e]}, then return would be [{x: a, y: c, z: e},
    {x: a, y: d, z: e}, {x: b, y: c, z: e}, {x: b, y: d, z: e},]

    All value should be in form of list.
    """
    keys, values = zip(*dicts.items())
    combinations = [dict(zip(keys, combined_value)) for combined_value in itertools.product(*values)]
    return combinations
