import pytest


class FixedSampler:
    """Sampler stub returning the same standard normal draw every time"""

    def __init__(self, z=0.0):
        self.z = z
        self.calls = 0

    def sample_standard_normal(self):
        self.calls += 1
        return self.z

    def sample_normal(self, mean=0, stddev=1):
        return mean + stddev * self.sample_standard_normal()


class SequenceUniform:
    """Uniform source replaying a fixed list of draws"""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def __call__(self):
        value = self.values[self.calls]
        self.calls += 1
        return value


@pytest.fixture
def zero_sampler():
    return FixedSampler(0.0)


@pytest.fixture
def fixed_sampler():
    return FixedSampler
