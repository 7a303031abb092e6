from unittest import TestCase

import torch
from mlspaces.utils import sampling


class TestSampling(TestCase):
    def test_randint(self):
        generator = torch.Generator().manual_seed(0)
        for (low, high) in [(0, 1), (-1, 2), (40, 51)]:
            for _ in range(20):
                val = sampling.randint(low, high, generator=generator)
                assert isinstance(val, int) and low <= val < high

    def test_randint_beyond_int64(self):
        generator = torch.Generator().manual_seed(0)
        for (low, high) in [(0, 2 ** 63 + 1), (-2 ** 63, 2 ** 63 - 1), (2 ** 70, 2 ** 70 + 2 ** 64 - 1)]:
            vals = [sampling.randint(low, high, generator=generator) for _ in range(50)]
            assert all(isinstance(val, int) and low <= val < high for val in vals)
            assert len(set(vals)) > 1

    def test_uniform(self):
        generator = torch.Generator().manual_seed(0)
        for (low, high) in [(0., 1.), (-1., 1.), (40., 50.)]:
            for _ in range(20):
                val = sampling.uniform(low, high, generator=generator)
                assert isinstance(val, float) and low <= val < high
        assert sampling.uniform(3., 3., generator=generator) == 3.

    def test_uniform_wider_than_float_max(self):
        generator = torch.Generator().manual_seed(0)
        vals = [sampling.uniform(-1e308, 1e308, generator=generator) for _ in range(50)]
        assert all(-1e308 <= val <= 1e308 for val in vals)
        assert any(val < 0 for val in vals) and any(val > 0 for val in vals)

    def test_exponential(self):
        generator = torch.Generator().manual_seed(0)
        vals = torch.tensor([sampling.exponential(2.0, generator=generator) for _ in range(2000)])
        assert (vals >= 0).all()
        assert abs(float(vals.mean()) - 0.5) < 0.05

    def test_normal(self):
        generator = torch.Generator().manual_seed(0)
        vals = torch.tensor([sampling.normal(3.0, 0.5, generator=generator) for _ in range(2000)])
        assert abs(float(vals.mean()) - 3.0) < 0.05
        assert abs(float(vals.std()) - 0.5) < 0.05

    def test_categorical(self):
        generator = torch.Generator().manual_seed(0)
        counts = [0, 0, 0]
        for _ in range(3000):
            counts[sampling.categorical([0., 1., 2.], generator=generator)] += 1
        assert counts[0] == 0
        assert abs(counts[2] - 2000) < 150

    def test_injected_generator_is_reproducible(self):
        vals_1 = [sampling.normal(generator=torch.Generator().manual_seed(7)) for _ in range(3)]
        vals_2 = [sampling.normal(generator=torch.Generator().manual_seed(7)) for _ in range(3)]
        assert vals_1 == vals_2
