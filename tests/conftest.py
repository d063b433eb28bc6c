import numpy as np
import pytest

from fakes import FakeDataset, FakeGroup, InMemoryStore
from matfiles import write_reference_mat


@pytest.fixture
def mat_path(tmp_path):
    return write_reference_mat(tmp_path / "arrays.mat")


@pytest.fixture
def headerless_path(tmp_path):
    return write_reference_mat(tmp_path / "plain.h5", with_header=False)


@pytest.fixture
def fake_store():
    return InMemoryStore({
        "q": FakeDataset("/q", np.array([1.0, 4.0, 2.0, 5.0, 3.0, 6.0]), (3, 2)),
        "s": FakeGroup("/s", {
            "MATLAB_class": "struct",
            "MATLAB_fields": ["b", "a"],
        }),
    })
