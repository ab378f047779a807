import random
import string

import pytest
from click.testing import CliRunner


# Reference numbers taken from real bills and from ISO 11649 examples.
VALID_REFERENCES = [
    "RF18539007547034",
    "RF712348231",
    "RF63ABCD0754EFGH",
    "RF93539007547034928301234",
    "RF14YOUT20250401RICCARDO",
    "RF81YOUT20250401ROBERTOCA",
    "RF96YOUT20250401DEREKCCCH",
    "RF53YOUT20250401KOCHMAXI",
    "RF36MOTO20250301MATTEOAB",
    "RF45ABC",
    "RF0236",
    "RF9854",
]


@pytest.fixture(params=VALID_REFERENCES)
def valid_reference(request):
    """Each known-good electronic reference in turn."""
    return request.param


@pytest.fixture(scope="session")
def random_bodies():
    """A fixed sample of bodies covering every allowed length."""
    rng = random.Random(11649)
    alphabet = string.digits + string.ascii_uppercase
    return [
        "".join(rng.choice(alphabet) for _ in range(length))
        for length in range(1, 22)
        for _ in range(10)
    ]


@pytest.fixture
def cli_runner():
    return CliRunner()
