import pytest


@pytest.fixture(scope="session", autouse=True)
def anyio_backend():
    return "asyncio"


@pytest.fixture
def accounts():
    return [
        "0x577887519278199ce8F8D80bAcc70fc32b48daD4",
        "0x9229d36c82E4e1d03B086C27d704741D0c78321e",
        "0xea1a669fd6a705d28239011a074adb3cfd6cd82b",
    ]
