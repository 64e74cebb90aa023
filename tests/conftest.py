import pytest

from expense_vault.storage import JsonFileKV
from expense_vault.vault import open_vault


class MemoryKV:
    def __init__(self):
        self.data = {}
        self.writes = 0
        self.fail_writes = False
        self.fail_reads = False

    def get(self, key):
        if self.fail_reads:
            raise OSError("disk gone")
        return self.data.get(key)

    def set(self, key, value):
        if self.fail_writes:
            raise OSError("disk full")
        self.writes += 1
        self.data[key] = value


@pytest.fixture
def kv():
    return MemoryKV()


@pytest.fixture
def vault(kv):
    return open_vault(kv)


@pytest.fixture
def file_vault(tmp_path):
    return open_vault(JsonFileKV(tmp_path / "data"))
