import pytest

from hostfetch.exceptions import PropertySourceError
from hostfetch.sources import (
    DEFAULT_READERS,
    HostPropertySource,
    display_name,
    read_kernel,
    read_memory,
)

from .conftest import FAKE_VALUES


class TestHostPropertySource:
    def test_collect_keeps_request_order(self, fake_source: HostPropertySource):
        snapshot = fake_source.collect(["memory", "os"])

        assert list(snapshot.items()) == [("memory", FAKE_VALUES["memory"]), ("os", FAKE_VALUES["os"])]

    def test_missing_values_are_skipped(self):
        source = HostPropertySource(readers={"os": lambda: "Linux", "cpu": lambda: None})

        assert source.collect(["os", "cpu"]) == {"os": "Linux"}

    def test_reader_os_error_is_skipped(self):
        def broken() -> str:
            raise OSError("no such file")

        source = HostPropertySource(readers={"os": broken, "kernel": lambda: "6.1"})

        assert source.collect(["os", "kernel"]) == {"kernel": "6.1"}

    def test_unknown_key_fails_before_reading(self):
        calls = []

        def reader() -> str:
            calls.append("os")
            return "Linux"

        source = HostPropertySource(readers={"os": reader})

        with pytest.raises(PropertySourceError) as exc_info:
            source.collect(["os", "gpu"])

        assert exc_info.value.key == "gpu"
        assert calls == []

    def test_read_unknown_key(self, fake_source: HostPropertySource):
        with pytest.raises(PropertySourceError):
            fake_source.read("uptime")

    def test_default_readers(self):
        assert HostPropertySource().keys() == ["os", "kernel", "cpu", "memory"]
        assert set(DEFAULT_READERS) == {"os", "kernel", "cpu", "memory"}


class TestDisplayNames:
    @pytest.mark.parametrize(
        "key, expected",
        [("os", "OS"), ("kernel", "Kernel"), ("cpu", "CPU"), ("memory", "Memory"), ("uptime", "uptime")],
    )
    def test_display_name(self, key, expected):
        assert display_name(key) == expected


class TestReaders:
    def test_memory_reports_mib(self):
        value = read_memory()

        assert value is not None
        assert value.endswith(" MiB")
        assert " MiB / " in value

    def test_kernel_is_text_or_none(self):
        value = read_kernel()

        assert value is None or isinstance(value, str)
