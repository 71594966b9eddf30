import random

import pytest

from structural_patterns.cloud_storage import (
    CloudDrive,
    CloudStorage,
    FastShare,
    VirtualDrive,
    VirtualDriveAdapter,
    main,
)


class FixedRandom:
    def __init__(self, value):
        self.value = value
        self.stops = []

    def randrange(self, stop):
        self.stops.append(stop)
        return self.value


def test_cloud_storage_is_abstract():
    with pytest.raises(TypeError):
        CloudStorage()


def test_cloud_drive_upload(capsys):
    assert CloudDrive().upload_contents("Beam me up, Scotty!") is True
    assert capsys.readouterr().out == "Uploading 19 bytes to CloudDrive: \n"


def test_cloud_drive_free_space_uses_rng(capsys):
    rng = FixedRandom(7)
    assert CloudDrive(rng).free_space() == 7
    assert rng.stops == [20]
    assert capsys.readouterr().out == "Available CloudDrive storage: 7GB\n"


def test_fast_share_upload_and_space(capsys):
    rng = FixedRandom(3)
    share = FastShare(rng)
    assert share.upload_contents("abc") is True
    assert share.free_space() == 3
    assert rng.stops == [10]
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Uploading 3 bytes to FastShare: ",
        "Available FastShare storage: 3GB",
    ]


def test_free_space_ranges():
    rng = random.Random(42)
    drive = CloudDrive(rng)
    share = FastShare(rng)
    adapter = VirtualDriveAdapter(VirtualDrive(rng))
    for _ in range(200):
        assert 0 <= drive.free_space() < 20
        assert 0 <= share.free_space() < 10
        assert 15 - 9 <= adapter.free_space() <= 15


def test_virtual_drive_upload_data(capsys):
    assert VirtualDrive().upload_data("hello", 5) is True
    assert capsys.readouterr().out == 'Uploading to VirtualDrive: "hello" ID: 5\n'


def test_adapter_upload_uses_clock_as_id(capsys):
    adapter = VirtualDriveAdapter(clock=lambda: 1700000000.7)
    assert adapter.upload_contents("Beam me up, Scotty!") is True
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "VirtualDriveAdapter::uploadContents() -> Calling VirtualDrive::uploadData()",
        'Uploading to VirtualDrive: "Beam me up, Scotty!" ID: 1700000000',
    ]


def test_adapter_free_space_is_total_minus_used(capsys):
    rng = FixedRandom(0)
    adapter = VirtualDriveAdapter(VirtualDrive(rng))
    assert adapter.free_space() == 15
    assert rng.stops == [10]
    out = capsys.readouterr().out.splitlines()
    assert out[-1] == "Available VirtualDrive storage: 15 GB"


def test_services_used_through_common_interface(capsys):
    rng = FixedRandom(4)
    services = [CloudDrive(rng), FastShare(rng), VirtualDriveAdapter(VirtualDrive(rng))]
    results = [(s.upload_contents("xy"), s.free_space()) for s in services]
    assert results == [(True, 4), (True, 4), (True, 11)]


def test_main_visits_all_services(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Uploading 19 bytes to CloudDrive: " in out
    assert "Uploading 19 bytes to FastShare: " in out
    assert '"Beam me up, Scotty!"' in out
    assert out.count("\n\n") == 3