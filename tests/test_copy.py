import json

import pytest

from zosmf.core import ClientCore
from zosmf.datasets.copy import (
    DatasetCopyBuilder,
    DatasetCopyEnqueue,
    DatasetCopyFileBuilder,
)


@pytest.fixture
def core():
    return ClientCore("https://test.com")


def test_copy_dataset_request(core):
    request = DatasetCopyBuilder(core, "MY.OLD.DS", "MY.NEW.DS").get_request()
    assert request.method == "PUT"
    assert request.url == core.url("/zosmf/restfiles/ds/MY.NEW.DS")
    assert json.loads(request.body) == {
        "request": "copy",
        "from-dataset": {"dsn": "MY.OLD.DS"},
        "replace": None,
    }


def test_copy_member_request(core):
    request = (
        DatasetCopyBuilder(core, "MY.OLD.PDS", "MY.NEW.PDS")
        .from_member("OLD")
        .to_member("NEW")
        .get_request()
    )
    assert request.url == core.url("/zosmf/restfiles/ds/MY.NEW.PDS(NEW)")
    body = json.loads(request.body)
    assert body["from-dataset"] == {"dsn": "MY.OLD.PDS", "member": "OLD"}


def test_copy_options_in_body(core):
    request = (
        DatasetCopyBuilder(core, "A.SRC", "A.DST")
        .alias(True)
        .enqueue("EXCLU")
        .replace(True)
        .get_request()
    )
    body = json.loads(request.body)
    assert body["from-dataset"]["alias"] is True
    assert body["enq"] == "EXCLU"
    assert body["replace"] is True


def test_copy_volume_in_path(core):
    request = DatasetCopyBuilder(core, "A.SRC", "A.DST").volume("VOL1").get_request()
    assert request.url == core.url("/zosmf/restfiles/ds/-(VOL1)/A.DST")


def test_invalid_enqueue_rejected(core):
    with pytest.raises(ValueError):
        DatasetCopyBuilder(core, "A.SRC", "A.DST").enqueue("NOPE")


def test_enqueue_enum_accepted(core):
    request = (
        DatasetCopyBuilder(core, "A.SRC", "A.DST")
        .enqueue(DatasetCopyEnqueue.SHRW)
        .get_request()
    )
    assert json.loads(request.body)["enq"] == DatasetCopyEnqueue.SHRW.value


def test_copy_file_request(core):
    request = DatasetCopyFileBuilder(core, "/u/user/text.txt", "MY.NEW.DS").get_request()
    assert request.url == core.url("/zosmf/restfiles/ds/MY.NEW.DS")
    assert json.loads(request.body) == {
        "request": "copy",
        "from-file": {"filename": "/u/user/text.txt"},
        "replace": None,
    }


def test_copy_file_to_member_with_options(core):
    request = (
        DatasetCopyFileBuilder(core, "/u/user/text.txt", "MY.NEW.PDS")
        .to_member("TEXT")
        .file_type("binary")
        .replace(False)
        .get_request()
    )
    assert request.url == core.url("/zosmf/restfiles/ds/MY.NEW.PDS(TEXT)")
    body = json.loads(request.body)
    assert body["from-file"]["file_type"] == "binary"
    assert body["replace"] is False