from datetime import date
from urllib.parse import parse_qs, urlsplit

import pytest
import responses

from zosmf.core import ClientCore
from zosmf.datasets.common import DatasetMigratedRecall
from zosmf.datasets.members import (
    MemberAttributesBase,
    MemberAttributesName,
    MemberListBuilder,
)
from zosmf.errors import InvalidValueError

BASE = "https://test.com"
MEMBERS_URL = BASE + "/zosmf/restfiles/ds/NOTSYS1.PROCLIB/member"


def make_builder():
    return MemberListBuilder(ClientCore(BASE), "NOTSYS1.PROCLIB")


def test_example_1():
    request = make_builder().get_request()
    assert request.method == "GET"
    assert request.url == MEMBERS_URL
    assert "X-IBM-Attributes" not in request.headers


def test_example_2():
    request = make_builder().attributes_base().get_request()
    assert request.url == MEMBERS_URL
    assert request.headers["X-IBM-Attributes"] == "base"


@pytest.mark.parametrize(
    "configure, expected",
    [
        (lambda b: b.include_total(True), "member,total"),
        (lambda b: b.attributes_base().include_total(True), "base,total"),
        (lambda b: b.attributes_member(), "member"),
    ],
)
def test_attributes_header(configure, expected):
    assert configure(make_builder()).get_request().headers["X-IBM-Attributes"] == expected


def test_query_and_headers():
    request = (
        make_builder()
        .start("A")
        .pattern("B*")
        .max_items(3)
        .migrated_recall(DatasetMigratedRecall.NO_WAIT)
        .get_request()
    )
    assert parse_qs(urlsplit(request.url).query) == {"start": ["A"], "pattern": ["B*"]}
    assert request.headers["X-IBM-Max-Items"] == "3"
    assert request.headers["X-IBM-Migrated-Recall"] == "nowait"


def test_invalid_migrated_recall():
    with pytest.raises(ValueError):
        make_builder().migrated_recall("later")


def test_build_names():
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.GET,
            MEMBERS_URL,
            json={
                "items": [{"member": "ONE"}, {"member": "TWO"}],
                "returnedRows": 2,
                "JSONversion": 1,
            },
        )
        result = make_builder().build()
    assert result.items == (MemberAttributesName("ONE"), MemberAttributesName("TWO"))
    assert result.returned_rows == 2
    assert result.more_rows is None
    assert result.json_version == 1


def test_build_base():
    item = {
        "member": "PROC1",
        "vers": 1,
        "mod": 2,
        "c4date": "2023-05-14",
        "m4date": "2023-06-01",
        "cnorc": 10,
        "inorc": 8,
        "mnorc": 0,
        "mtime": "12:30",
        "msec": "15",
        "user": "IBMUSER",
        "sclm": "Y",
    }
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.GET,
            MEMBERS_URL,
            json={"items": [item], "returnedRows": 1, "totalRows": 1, "JSONversion": 1},
        )
        result = make_builder().attributes_base().build()
    member = result.items[0]
    assert isinstance(member, MemberAttributesBase)
    assert member.name == "PROC1"
    assert member.version == 1
    assert member.modification_level == 2
    assert member.creation_date == date(2023, 5, 14)
    assert member.modification_date == date(2023, 6, 1)
    assert member.current_number_of_records == 10
    assert member.modified_by_sclm is True
    assert member.user == "IBMUSER"
    assert member.ssi is None
    assert result.total_rows == 1


def test_base_invalid_sclm():
    with pytest.raises(InvalidValueError):
        MemberAttributesBase.from_json({"member": "X", "sclm": "YES"})


def test_base_invalid_version():
    with pytest.raises(InvalidValueError):
        MemberAttributesBase.from_json({"member": "X", "vers": "01"})


def test_name_missing_member():
    with pytest.raises(InvalidValueError):
        MemberAttributesName.from_json({"name": "X"})