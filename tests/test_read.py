import pytest
import responses

from zosmf.core import ClientCore
from zosmf.datasets.common import DatasetEnqueue, DatasetMigratedRecall
from zosmf.datasets.read import DatasetRead, DatasetReadBuilder
from zosmf.errors import ApiError, MissingHeaderError

BASE = "https://test.com"
DS_URL = "https://test.com/zosmf/restfiles/ds/A.B"


@pytest.fixture
def core():
    return ClientCore(BASE)


def test_example_1_read_member(core):
    request = DatasetReadBuilder(core, "SYS1.PARMLIB").member("SMFPRM00").get_request()
    assert request.method == "GET"
    assert request.url == "https://test.com/zosmf/restfiles/ds/SYS1.PARMLIB(SMFPRM00)"
    assert "X-IBM-Data-Type" not in request.headers


def test_example_2_read_dataset(core):
    request = DatasetReadBuilder(core, "JIAHJ.REST.SRVMP").get_request()
    assert request.url == "https://test.com/zosmf/restfiles/ds/JIAHJ.REST.SRVMP"
    assert request.body is None


def test_volume_in_path(core):
    request = (
        DatasetReadBuilder(core, "MY.PDS").volume("ZMF046").member("MEM").get_request()
    )
    assert request.url == "https://test.com/zosmf/restfiles/ds/-(ZMF046)/MY.PDS(MEM)"


def test_data_type_headers(core):
    builder = DatasetReadBuilder(core, "A.B")
    assert builder.binary().get_request().headers["X-IBM-Data-Type"] == "binary"
    assert builder.record().get_request().headers["X-IBM-Data-Type"] == "record"
    assert builder.text().get_request().headers["X-IBM-Data-Type"] == "text"
    assert (
        builder.binary().encoding("IBM-1047").get_request().headers["X-IBM-Data-Type"]
        == "binary;fileEncoding=IBM-1047"
    )
    assert (
        builder.encoding("IBM-037").get_request().headers["X-IBM-Data-Type"]
        == "text;fileEncoding=IBM-037"
    )


def test_search_query(core):
    request = (
        DatasetReadBuilder(core, "A.B")
        .search("HELLO")
        .search_case_sensitive(True)
        .search_max_return(5)
        .get_request()
    )
    assert request.url == (
        "https://test.com/zosmf/restfiles/ds/A.B"
        "?search=HELLO&insensitive=false&maxreturnsize=5"
    )


def test_case_insensitive_search_adds_nothing(core):
    request = DatasetReadBuilder(core, "A.B").regex_search("H.*").search_case_sensitive(
        False
    ).get_request()
    assert request.url == "https://test.com/zosmf/restfiles/ds/A.B?research=H.%2A"


def test_optional_headers(core):
    request = (
        DatasetReadBuilder(core, "A.B")
        .if_none_match("ABC123")
        .return_etag(True)
        .migrated_recall(DatasetMigratedRecall.NO_WAIT)
        .record_range("0-100")
        .obtain_enq(DatasetEnqueue.SHRW)
        .session_ref("REF1")
        .release_enq(True)
        .dsname_encoding("IBM-1047")
        .get_request()
    )
    headers = request.headers
    assert headers["If-None-Match"] == "ABC123"
    assert headers["X-IBM-Return-Etag"] == "true"
    assert headers["X-IBM-Migrated-Recall"] == "nowait"
    assert headers["X-IBM-Record-Range"] == "0-100"
    assert headers["X-IBM-Obtain-ENQ"] == "SHRW"
    assert headers["X-IBM-Session-Ref"] == "REF1"
    assert headers["X-IBM-Release-ENQ"] == "true"
    assert headers["X-IBM-Dsname-Encoding"] == "IBM-1047"


def test_false_flags_add_no_headers(core):
    headers = (
        DatasetReadBuilder(core, "A.B").return_etag(False).release_enq(False)
    ).get_request().headers
    assert "X-IBM-Return-Etag" not in headers
    assert "X-IBM-Release-ENQ" not in headers


def test_builder_is_immutable(core):
    base = DatasetReadBuilder(core, "A.B")
    base.member("X")
    assert base.get_request().url == "https://test.com/zosmf/restfiles/ds/A.B"


def test_build_text(core):
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.GET,
            DS_URL,
            body="hello\nworld",
            headers={"Etag": "E1", "X-IBM-Txid": "TX1", "X-IBM-Session-Ref": "S1"},
        )
        result = DatasetReadBuilder(core, "A.B").build()
    assert result == DatasetRead(
        data="hello\nworld", etag="E1", session_ref="S1", transaction_id="TX1"
    )


def test_build_binary(core):
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.GET,
            DS_URL,
            body=b"\x00\x01\xff",
            headers={"X-IBM-Txid": "TX2"},
        )
        result = DatasetReadBuilder(core, "A.B").binary().build()
    assert result.data == b"\x00\x01\xff"
    assert result.etag is None
    assert result.session_ref is None
    assert result.transaction_id == "TX2"


def test_build_not_modified(core):
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.GET,
            DS_URL,
            status=304,
            headers={"Etag": "E1", "X-IBM-Txid": "TX3"},
        )
        result = DatasetReadBuilder(core, "A.B").if_none_match("E1").build()
    assert result.data is None
    assert result.etag == "E1"


def test_build_missing_transaction_id(core):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, DS_URL, body="x")
        with pytest.raises(MissingHeaderError):
            DatasetReadBuilder(core, "A.B").build()


def test_build_error_status(core):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, DS_URL, status=404, body="not found")
        with pytest.raises(ApiError) as info:
            DatasetReadBuilder(core, "A.B").build()
    assert info.value.status == 404
    assert info.value.body == "not found"