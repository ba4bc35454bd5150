from urllib.parse import parse_qs

import pytest
import responses

from clinvardl.epost import EPostOperation
from clinvardl.errors import HTTPError, ParametersError
from clinvardl.operation import BASE_URL_EPOST
from clinvardl.query import Query

EPOST_XML = b"<ePostResult><QueryKey>7</QueryKey><WebEnv>MCID_post</WebEnv></ePostResult>"


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


def _operation():
    op = EPostOperation()
    op.set_db("clinvar").set_ret_mode("xml")
    return op


def test_execute_posts_ids(mocked):
    mocked.add(responses.POST, BASE_URL_EPOST, body=EPOST_XML, status=200)
    ids = ["1", "2", "3"]
    result = _operation().execute(ids, Query("BRCA1[gene]"))
    assert result.query_key == "7"
    assert result.web_env == "MCID_post"
    request = mocked.calls[0].request
    assert request.method == "POST"
    assert parse_qs(request.body.decode())["id"] == [",".join(ids)]


def test_client_error_is_not_retried(mocked):
    mocked.add(responses.POST, BASE_URL_EPOST, body=b"missing", status=404)
    with pytest.raises(HTTPError) as info:
        _operation().execute(["1"], Query("BRCA1[gene]"))
    assert info.value.status_code == 404
    assert info.value.should_retry() is False


def test_unknown_ret_mode_is_rejected(mocked):
    mocked.add(responses.POST, BASE_URL_EPOST, body=EPOST_XML, status=200)
    op = EPostOperation().set_db("clinvar").set_ret_mode("text")
    with pytest.raises(ParametersError):
        op.execute(["1"], Query("BRCA1[gene]"))


def test_id_parameter_is_replaced_on_each_call(mocked):
    mocked.add(responses.POST, BASE_URL_EPOST, body=EPOST_XML, status=200)
    op = _operation()
    op.execute(["1", "2"], Query("BRCA1[gene]"))
    op.execute(["9"], Query("BRCA1[gene]"))
    assert op.parameters["id"] == "9"
    assert parse_qs(mocked.calls[1].request.body.decode())["id"] == ["9"]