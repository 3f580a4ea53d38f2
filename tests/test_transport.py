import pytest

from resultwriter.transport import BufferedResponse


def test_buffered_response_records_everything():
    response = BufferedResponse()
    response.set_status(201)
    response.set_header("Content-Type", "text/csv")
    assert response.write(b"a,b\n") == 4
    response.write(b"c,d\n")

    assert response.status_code == 201
    assert response.content_type == "text/csv"
    assert response.body == b"a,b\nc,d\n"


def test_buffered_response_status_set_once():
    response = BufferedResponse()
    response.set_status(200)
    with pytest.raises(RuntimeError):
        response.set_status(404)


def test_buffered_response_no_headers_after_body():
    response = BufferedResponse()
    response.write(b"x")

    assert response.status_code == 200
    with pytest.raises(RuntimeError):
        response.set_header("Content-Type", "text/plain")
    with pytest.raises(RuntimeError):
        response.set_status(500)


def test_buffered_response_empty_write_does_not_commit():
    response = BufferedResponse()
    assert response.write(b"") == 0
    response.set_status(204)
    assert response.status_code == 204


def test_to_response():
    response = BufferedResponse()
    response.set_status(404)
    response.set_header("Content-Type", "application/custom")
    response.write(b"body")

    out = response.to_response()

    assert out.status_code == 404
    assert out.headers["content-type"] == "application/custom"
    assert out.body == b"body"


def test_to_response_without_body_has_no_content_type():
    out = BufferedResponse().to_response()

    assert out.status_code == 200
    assert "content-type" not in out.headers
    assert out.body == b""
