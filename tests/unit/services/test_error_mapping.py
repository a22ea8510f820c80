import pytest

from taskflow.api.error import ClientError, ServerError, raise_for_error
from taskflow.libs.result import Error, ErrorKind


@pytest.mark.parametrize(
    "kind, status_code",
    [
        (ErrorKind.validation, 400),
        (ErrorKind.unauthorized, 401),
        (ErrorKind.forbidden, 403),
        (ErrorKind.not_found, 404),
        (ErrorKind.conflict, 409),
        (ErrorKind.unavailable, 503),
    ],
)
def test_client_kinds_map_to_status(kind, status_code):
    with pytest.raises(ClientError) as exc_info:
        raise_for_error(Error("CODE", "message", kind))

    assert exc_info.value.status_code == status_code
    assert exc_info.value.base_error.code == "CODE"


def test_internal_kind_is_server_error():
    with pytest.raises(ServerError) as exc_info:
        raise_for_error(Error("BOOM", "message", ErrorKind.internal))

    assert exc_info.value.status_code == 500
