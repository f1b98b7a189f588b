import json

import httpx
import pytest

from tgbotkit.client import Client
from tgbotkit.input_file import InputFile
from tgbotkit.request import Request
from tgbotkit.response import TelegramError

SERVER = "http://testserver"

GET_ME_RESULT = {
    "id": 5556648742,
    "is_bot": True,
    "first_name": "go_tg_local_bot",
    "username": "go_tg_local_bot",
    "can_join_groups": True,
    "can_read_all_group_messages": False,
    "supports_inline_queries": False,
}

SEND_DOCUMENT_RESULT = {
    "message_id": 4,
    "from": {
        "id": 5556648742,
        "is_bot": True,
        "first_name": "go_tg_local_bot",
        "username": "go_tg_local_bot",
    },
    "chat": {"id": 103980787, "first_name": "Sasha", "username": "MrLinch", "type": "private"},
    "date": 1655488910,
    "document": {
        "file_name": "types.go",
        "file_id": "BQACAgIAAxkDAAMEexample",
        "file_unique_id": "AgADexample",
        "file_size": 30,
    },
}


def make_client(handler, **kwargs):
    http_client = httpx.Client(transport=httpx.MockTransport(handler))
    return Client("token", server=SERVER, http_client=http_client, **kwargs)


def test_new_client_options():
    seen = {}

    def handler(request):
        seen["path"] = request.url.path
        return httpx.Response(200, json={"ok": True, "result": True})

    client = make_client(handler, test_env=True)
    client.do(Request("getMe"))

    assert client.server == SERVER
    assert client.token() == "token"
    assert seen["path"] == "/bottoken/test/getMe"


def test_download_ok():
    seen = {}

    def handler(request):
        seen["method"] = request.method
        seen["path"] = request.url.path
        return httpx.Response(200, content=b"test")

    client = make_client(handler)
    with client.download("photos/file_1.jpg") as body:
        data = body.read()

    assert data == b"test"
    assert seen == {"method": "GET", "path": "/file/bottoken/photos/file_1.jpg"}


def test_download_error():
    def handler(request):
        return httpx.Response(
            404, json={"ok": False, "error_code": 404, "description": "Not Found"}
        )

    client = make_client(handler)
    with pytest.raises(TelegramError) as info:
        client.download("photos/file_1.jpg")

    assert info.value.code == 404
    assert info.value.message == "Not Found"


def test_execute_simple():
    seen = {}

    def handler(request):
        seen["method"] = request.method
        seen["path"] = request.url.path
        return httpx.Response(200, json={"ok": True, "result": GET_ME_RESULT})

    client = make_client(handler)
    response = client.execute(Request("getMe"))

    assert response.result == GET_ME_RESULT
    assert response.ok is True
    assert seen == {"method": "POST", "path": "/bottoken/getMe"}


def test_execute_url_encoded_body():
    seen = {}

    def handler(request):
        seen["content_type"] = request.headers["Content-Type"]
        seen["body"] = request.content
        return httpx.Response(200, json={"ok": True, "result": True})

    client = make_client(handler)
    response = client.execute(Request("sendMessage").string("chat_id", "1"))

    assert response.ok is True
    assert response.result is True
    assert response.status_code == 200
    assert seen["content_type"] == "application/x-www-form-urlencoded"
    assert seen["body"] == b"chat_id=1"


def test_execute_streaming():
    seen = {}

    def handler(request):
        seen["path"] = request.url.path
        seen["content_type"] = request.headers["Content-Type"]
        seen["body"] = request.content
        return httpx.Response(200, json={"ok": True, "result": SEND_DOCUMENT_RESULT})

    client = make_client(handler)
    file = InputFile.from_bytes("types.go", b"package tg")
    response = client.execute(
        Request("sendDocument").input_file("document", file).string("chat_id", "1234567")
    )

    assert response.result == SEND_DOCUMENT_RESULT
    assert seen["path"] == "/bottoken/sendDocument"
    assert seen["content_type"].startswith("multipart/form-data;")
    assert b'filename="types.go"' in seen["body"]
    assert b"package tg" in seen["body"]
    assert b"1234567" in seen["body"]


def test_execute_streaming_error_response():
    def handler(request):
        request.read()
        return httpx.Response(
            400,
            json={"ok": False, "error_code": 400, "description": "Bad Request: chat not found"},
        )

    client = make_client(handler)
    file = InputFile.from_bytes("types.go", b"package tg")
    response = client.execute(
        Request("sendDocument").input_file("document", file).string("chat_id", "1234567")
    )

    assert response.description == "Bad Request: chat not found"
    assert response.status_code == 400


def test_execute_streaming_encode_error():
    def handler(request):
        return httpx.Response(200, json={"ok": True, "result": True})

    client = make_client(handler)
    request = (
        Request("sendDocument")
        .input_file("document", InputFile.from_bytes("a.txt", b"a"))
        .json("object", object())
    )

    with pytest.raises(ValueError):
        client.execute(request)


def test_do_raises_telegram_error():
    def handler(request):
        return httpx.Response(
            200,
            json={
                "ok": False,
                "error_code": 429,
                "description": "Too Many Requests",
                "parameters": {"retry_after": 3},
            },
        )

    client = make_client(handler)
    with pytest.raises(TelegramError) as info:
        client.do(Request("getMe"))

    assert info.value.code == 429
    assert info.value.parameters.retry_after == 3


def test_interceptors_called():
    calls = []

    def handler(request):
        return httpx.Response(200, json={"ok": True, "result": GET_ME_RESULT})

    def counting(request, invoker):
        calls.append(request.method)
        return invoker(request)

    client = make_client(handler, interceptors=[counting])
    result = client.do(Request("getMe"))

    assert calls == ["getMe"]
    assert result == GET_ME_RESULT


def test_interceptors_order():
    order = []

    def handler(request):
        order.append("http")
        return httpx.Response(200, json={"ok": True, "result": 1})

    def first(request, invoker):
        order.append("first")
        return invoker(request)

    def second(request, invoker):
        order.append("second")
        return invoker(request)

    client = make_client(handler, interceptors=[first, second])
    result = client.do(Request("getMe"))

    assert result == 1
    assert order == ["first", "second", "http"]


def test_me_is_cached():
    hits = []

    def handler(request):
        hits.append(request.url.path)
        return httpx.Response(200, json={"ok": True, "result": GET_ME_RESULT})

    client = make_client(handler)
    first = client.me()
    second = client.me()

    assert first == GET_ME_RESULT
    assert second == GET_ME_RESULT
    assert hits == ["/bottoken/getMe"]


def test_me_error_not_cached():
    replies = iter(
        [
            httpx.Response(200, json={"ok": False, "error_code": 401, "description": "Unauthorized"}),
            httpx.Response(200, json={"ok": True, "result": GET_ME_RESULT}),
        ]
    )

    client = make_client(lambda request: next(replies))
    with pytest.raises(TelegramError):
        client.me()

    assert client.me() == GET_ME_RESULT


def test_response_json_body_parsed():
    def handler(request):
        return httpx.Response(200, content=json.dumps({"ok": True, "result": [1, 2]}).encode())

    client = make_client(handler)
    assert client.do(Request("getUpdates")) == [1, 2]