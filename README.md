# tgbotkit

A small, synchronous, low-level toolkit for talking to the Telegram Bot API.
It gives you building blocks rather than a framework.

| Module | What it holds |
| --- | --- |
| `tgbotkit.request` | `Request`: method name plus string, JSON and file arguments |
| `tgbotkit.encoder` | `Encoder`, `URLEncodedEncoder`, `MultipartEncoder` |
| `tgbotkit.input_file` | `InputFile`: a named body to upload |
| `tgbotkit.client` | `Client`: sends requests, raises on errors, downloads files |
| `tgbotkit.call` | `Call`, `CallNoResult`, `bind_client` |
| `tgbotkit.interceptors` | `retry_flood_error`, `retry_internal_server_error`, `default_parse_mode`, `method_filter` |
| `tgbotkit.response` | `Response`, `ResponseParameters`, `TelegramError` |
| `tgbotkit.parse_mode` | `ParseMode` and the `HTML`, `MD`, `MD2` modes |
| `tgbotkit.reactions` | `ReactionType` and the `EMOJI_*` reactions, `EMOJI_ALL` |

## Installation

```
pip install tgbotkit
```

The only runtime dependency is `httpx`.

## Building a request

```python
from tgbotkit.request import Request

request = Request("sendMessage").chat_id("chat_id", 1).string("text", "Hello")

print(request.to_json())
# {"chat_id":"1","method":"sendMessage","text":"Hello"}
```

Setters return the request, so they chain: `string`, `bool` (`"true"`/`"false"`),
`int`, `float`, `chat_id`, `stringer` (stores `str(value)`), `json` and
`input_file`. Values given to `json` are serialised to JSON strings when the
request is encoded; objects with a `to_dict()` or `to_json()` method and
dataclasses are serialised through those. `has`, `has_files`, `get_arg` and
`get_json` (the last two return `None` for a missing name) let interceptors
inspect a request before it is sent.

`encode(encoder)` writes every file and then every argument to an `Encoder`.
`to_json()` returns the arguments and the `"method"` key as a compact JSON
object with sorted keys; it raises `ValueError` when the request carries files.

## Uploading files

```python
from tgbotkit.input_file import InputFile
from tgbotkit.request import Request

document = InputFile.from_bytes("notes.txt", b"some text")

request = (
    Request("sendDocument")
    .string("chat_id", "1")
    .input_file("document", document)
)
```

`InputFile.from_path(path)` opens a local file in binary mode and names it
after the path's last component; close it after sending, with `close()` or by
using the file as a context manager. `with_name(name)` returns a renamed copy.

A request that carries files is sent as `multipart/form-data`, streamed to the
server while it is being encoded; other requests are sent as
`application/x-www-form-urlencoded`. `URLEncodedEncoder.write_file` raises
`TypeError`.

## Sending requests

```python
from tgbotkit.client import Client
from tgbotkit.request import Request

with Client("token") as client:
    me = client.me()                          # cached after the first call
    result = client.do(Request("getChat").chat_id("chat_id", 1))
```

`Client` takes keyword options: `server` (default
`https://api.telegram.org`), `http_client` (an `httpx.Client`; one is created
and closed by the client otherwise), `test_env` (use the test environment
URLs) and `interceptors`.

- `do(request)` runs the request through the interceptors and returns the
  decoded `result` of the reply as plain JSON data (dicts, lists, strings…).
  When the reply has `"ok": false` it raises `TelegramError` with `code`,
  `message` and optional `parameters` (`ResponseParameters` with
  `migrate_to_chat_id` and `retry_after`).
- `execute(request)` sends the request without interceptors and returns the
  whole `Response` envelope, including the HTTP `status_code`, without raising
  on `"ok": false`.
- `download(path)` fetches a file by the path returned from `getFile` and
  returns a readable stream; close it after use. A non-200 reply raises
  `TelegramError`.

`TelegramError.contains(text)` checks whether `text` occurs in the lower-cased
description.

## Prepared calls

```python
from tgbotkit.call import Call, CallNoResult, bind_client
from tgbotkit.request import Request

me = bind_client(Call(Request("getMe")), client).do()

rename = CallNoResult(Request("setChatTitle").chat_id("chat_id", 1).string("title", "Hello"))
rename.bind(client)
rename.do_void()
```

`Call` accepts an optional `parse` callable applied to the result of `do()`.
Executing an unbound call raises `RuntimeError`. Both classes offer `to_json()`.

## Interceptors

An interceptor is a callable `interceptor(request, invoker)` that may change the
request, call `invoker(request)` (zero or more times) and return its result.
Interceptors run in the order given to the client.

```python
from datetime import timedelta

from tgbotkit.client import Client
from tgbotkit.interceptors import (
    default_parse_mode,
    method_filter,
    retry_flood_error,
    retry_internal_server_error,
)
from tgbotkit.parse_mode import HTML

client = Client(
    "token",
    interceptors=[
        method_filter(default_parse_mode(HTML), "sendMessage"),
        retry_flood_error(tries=3, max_retry_after=timedelta(minutes=5)),
        retry_internal_server_error(),
    ],
)
```

- `retry_flood_error(tries=3, max_retry_after=1 hour, sleep=time.sleep)` repeats
  a call that failed with error 429, waiting the `retry_after` the server asked
  for; a longer wait than `max_retry_after` is raised at once.
- `retry_internal_server_error(tries=10, delay=100 ms, sleep=time.sleep)`
  repeats a call that failed with error 500, waiting `delay * 2**i` plus a
  random jitter of up to the same amount before attempt `i + 1`.
- `default_parse_mode(mode)` sets `parse_mode` when the request has none.
- `method_filter(interceptor, *methods)` applies `interceptor` only to the
  listed methods.

`sleep` receives seconds; pass your own to log or shorten waits.

## Formatting text

```python
from tgbotkit.parse_mode import HTML, MD2

HTML.bold("Hello", "World")                 # '<b>Hello World</b>'
HTML.link("Docs", "https://example.com")    # '<a href="https://example.com">Docs</a>'
MD2.sep(", ").italic("a", "b")              # '_a, b_'
MD2.escape("go.tg")                         # 'go\\.tg'
HTML.text("line one", "line two")           # joined with '\n'
```

Each mode offers `text`, `line`, `bold`, `italic`, `underline`, `strike`,
`spoiler`, `link`, `code`, `pre`, `blockquote` and `escape`; `str(mode)` is the
API name (`HTML`, `Markdown`, `MarkdownV2`). The legacy `MD` mode has no
underline, strike, spoiler or blockquote markup; those helpers return the
joined text unchanged.

## Reactions

```python
from tgbotkit.reactions import EMOJI_ALL, ReactionType

thumbs_up = ReactionType.of_emoji("👍")
print(thumbs_up.to_json())
# {"type":"emoji","emoji":"👍"}

reaction = ReactionType.from_json('{"type": "custom_emoji", "custom_emoji_id": "12345"}')
print(reaction.type())
# custom_emoji
```

`to_dict`/`from_dict` work with plain dicts. Unknown reaction types raise
`ValueError`; a non-string `type` raises `TypeError`. `EMOJI_ALL` lists every
emoji reaction a bot may set.

## What this package does not do

It only sends requests and decodes replies. It has no typed models of API
objects and no ready-made method wrappers: results come back as plain JSON
data and method names are passed as strings. It does not receive updates —
there is no long polling loop, webhook server, handler routing or session
storage — and it has no command-line tool. It is synchronous only.

## Running the tests

```
pip install -e ".[test]"
pytest
```