import threading
import time
from typing import Any, Dict, Iterator

import pytest
import uvicorn
from fastapi import Body, FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

app = FastAPI()


@app.get("/posts/1")
def get_post() -> Dict[str, Any]:
    return {"id": 1, "userId": 1, "title": "first post", "body": "quia et suscipit\nsuscipit"}


@app.post("/posts", status_code=201)
def create_post(payload: Dict[str, Any] = Body(...)) -> Dict[str, Any]:
    return {**payload, "id": 101}


@app.put("/posts/{post_id}")
async def replace_post(post_id: int, request: Request) -> Dict[str, Any]:
    return {"id": post_id, "method": request.method, "body": await request.json()}


@app.patch("/posts/{post_id}")
async def update_post(post_id: int, request: Request) -> Dict[str, Any]:
    return {"id": post_id, "method": request.method, "body": await request.json()}


@app.delete("/posts/{post_id}")
def delete_post(post_id: int) -> Dict[str, Any]:
    return {}


@app.post("/echo")
async def echo(request: Request) -> Dict[str, Any]:
    raw = await request.body()
    return {
        "method": request.method,
        "content_type": request.headers.get("content-type"),
        "user_agent": request.headers.get("user-agent"),
        "body": raw.decode("utf-8"),
    }


@app.get("/login")
def login() -> JSONResponse:
    response = JSONResponse({"ok": True})
    response.set_cookie("session", "abc123", httponly=True, path="/", samesite="lax")
    response.set_cookie("theme", "dark", max_age=3600, samesite="strict")
    return response


@app.get("/logout")
def logout() -> JSONResponse:
    response = JSONResponse({"ok": True})
    response.delete_cookie("session", path="/")
    return response


@app.get("/whoami")
def whoami(request: Request) -> Dict[str, Any]:
    return {"cookies": dict(request.cookies)}


@app.get("/text")
def text() -> PlainTextResponse:
    return PlainTextResponse("hello\nworld")


@app.get("/binary")
def binary() -> Response:
    return Response(content=b"\x89PNG\r\n\x1a\n\x00\x00", media_type="image/png")


@app.get("/unlabelled")
def unlabelled() -> Response:
    # valid JSON bytes, no content-type header
    return Response(content=b'{"a": 1}')


@app.get("/bad-json")
def bad_json() -> Response:
    return Response(content=b"{not json", media_type="application/json")


@app.get("/bad-utf8")
def bad_utf8() -> Response:
    return Response(content=b"\xff\xfe\xfa", media_type="text/plain")


@app.get("/multi-header")
def multi_header() -> PlainTextResponse:
    response = PlainTextResponse("ok")
    response.headers.append("X-Trace", "first")
    response.headers.append("X-Trace", "second")
    return response


@app.get("/interleaved")
def interleaved() -> PlainTextResponse:
    response = PlainTextResponse("ok")
    response.headers.append("X-A", "1")
    response.headers.append("X-B", "2")
    response.headers.append("X-A", "3")
    return response


@app.get("/nested")
def nested() -> Dict[str, Any]:
    return {
        "data": {"items": [{"name": "a", "qty": 1}, {"name": "b", "qty": 2}]},
        "a/b": "slash",
        "m~n": "tilde",
    }


class ThreadedServer(uvicorn.Server):
    def install_signal_handlers(self) -> None:
        # not on the main thread
        pass


@pytest.fixture(scope="session")
def live_server() -> Iterator[str]:
    config = uvicorn.Config(app=app, host="127.0.0.1", port=0, lifespan="off", log_level="warning")
    server = ThreadedServer(config=config)
    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()

    deadline = time.monotonic() + 10
    while not server.started:
        if time.monotonic() > deadline or not thread.is_alive():
            raise RuntimeError("test server failed to start")
        time.sleep(0.02)

    port = server.servers[0].sockets[0].getsockname()[1]
    try:
        yield f"http://127.0.0.1:{port}"
    finally:
        server.should_exit = True
        thread.join(timeout=5)
