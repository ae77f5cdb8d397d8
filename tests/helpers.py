import json
from typing import Any, Callable, Dict, List

import httpx

from larkbridge.common import compute_hmac_sha256
from larkbridge.models import LinearAssignee, LinearIssue, LinearIssueState, LinearWebhookEvent

SECRET = "test-webhook-secret"
LARK_URL = "https://open.larksuite.com/open-apis/bot/v2/hook/test"


def issue_payload(**overrides: Any) -> Dict[str, Any]:
    payload = {
        "action": "update",
        "type": "Issue",
        "url": "https://example/ENG-42",
        "data": {
            "id": "issue-42",
            "title": "Fix bug",
            "priority": 2,
            "state": {"name": "In Progress"},
            "assignee": {"name": "Ada"},
            "identifier": "ENG-42",
        },
    }
    payload.update(overrides)
    return payload


def encode(payload: Dict[str, Any]) -> bytes:
    return json.dumps(payload).encode("utf-8")


def sign(body: bytes, secret: str = SECRET) -> str:
    return compute_hmac_sha256(body, secret)


class FakeLark:
    """Records posts and answers with a configurable handler."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.respond: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(200, json={"code": 0, "msg": "success"})
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)

    def payloads(self) -> List[Dict[str, Any]]:
        return [json.loads(request.content) for request in self.requests]

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


def make_event(action="create", kind="Issue", priority=1, assignee="Ada", with_issue=True):
    issue = None
    if with_issue:
        issue = LinearIssue(
            id="id-1",
            title="Auth service returns 500 on login",
            priority=priority,
            state=LinearIssueState(name="In Progress"),
            assignee=LinearAssignee(name=assignee) if assignee else None,
            identifier="ENG-123",
        )
    return LinearWebhookEvent(
        action=action,
        kind=kind,
        url="https://linear.app/team/issue/ENG-123",
        issue=issue,
    )


def deeply_nested_payload(depth: int = 100000) -> bytes:
    return (
        b'{"action":"create","type":"Issue","url":"u","data":'
        + b"[" * depth + b"]" * depth + b"}"
    )
