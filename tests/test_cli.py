from types import SimpleNamespace

import requests
from click.testing import CliRunner

from larkbridge.common import verify_hmac_signature
from larkbridge.relay import cli as relay_cli
from larkbridge.relay.cli import build_smoke_cases, cli

SECRET = "cli-secret"


def test_config_masks_secret(monkeypatch):
    monkeypatch.setenv("LINEAR_WEBHOOK_SECRET", SECRET)
    monkeypatch.setenv("LARK_WEBHOOK_URL", "https://lark/hook")

    result = CliRunner().invoke(cli, ["config"])

    assert result.exit_code == 0
    assert SECRET not in result.output
    assert "https://lark/hook" in result.output


def test_config_without_secret_fails(monkeypatch):
    monkeypatch.delenv("LINEAR_WEBHOOK_SECRET", raising=False)

    result = CliRunner().invoke(cli, ["config"])

    assert result.exit_code == 1
    assert "LINEAR_WEBHOOK_SECRET" in result.output


def test_serve_refuses_to_start_without_secret(monkeypatch):
    monkeypatch.delenv("LINEAR_WEBHOOK_SECRET", raising=False)

    result = CliRunner().invoke(cli, ["serve"])

    assert result.exit_code == 1
    assert "Configuration error" in result.output


def test_smoke_cases_are_signed():
    cases = build_smoke_cases(SECRET)

    assert [expected for _, _, _, expected in cases] == [401, 401, 200, 200, 200]
    assert cases[0][2] is None
    for _, body, signature, _ in cases[2:]:
        assert verify_hmac_signature(body, signature, SECRET)


def test_send_test_reports_success(monkeypatch):
    sent = []
    monkeypatch.delenv("LARKBRIDGE_WEBHOOK_ENDPOINT", raising=False)

    def fake_get(url, timeout):
        return SimpleNamespace(status_code=200)

    def fake_post(url, data, headers, timeout):
        sent.append((url, headers))
        signature = headers.get("linear-signature")
        ok = signature is not None and verify_hmac_signature(data, signature, SECRET)
        return SimpleNamespace(status_code=200 if ok else 401)

    monkeypatch.setattr(relay_cli.requests, "get", fake_get)
    monkeypatch.setattr(relay_cli.requests, "post", fake_post)

    result = CliRunner().invoke(cli, ["send-test", "--url", "http://relay:3000/", "--secret", SECRET])

    assert result.exit_code == 0, result.output
    assert "All checks passed" in result.output
    assert len(sent) == 5
    assert all(url == "http://relay:3000/webhook" for url, _ in sent)


def test_send_test_uses_configured_endpoint(monkeypatch):
    sent = []

    def fake_post(url, data, headers, timeout):
        sent.append(url)
        return SimpleNamespace(status_code=200)

    monkeypatch.setenv("LARKBRIDGE_WEBHOOK_ENDPOINT", "/hooks/linear")
    monkeypatch.setattr(relay_cli.requests, "get", lambda url, timeout: SimpleNamespace(status_code=200))
    monkeypatch.setattr(relay_cli.requests, "post", fake_post)

    CliRunner().invoke(cli, ["send-test", "--url", "http://relay:3000", "--secret", SECRET])

    assert sent
    assert all(url == "http://relay:3000/hooks/linear" for url in sent)


def test_send_test_reports_unreachable_relay(monkeypatch):
    def refuse(*args, **kwargs):
        raise requests.exceptions.ConnectionError("refused")

    monkeypatch.setattr(relay_cli.requests, "get", refuse)

    result = CliRunner().invoke(cli, ["send-test", "--secret", SECRET])

    assert result.exit_code == 1
    assert "Could not connect" in result.output
