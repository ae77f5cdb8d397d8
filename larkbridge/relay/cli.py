"""CLI for the Linear to Lark relay."""

import json
import sys
from typing import Any, Dict, List, Optional, Tuple

import click
import requests
from rich.console import Console
from rich.table import Table

from ..common import ConfigurationError, compute_hmac_sha256, setup_logging
from .config import RelayConfig
from .server import SIGNATURE_HEADER, create_app

console = Console()

SAMPLE_EVENTS: Dict[str, Dict[str, Any]] = {
    "ignored": {
        "action": "create",
        "type": "Comment",
        "url": "https://linear.app/test",
        "data": {
            "id": "fake-001",
            "title": "Ignored",
            "priority": 0,
            "identifier": "TEST-0",
            "state": {"name": "Triage"},
            "assignee": None,
        },
    },
    "create": {
        "action": "create",
        "type": "Issue",
        "url": "https://linear.app/team/issue/TEST-1",
        "data": {
            "id": "fake-002",
            "title": "Auth service returns 500 on login",
            "priority": 1,
            "identifier": "TEST-1",
            "state": {"name": "In Progress"},
            "assignee": {"name": "QA Bot"},
        },
    },
    "update": {
        "action": "update",
        "type": "Issue",
        "url": "https://linear.app/team/issue/TEST-2",
        "data": {
            "id": "fake-003",
            "title": "Update dashboard layout",
            "priority": 3,
            "identifier": "TEST-2",
            "state": {"name": "Done"},
            "assignee": None,
        },
    },
}


def encode_payload(payload: Dict[str, Any]) -> bytes:
    return json.dumps(payload, separators=(",", ":")).encode("utf-8")


def build_smoke_cases(secret: str) -> List[Tuple[str, bytes, Optional[str], int]]:
    """Return (name, body, signature, expected status) for each smoke check."""
    cases = [
        ("Missing signature", b"{}", None, 401),
        ("Wrong signature", b"{}", "deadbeef", 401),
    ]
    for name, key in (
        ("Ignored event type", "ignored"),
        ("Issue create (Urgent)", "create"),
        ("Issue update (Medium, unassigned)", "update"),
    ):
        body = encode_payload(SAMPLE_EVENTS[key])
        cases.append((name, body, compute_hmac_sha256(body, secret), 200))
    return cases


@click.group()
def cli():
    """Linear to Lark webhook relay CLI."""
    pass


@cli.command()
@click.option("--host", default=None, help="Host to bind to (default: HOST or 0.0.0.0)")
@click.option("--port", default=None, type=int, help="Port to bind to (default: PORT or 3000)")
def serve(host, port):
    """Start the relay server."""
    try:
        config = RelayConfig.from_env()
    except ConfigurationError as e:
        console.print(f"❌ Configuration error: {e}", style="red")
        sys.exit(1)

    host = host or config.host
    port = port or config.port
    setup_logging(config.log_level, config.log_dir)

    console.print("🚀 Starting Linear → Lark relay...")
    console.print(f"📡 Host: {host}")
    console.print(f"🔌 Port: {port}")

    try:
        import uvicorn
        uvicorn.run(
            create_app(config),
            host=host,
            port=port,
            log_level=config.log_level.lower(),
        )
    except KeyboardInterrupt:
        console.print("⏹️  Server stopped by user")


@cli.command()
def config():
    """Show current configuration."""
    try:
        config = RelayConfig.from_env()
    except ConfigurationError as e:
        console.print(f"❌ Failed to load configuration: {e}", style="red")
        sys.exit(1)

    console.print("📋 Relay Configuration:")
    console.print(f"  Webhook Secret: {'*' * 8}")
    console.print(f"  Lark Webhook URL: {config.lark_webhook_url or 'Not set'}")
    console.print(f"  Webhook Endpoint: {config.webhook_endpoint}")
    console.print(f"  Host: {config.host}")
    console.print(f"  Port: {config.port}")
    console.print(f"  Delivery Timeout: {config.delivery_timeout}s")
    console.print(f"  Log Level: {config.log_level}")
    console.print(f"  Log Directory: {config.log_dir or 'Not set'}")


@cli.command("send-test")
@click.option("--url", default="http://localhost:3000", show_default=True, help="Base URL of a running relay")
@click.option("--secret", envvar="LINEAR_WEBHOOK_SECRET", required=True, help="Shared webhook secret")
@click.option("--endpoint", envvar="LARKBRIDGE_WEBHOOK_ENDPOINT", default="/webhook", show_default=True,
              help="Webhook path (default: LARKBRIDGE_WEBHOOK_ENDPOINT or /webhook)")
def send_test(url, secret, endpoint):
    """Send signed sample webhooks to a running relay and check the responses."""
    base_url = url.rstrip("/")
    table = Table(title="Relay smoke test")
    table.add_column("Check", style="cyan")
    table.add_column("Expected")
    table.add_column("Got")
    table.add_column("Result")

    failures = 0
    try:
        health = requests.get(f"{base_url}/health", timeout=10)
        table.add_row("Health check", "200", str(health.status_code),
                      "✅" if health.status_code == 200 else "❌")
        failures += health.status_code != 200

        for name, body, signature, expected in build_smoke_cases(secret):
            headers = {"Content-Type": "application/json"}
            if signature is not None:
                headers[SIGNATURE_HEADER] = signature
            response = requests.post(f"{base_url}{endpoint}", data=body, headers=headers, timeout=10)
            passed = response.status_code == expected
            failures += not passed
            table.add_row(name, str(expected), str(response.status_code), "✅" if passed else "❌")

    except requests.exceptions.ConnectionError:
        console.print(f"❌ Could not connect to {base_url}. Is the relay running?", style="red")
        sys.exit(1)

    console.print(table)
    if failures:
        console.print(f"❌ {failures} check(s) failed", style="red")
        sys.exit(1)
    console.print("✅ All checks passed. Check your Lark group for two cards.")


if __name__ == "__main__":
    cli()
