#!/usr/bin/env python3
"""Publica os comandos de barra no registro global do Discord.

Uso:
    python scripts/register_commands.py --apply

Padrao: dry-run (imprime o JSON sem chamar a API).
O registro global pode levar alguns minutos para propagar.
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import dataclass
from typing import Any

import httpx

from app.constants.discord_commands import build_all_command_descriptors
from config.settings import DiscordSettings, get_discord_settings


@dataclass(frozen=True)
class RegistrationResult:
    ok: bool
    status_code: int | None = None
    body: Any = None
    error: str | None = None


def register_commands(
    settings: DiscordSettings,
    commands: list[dict[str, Any]],
    *,
    client: httpx.Client | None = None,
) -> RegistrationResult:
    """Executa PUT com a lista completa de comandos (substitui os existentes)."""
    if not settings.bot_token:
        raise ValueError("DISCORD_TOKEN é obrigatório para registrar comandos")
    url = settings.get_commands_endpoint()
    headers = {
        "Content-Type": "application/json",
        "Authorization": f"Bot {settings.bot_token}",
    }

    owns_client = client is None
    http = client or httpx.Client(timeout=settings.request_timeout_seconds)
    try:
        response = http.put(url, headers=headers, json=commands)
    except httpx.HTTPError as exc:
        return RegistrationResult(ok=False, error=f"{type(exc).__name__}: {exc}")
    finally:
        if owns_client:
            http.close()

    if response.is_success:
        return RegistrationResult(ok=True, status_code=response.status_code, body=response.json())

    error_text = f"{url}: {response.status_code} {response.reason_phrase}"
    if response.text:
        error_text = f"{error_text}\n\n{response.text}"
    return RegistrationResult(ok=False, status_code=response.status_code, error=error_text)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--apply",
        action="store_true",
        help="Envia os comandos para o Discord. Sem esta flag executa dry-run.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    commands = build_all_command_descriptors()

    if not args.apply:
        print("[dry-run] comandos a registrar:")
        print(json.dumps(commands, indent=2))
        return 0

    settings = get_discord_settings()
    if not settings.bot_token:
        print("DISCORD_TOKEN é obrigatório", file=sys.stderr)
        return 2
    if not settings.application_id:
        print("DISCORD_APPLICATION_ID é obrigatório", file=sys.stderr)
        return 2

    result = register_commands(settings, commands)
    if result.ok:
        print("Registered all commands")
        print(json.dumps(result.body, indent=2))
        return 0

    print("Error registering commands", file=sys.stderr)
    print(result.error, file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
