#!/usr/bin/env python3
"""MQTT probe for a Nuki lock.

Connects to the broker, subscribes to ``<base_topic>/<device_id>/#`` and
prints every decoded field update. Optionally sends one lock action after
connecting.

Broker settings come from ``NUKI_MQTT_*`` environment variables, device
identity from ``NUKI_BASE_TOPIC`` / ``NUKI_DEVICE_ID``; command line flags
override both.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any

# Allow running from repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pynukimqtt import (  # noqa: E402
    FieldUpdate,
    MqttConnectionConfig,
    NukiBridge,
    NukiConfig,
    NukiError,
)

_LOG = logging.getLogger("mqtt_probe")


@dataclass
class ProbeStats:
    started_at: float
    total_updates: int = 0
    last_update_at: float | None = None

    def on_update(self, now: float) -> float | None:
        previous = self.last_update_at
        self.total_updates += 1
        self.last_update_at = now
        return None if previous is None else now - previous


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Watch a Nuki lock over MQTT and optionally send one action.",
    )
    parser.add_argument("--base-topic", help="Base topic (default: $NUKI_BASE_TOPIC or 'nuki').")
    parser.add_argument("--device-id", help="Device id (default: $NUKI_DEVICE_ID).")
    parser.add_argument("--host", help="Broker host (default: $NUKI_MQTT_HOST or localhost).")
    parser.add_argument("--port", type=int, help="Broker port.")
    parser.add_argument(
        "--action",
        choices=("lock", "unlock", "unlatch"),
        help="Send this action once connected.",
    )
    parser.add_argument(
        "--duration",
        type=int,
        default=0,
        help="Maximum runtime in seconds (0 = run until Ctrl+C).",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logs.",
    )
    return parser.parse_args()


def _print_update(stats: ProbeStats, update: FieldUpdate) -> None:
    now = time.time()
    delta = stats.on_update(now)
    gap_text = "first" if delta is None else f"{delta:.1f}s"
    print(
        f"[probe] update#{stats.total_updates} gap={gap_text} "
        f"field={update.field.value} value={update.value!r} source={update.source.value}",
    )


async def _run(args: argparse.Namespace) -> int:
    device_overrides: dict[str, Any] = {}
    if args.base_topic:
        device_overrides["base_topic"] = args.base_topic
    if args.device_id:
        device_overrides["device_id"] = args.device_id
    connection_overrides: dict[str, Any] = {}
    if args.host:
        connection_overrides["host"] = args.host
    if args.port:
        connection_overrides["port"] = args.port

    config = NukiConfig.from_env(**device_overrides)
    connection = MqttConnectionConfig.from_env(**connection_overrides)
    stats = ProbeStats(started_at=time.time())

    print(f"[probe] broker  : {connection.host}:{connection.effective_port}")
    print(f"[probe] filter  : {config.subscription_filter}")

    async with NukiBridge(config, connection, on_update=lambda u: _print_update(stats, u)) as bridge:
        if args.action:
            message = getattr(bridge, args.action)()
            print(f"[probe] sent {message.payload} to {message.topic}")
        try:
            if args.duration > 0:
                await asyncio.sleep(args.duration)
            else:
                await asyncio.Event().wait()
        except asyncio.CancelledError:
            pass
        snapshot = bridge.state

    print("[probe] Final state")
    print(json.dumps(snapshot.model_dump(mode="json"), indent=2, sort_keys=True))
    return 0


def _main() -> int:
    args = _parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return asyncio.run(_run(args))
    except KeyboardInterrupt:
        return 0
    except (NukiError, OSError) as exc:  # pragma: no cover - network/system interaction
        _LOG.error("Probe failed: %s", exc)
        return 2


if __name__ == "__main__":
    raise SystemExit(_main())
