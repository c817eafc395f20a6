"""Publishing and subscribing over an AMQP broker."""

from __future__ import annotations

import dataclasses
import json
from enum import Enum, IntEnum
from typing import Any

import pika


class QueueType(IntEnum):
    DURABLE = 0
    TRANSIENT = 1

    def __str__(self) -> str:
        return self.name.lower()


def _field_name(name: str) -> str:
    """Turn a snake_case attribute name into the wire field name."""
    return "".join("ID" if part == "id" else part.capitalize() for part in name.split("_"))


def _to_jsonable(value: Any) -> Any:
    if callable(getattr(value, "to_dict", None)):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            _field_name(f.name): _to_jsonable(getattr(value, f.name))
            for f in dataclasses.fields(value)
        }
    if isinstance(value, dict):
        return {str(k): _to_jsonable(v) for k, v in sorted(value.items(), key=lambda kv: str(kv[0]))}
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(item) for item in value]
    return value


def publish_json(channel: Any, exchange: str, key: str, value: Any) -> None:
    """Declare a durable direct exchange and publish ``value`` to it as JSON."""
    channel.exchange_declare(
        exchange=exchange,
        exchange_type="direct",
        durable=True,
        auto_delete=False,
        internal=False,
    )
    body = json.dumps(_to_jsonable(value), separators=(",", ":"), ensure_ascii=False)
    channel.basic_publish(
        exchange=exchange,
        routing_key=key,
        body=body.encode("utf-8"),
        properties=pika.BasicProperties(content_type="application/json"),
        mandatory=False,
    )


def declare_and_bind(
    connection: Any,
    exchange: str,
    queue_name: str,
    key: str,
    queue_type: QueueType,
) -> tuple[Any, Any]:
    """Open a channel, declare a queue of the given type and bind it.

    Returns the channel and the queue declaration result.
    """
    channel = connection.channel()
    durable = queue_type == QueueType.DURABLE
    queue = channel.queue_declare(
        queue=queue_name, durable=durable, exclusive=not durable, auto_delete=not durable
    )
    channel.queue_bind(queue=queue_name, exchange=exchange, routing_key=key)
    return channel, queue