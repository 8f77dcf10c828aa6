"""Circular command buffer, in-memory character-device model, linked queues and small systems utilities."""

__version__ = "0.1.0"

__all__ = [
    "args_check",
    "circular_buffer",
    "device",
    "dlist",
    "mutex_thread",
    "queue_demo",
    "ring",
    "shannon",
    "slist",
    "stailq",
    "structs",
    "systemcalls",
    "tailq",
    "thread_demos",
    "timestamp",
    "validate",
    "writer",
]