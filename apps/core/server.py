"""
Listener setup for `manage.py serve`.

Composition root for a running process: resolves the task store, builds the
StartupOrchestrator around it and hands the bound socket to uvicorn once the
database is reachable.
"""
import asyncio
import logging
import socket
from functools import partial
from typing import Optional

import uvicorn
from asgiref.sync import sync_to_async
from django.conf import settings

from apps.tasks.store import TaskStoreInterface, get_task_store
from .startup import StartupOrchestrator

logger = logging.getLogger(__name__)


def bind_socket(host: str, port: int) -> socket.socket:
    """Bind (but do not listen on) a TCP socket; uvicorn starts listening."""
    family = socket.AF_INET6 if ':' in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError:
        sock.close()
        raise
    sock.set_inheritable(True)
    return sock


def log_banner(host: str, port: int, database: str) -> None:
    logger.info("=========================================")
    logger.info(f"{settings.APP_NAME} started")
    logger.info("=========================================")
    logger.info(f"Server running on {host}:{port}")
    logger.info(f"Database: {database}")
    logger.info(f"Environment: {settings.APP_ENV}")
    logger.info("=========================================")


async def serve(
    host: str,
    port: int,
    retry_delay: float,
    store: Optional[TaskStoreInterface] = None,
) -> None:
    """Wait for the store, bind, then run uvicorn until shutdown."""
    store = store or get_task_store()
    loop = asyncio.get_running_loop()
    bound = loop.create_future()

    def on_listening(sock, health):
        log_banner(host, port, health.database)
        bound.set_result(sock)

    orchestrator = StartupOrchestrator(
        probe=sync_to_async(store.health_check),
        bind=partial(bind_socket, host, port),
        timer=loop,
        on_listening=on_listening,
        retry_delay=retry_delay,
    )
    await orchestrator.attempt_start()
    sock = await bound

    config = uvicorn.Config(
        "config.asgi:application",
        host=host,
        port=port,
        lifespan="off",
        # Requests are logged by RequestLogMiddleware; logging is configured by Django
        access_log=False,
        log_config=None,
    )
    await uvicorn.Server(config).serve(sockets=[sock])
