"""Celery application for batch fingerprinting and corpus matching.

Fingerprinting N documents is embarrassingly parallel; workers fan it out.
"""
from __future__ import annotations

from celery import Celery
from kombu import Exchange, Queue

from docprint.config import settings

celery = Celery(
    "docprint",
    broker=settings.CELERY_BROKER_URL,
    backend=settings.CELERY_RESULT_BACKEND,
    include=["docprint.workers.fingerprint"],
)

# ── Serialisation ──
celery.conf.accept_content = ["json"]
celery.conf.task_serializer = "json"
celery.conf.result_serializer = "json"
celery.conf.timezone = "UTC"
celery.conf.enable_utc = True

# ── Reliability ──
celery.conf.task_acks_late = True
celery.conf.worker_prefetch_multiplier = 1
celery.conf.task_reject_on_worker_lost = True
celery.conf.task_always_eager = settings.CELERY_TASK_ALWAYS_EAGER

# ── Exchanges & Queues ──
default_exchange = Exchange("docprint", type="direct")

celery.conf.task_queues = (
    Queue("fingerprint", default_exchange, routing_key="fingerprint"),
    Queue("match", default_exchange, routing_key="match"),
)

celery.conf.task_default_queue = "fingerprint"
celery.conf.task_default_exchange = "docprint"
celery.conf.task_default_routing_key = "fingerprint"

# ── Task routes ──
celery.conf.task_routes = {
    "docprint.workers.fingerprint.run_fingerprint": {"queue": "fingerprint"},
    "docprint.workers.fingerprint.run_match": {"queue": "match"},
    "docprint.workers.fingerprint.run_collection_search": {"queue": "match"},
}
