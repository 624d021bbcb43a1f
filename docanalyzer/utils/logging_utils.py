import logging
import uuid
import threading
import time
from typing import Optional

_trace_id_storage = threading.local()

_configured_loggers = set()

SERVICE_TAGS = {
    'docanalyzer.services.credentials': 'CREDENTIALS',
    'docanalyzer.services.extraction_service': 'DOCUMENT_AI',
    'docanalyzer.services.ai_service': 'AI_SERVICE',
    'docanalyzer.services.storage': 'STORAGE',
    'docanalyzer.services.analyzer': 'ANALYZER',
    'docanalyzer.services.registry': 'SERVICES',
    'docanalyzer.routes': 'ROUTE',
}


def get_trace_id() -> str:
    trace_id = getattr(_trace_id_storage, 'trace_id', None)
    if trace_id is None:
        trace_id = str(uuid.uuid4())[:8]
        _trace_id_storage.trace_id = trace_id
    return trace_id


def set_trace_id(trace_id: Optional[str] = None) -> str:
    if trace_id is None:
        trace_id = str(uuid.uuid4())[:8]
    _trace_id_storage.trace_id = trace_id
    return trace_id


def clear_trace_id():
    if hasattr(_trace_id_storage, 'trace_id'):
        delattr(_trace_id_storage, 'trace_id')


def mask_key(key: Optional[str]) -> str:
    if not key:
        return "None"
    if len(key) <= 4:
        return "****"
    return f"****{key[-4:]}"


class TraceIdFormatter(logging.Formatter):

    def format(self, record):
        trace_id = get_trace_id()

        tag = 'SYSTEM'
        for module_prefix, module_tag in SERVICE_TAGS.items():
            if record.name.startswith(module_prefix):
                tag = module_tag
                break

        record.trace_id = trace_id
        record.service_tag = tag
        return super().format(record)


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)

    if name in _configured_loggers:
        return logger

    logger.handlers.clear()

    logger.propagate = False

    handler = logging.StreamHandler()
    formatter = TraceIdFormatter(
        '[%(asctime)s] [%(levelname)s] [%(service_tag)s] [%(trace_id)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

    _configured_loggers.add(name)

    return logger


class RequestTimer:

    def __init__(self):
        self.start_time = time.time()
        self.steps = {}
        self.current_step = None
        self.step_start = None

    def start_step(self, step_name: str):
        if self.current_step and self.step_start:
            self.steps[self.current_step] = time.time() - self.step_start
        self.current_step = step_name
        self.step_start = time.time()

    def end_step(self):
        if self.current_step and self.step_start:
            self.steps[self.current_step] = time.time() - self.step_start
            self.current_step = None
            self.step_start = None

    def get_total_time(self) -> float:
        return time.time() - self.start_time

    def get_summary(self) -> dict:
        if self.current_step and self.step_start:
            self.steps[self.current_step] = time.time() - self.step_start

        return {
            "total_time_seconds": round(self.get_total_time(), 2),
            "steps": {k: round(v, 2) for k, v in self.steps.items()}
        }


def log_request_summary(logger: logging.Logger, summary_data: dict):
    summary_lines = [
        "=" * 50,
        "REQUEST SUMMARY",
        "=" * 50,
        f"Trace ID: {summary_data.get('trace_id', 'N/A')}",
        f"File: {summary_data.get('filename', 'N/A')} ({summary_data.get('mime_type', 'N/A')})",
        f"File Size: {summary_data.get('file_size', 'N/A')} bytes",
        f"Extracted Characters: {summary_data.get('extracted_chars', 'N/A')}",
        f"Analysis Status: {summary_data.get('analysis_status', 'N/A')}",
        f"Total Time: {summary_data.get('total_time', 'N/A')} seconds",
    ]

    if 'step_times' in summary_data:
        summary_lines.append("Step Times:")
        for step, time_val in summary_data['step_times'].items():
            summary_lines.append(f"  - {step}: {time_val}s")

    summary_lines.append("=" * 50)

    for line in summary_lines:
        logger.info(line)
