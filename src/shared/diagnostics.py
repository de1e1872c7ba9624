"""
Diagnostic utilities.

Process resource snapshots logged around grid passes and renders.
"""

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import psutil

logger = logging.getLogger(__name__)

_MB = 1024 * 1024


def get_memory_info() -> dict[str, Any]:
    """Resident/virtual size of this process and free system memory, in MB."""
    try:
        rss, vms = psutil.Process().memory_info()[:2]
        system = psutil.virtual_memory()
    except psutil.Error as e:
        return {'error': f'Failed to get memory info: {e}'}
    return {
        'process_rss_mb': round(rss / _MB, 2),
        'process_vms_mb': round(vms / _MB, 2),
        'system_available_mb': round(system.available / _MB, 2),
        'system_used_percent': system.percent,
    }


def log_memory_usage(context: str = '') -> None:
    info = get_memory_info()
    if 'error' in info:
        logger.warning(info['error'])
        return
    logger.info(
        'Memory usage%s: RSS=%sMB, Available=%sMB',
        f' ({context})' if context else '',
        info['process_rss_mb'],
        info['system_available_mb'],
    )


@contextmanager
def log_duration(operation: str) -> Iterator[None]:
    """Log wall time of the wrapped block, also when it raises."""
    start = time.perf_counter()
    try:
        yield
    finally:
        logger.info('%s: %.1f ms', operation, (time.perf_counter() - start) * 1000)
